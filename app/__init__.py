# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App entry point, lifespan, error handlers
# - config.py: Environment variable loading and settings
# - auth/: Admin login, server-side sessions and the route guard
# - routers/: Public pages, admin dashboard and health endpoints
# - rendering.py + templates/: HTML page rendering
#
# The app layer is thin - it handles HTTP concerns and delegates
# store access to the core/ package.
# =============================================================================

__version__ = "1.0.0"
