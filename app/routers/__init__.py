# =============================================================================
# app/routers/ - Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - public.py: Home page, post pages and the contact API
# - admin.py: Admin dashboard and post/message management
# - health.py: Health check endpoints
#
# Login/logout routes live in app/auth/routes.py.
# Each router is mounted in main.py.
# =============================================================================

from . import admin
from . import health
from . import public

__all__ = [
    "admin",
    "health",
    "public",
]
