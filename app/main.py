# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the portfolio site.
# It configures the FastAPI application with lifespan, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload --port 4000
#   python -m app.main
#
# Then open http://localhost:4000 (admin login at /admin/login).
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app import __version__
from app.auth import SessionStore
from app.auth import routes as auth_routes
from app.config import settings
from app.exceptions import (
    LoginRequired,
    PortfolioException,
    database_exception_handler,
    login_required_handler,
    portfolio_exception_handler,
)
from app.routers import admin, health, public
from lib.database import Database, DatabaseError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs on startup and shutdown:
    - Startup: Open the database, create the session store
    - Shutdown: Drop all sessions
    """
    # Startup
    logger.info(f"Starting portfolio site in {settings.ENVIRONMENT} mode")
    if settings.uses_default_credentials and not settings.is_development:
        logger.warning(
            "Default ADMIN_PASSWORD or SESSION_SECRET in use; "
            "set both before exposing the site"
        )

    database = Database(settings.DATABASE_PATH)
    database.initialize()

    app.state.database = database
    app.state.sessions = SessionStore(
        secret=settings.SESSION_SECRET,
        max_age_seconds=settings.session_max_age_seconds,
    )

    yield

    # Shutdown
    logger.info("Shutting down portfolio site")
    app.state.sessions = None


# Create FastAPI application
app = FastAPI(
    title="Portfolio",
    description="Portfolio and blog with an admin CMS backed by SQLite.",
    version=__version__,
    docs_url="/docs" if settings.is_development else None,
    redoc_url=None,
    lifespan=lifespan,
)


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(LoginRequired, login_required_handler)
app.add_exception_handler(PortfolioException, portfolio_exception_handler)
app.add_exception_handler(DatabaseError, database_exception_handler)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Public pages and contact API
app.include_router(public.router, tags=["Public"])

# Admin login/logout
app.include_router(auth_routes.router, prefix="/admin", tags=["Auth"])

# Admin dashboard (guarded)
app.include_router(admin.router, prefix="/admin", tags=["Admin"])

# Health check endpoints
app.include_router(health.router, tags=["Health"])


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Portfolio running at http://localhost:{settings.API_PORT}")
    logger.info("Admin login -> /admin/login")
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
