# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Provides the session store and the admin session guard.
#
# Usage:
#   from app.auth import require_admin, AdminSession
#
#   @router.get("/protected")
#   def protected(session: AdminSession = Depends(require_admin)):
#       return {"email": session.admin_email}
# =============================================================================

import logging
from typing import Annotated, Optional

from fastapi import Depends, Request

from app.auth.models import AdminSession
from app.auth.sessions import SessionStore
from app.config import settings
from app.exceptions import LoginRequired

logger = logging.getLogger(__name__)


def get_session_store(request: Request) -> SessionStore:
    """Return the SessionStore created at startup."""
    return request.app.state.sessions


SessionStoreDep = Annotated[SessionStore, Depends(get_session_store)]


def get_admin_session(
    request: Request,
    store: SessionStore = Depends(get_session_store),
) -> Optional[AdminSession]:
    """
    Look up the admin session referenced by the session cookie.

    Returns None if there is no cookie, the cookie is forged or expired,
    the session is unknown, or it is not an admin session.
    """
    session = store.get(request.cookies.get(settings.SESSION_COOKIE_NAME))
    if session is None or not session.is_admin:
        return None
    return session


def require_admin(
    session: Optional[AdminSession] = Depends(get_admin_session),
) -> AdminSession:
    """
    Allow the request only for a logged-in admin.

    Raises:
        LoginRequired: Turned into a redirect to /admin/login
    """
    if session is None:
        raise LoginRequired()
    return session
