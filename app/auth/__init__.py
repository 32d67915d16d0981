# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Provides session-cookie admin authentication.
#
# Usage:
#   from app.auth import require_admin, AdminSession
#
#   @router.get("/admin")
#   def dashboard(session: AdminSession = Depends(require_admin)):
#       return {"email": session.admin_email}
# =============================================================================

from app.auth.dependencies import (
    SessionStoreDep,
    get_admin_session,
    get_session_store,
    require_admin,
)
from app.auth.models import AdminSession, LoginForm
from app.auth.sessions import SessionStore

__all__ = [
    "SessionStoreDep",
    "get_admin_session",
    "get_session_store",
    "require_admin",
    "AdminSession",
    "LoginForm",
    "SessionStore",
]
