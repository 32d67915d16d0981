# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for admin authentication.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class AdminSession(BaseModel):
    """
    Server-side state of a logged-in admin.

    Held by the SessionStore and looked up from the session cookie on every
    guarded request.
    """

    model_config = ConfigDict(frozen=True)

    is_admin: bool = True
    admin_email: str
    expires_at: float = Field(..., description="Unix time after which the session is invalid")


class LoginForm(BaseModel):
    """Body of POST /admin/login."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
