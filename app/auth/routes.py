# =============================================================================
# app/auth/routes.py - Admin Login Routes
# =============================================================================
# - GET  /admin/login   login form (redirects to /admin if already logged in)
# - POST /admin/login   check credentials, start a session
# - GET  /admin/logout  end the session
#
# There is a single admin account, configured with ADMIN_EMAIL and
# ADMIN_PASSWORD.
# =============================================================================

import logging
import secrets
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from app.auth.dependencies import SessionStoreDep, get_admin_session
from app.auth.models import AdminSession, LoginForm
from app.config import settings
from app.dependencies import PayloadDep
from app.rendering import render_admin_login, render_page

logger = logging.getLogger(__name__)

router = APIRouter()


def _credentials_match(form: LoginForm) -> bool:
    # Evaluate both comparisons so timing doesn't reveal which one failed
    email_ok = secrets.compare_digest(form.email.encode(), settings.ADMIN_EMAIL.encode())
    password_ok = secrets.compare_digest(form.password.encode(), settings.ADMIN_PASSWORD.encode())
    return email_ok and password_ok


@router.get("/login", response_class=HTMLResponse)
def login_page(
    error: str | None = None,
    session: Optional[AdminSession] = Depends(get_admin_session),
):
    """Show the login form."""
    if session is not None:
        return RedirectResponse("/admin", status_code=status.HTTP_303_SEE_OTHER)

    return HTMLResponse(render_page("Admin Login", render_admin_login(error)))


@router.post("/login")
def login(payload: PayloadDep, store: SessionStoreDep):
    """
    Check the submitted credentials.

    Success starts a session and redirects to /admin; anything else
    redirects back to the form with ?error=invalid.
    """
    try:
        form = LoginForm.model_validate(payload)
    except ValidationError:
        return RedirectResponse("/admin/login?error=invalid", status_code=status.HTTP_303_SEE_OTHER)

    if not _credentials_match(form):
        logger.warning(f"Failed admin login for {form.email!r}")
        return RedirectResponse("/admin/login?error=invalid", status_code=status.HTTP_303_SEE_OTHER)

    cookie_value = store.create(form.email)
    logger.info(f"Admin logged in: {form.email}")

    response = RedirectResponse("/admin", status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        cookie_value,
        max_age=store.max_age_seconds,
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )
    return response


@router.get("/logout")
def logout(request: Request, store: SessionStoreDep):
    """End the session and go back to the home page."""
    store.destroy(request.cookies.get(settings.SESSION_COOKIE_NAME))

    response = RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return response
