# =============================================================================
# app/routers/admin.py - Admin Dashboard Endpoints
# =============================================================================
# Every endpoint here requires an admin session; requests without one are
# redirected to /admin/login by the require_admin guard.
#
# Form posts answer with a redirect back to the dashboard carrying a status
# flag: /admin?msg=ok|deleted|missing|invalid|error
# =============================================================================

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import BaseModel, Field, ValidationError

from app.auth import AdminSession, require_admin
from app.dependencies import DatabaseDep, PayloadDep
from app.rendering import render_admin_dashboard, render_page
from core.models import PostUpsert
from core.services import MessageService, PostService
from lib.database import DatabaseError

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])


# =============================================================================
# Request Models
# =============================================================================

class PostDeleteForm(BaseModel):
    """Body of POST /admin/posts/delete."""
    slug: str = Field(..., min_length=1)


class MessageDeleteForm(BaseModel):
    """Body of POST /admin/messages/delete."""
    id: int = Field(..., ge=1)


# =============================================================================
# Helpers
# =============================================================================

def _back_to_dashboard(msg: str) -> RedirectResponse:
    return RedirectResponse(f"/admin?msg={msg}", status_code=status.HTTP_303_SEE_OTHER)


def _form_error(error: ValidationError) -> str:
    """'missing' when a required field is absent or empty, else 'invalid'."""
    for err in error.errors():
        if err["type"] in ("missing", "string_too_short") or err.get("input") == "":
            return "missing"
    return "invalid"


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_class=HTMLResponse)
def dashboard(
    database: DatabaseDep,
    msg: str | None = None,
    session: AdminSession = Depends(require_admin),
):
    """
    Admin dashboard: messages and posts, newest first.

    Either list degrades to empty if it can't be read.
    """
    try:
        with database.connect() as conn:
            messages = MessageService.list_messages(conn)
    except DatabaseError as e:
        logger.warning(f"Dashboard shown without messages: {e}")
        messages = []

    try:
        with database.connect() as conn:
            posts = PostService.list_posts(conn)
    except DatabaseError as e:
        logger.warning(f"Dashboard shown without posts: {e}")
        posts = []

    body = render_admin_dashboard(
        messages,
        posts,
        admin_email=session.admin_email,
        msg=msg,
    )
    return HTMLResponse(render_page("Admin Dashboard", body))


@router.post("/posts")
def save_post(database: DatabaseDep, payload: PayloadDep):
    """Create a post, or update the post with the same slug."""
    try:
        post = PostUpsert.model_validate(payload)
    except ValidationError as e:
        return _back_to_dashboard(_form_error(e))

    try:
        with database.connect() as conn:
            PostService.upsert_post(conn, post)
    except DatabaseError as e:
        logger.error(f"Could not save post {post.slug!r}: {e}")
        return _back_to_dashboard("error")

    return _back_to_dashboard("ok")


@router.post("/posts/delete")
def delete_post(database: DatabaseDep, payload: PayloadDep):
    """Delete a post by slug. Unknown slugs are ignored."""
    try:
        form = PostDeleteForm.model_validate(payload)
    except ValidationError as e:
        return _back_to_dashboard(_form_error(e))

    try:
        with database.connect() as conn:
            PostService.delete_post(conn, form.slug)
    except DatabaseError as e:
        logger.error(f"Could not delete post {form.slug!r}: {e}")
        return _back_to_dashboard("error")

    return _back_to_dashboard("deleted")


@router.post("/messages/delete")
def delete_message(database: DatabaseDep, payload: PayloadDep):
    """Delete a contact message by id. Unknown ids are ignored."""
    try:
        form = MessageDeleteForm.model_validate(payload)
    except ValidationError as e:
        return _back_to_dashboard(_form_error(e))

    try:
        with database.connect() as conn:
            MessageService.delete_message(conn, form.id)
    except DatabaseError as e:
        logger.error(f"Could not delete message {form.id}: {e}")
        return _back_to_dashboard("error")

    return _back_to_dashboard("deleted")
