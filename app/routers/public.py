# =============================================================================
# app/routers/public.py - Public Pages & Contact API
# =============================================================================
# Endpoints anyone can reach:
# - GET  /            home page (projects, blog list, contact form)
# - GET  /post/{slug} a single post
# - POST /api/contact store a contact message
# =============================================================================

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import HTMLResponse
from pydantic import ValidationError

from app.auth import AdminSession, get_admin_session
from app.dependencies import DatabaseDep, PayloadDep
from app.exceptions import MissingFieldsError, StoreUnavailableError
from app.rendering import render_home, render_not_found, render_page, render_post
from core.models import DEFAULT_PROJECTS, ContactRequest, ContactResponse
from core.services import MessageService, PostService
from lib.database import DatabaseError

logger = logging.getLogger(__name__)

router = APIRouter()

CONTACT_FIELDS = ["name", "email", "message"]


# =============================================================================
# Pages
# =============================================================================

@router.get("/", response_class=HTMLResponse)
def home(
    database: DatabaseDep,
    session: Optional[AdminSession] = Depends(get_admin_session),
):
    """
    Home page.

    The blog list degrades to empty if the posts can't be read, including
    when the database file can't be opened at all.
    """
    try:
        with database.connect() as conn:
            posts = PostService.list_posts(conn)
    except DatabaseError as e:
        logger.warning(f"Showing home page without posts: {e}")
        posts = []

    body = render_home(DEFAULT_PROJECTS, posts, is_admin=session is not None)
    return HTMLResponse(render_page("Home", body))


@router.get("/post/{slug}", response_class=HTMLResponse)
def show_post(slug: str, database: DatabaseDep):
    """
    Show one post. Unknown slugs (and read failures) get a 404 page.
    """
    try:
        with database.connect() as conn:
            post = PostService.get_post(conn, slug)
    except DatabaseError as e:
        logger.warning(f"Could not load post {slug!r}: {e}")
        post = None

    if post is None:
        return HTMLResponse(
            render_page("Not found", render_not_found("Post")),
            status_code=status.HTTP_404_NOT_FOUND,
        )

    return HTMLResponse(render_page(post.title, render_post(post)))


@router.get("/favicon.ico", include_in_schema=False)
def favicon():
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# Contact API
# =============================================================================

@router.post("/api/contact", response_model=ContactResponse)
def submit_contact(database: DatabaseDep, payload: PayloadDep):
    """
    Store a contact message.

    Accepts JSON or form data with name, email and message. Every field
    must be present and non-empty.

    Returns:
        {"success": true, "id": <message id>}

    Raises:
        400: If a field is missing or empty
        500: If the message could not be stored
    """
    try:
        contact = ContactRequest.model_validate(payload)
    except ValidationError as e:
        missing = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        logger.info(f"Rejected contact submission, invalid fields: {missing}")
        raise MissingFieldsError(
            fields=missing or CONTACT_FIELDS,
            message="name, email and message required",
        )

    try:
        with database.connect() as conn:
            message_id = MessageService.create_message(conn, contact)
    except DatabaseError as e:
        raise StoreUnavailableError(e.message) from e

    return ContactResponse(id=message_id)
