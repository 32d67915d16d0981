# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The database handle is created once in the app lifespan and kept on
# app.state; each request receives it through get_database and opens its
# own connection inside the route, so a file that can't be opened is a
# DatabaseError the route itself handles.
# =============================================================================

import json
import logging
from typing import Annotated, Any

from fastapi import Depends, Request

from lib.database import Database

logger = logging.getLogger(__name__)


def get_database(request: Request) -> Database:
    """Return the Database handle created at startup."""
    return request.app.state.database


async def get_payload(request: Request) -> dict[str, Any]:
    """
    Read the request body as a flat dict.

    JSON bodies and urlencoded/multipart forms are both accepted, so the
    same schema validates an API call and a plain HTML form post. A body
    that can't be parsed is treated as empty.
    """
    content_type = request.headers.get("content-type", "")

    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.debug(f"Ignoring malformed JSON body on {request.url.path}")
            return {}
        return data if isinstance(data, dict) else {}

    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


# Type aliases for dependency injection
DatabaseDep = Annotated[Database, Depends(get_database)]
PayloadDep = Annotated[dict[str, Any], Depends(get_payload)]
