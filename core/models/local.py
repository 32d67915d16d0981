# =============================================================================
# core/models/local.py - Local CMS Schemas
# =============================================================================
# Records kept by the single-user local CMS workspace:
# - LocalProject: A project card with language and links
# - LocalPost: A markdown blog post
#
# Ids are strings assigned from the creation timestamp; a record without an
# id has not been saved yet.
# =============================================================================

from pydantic import BaseModel, Field

from lib.utils import utc_now_iso


class LocalProject(BaseModel):
    """A project in the local CMS."""

    id: str | None = None
    title: str = Field(..., min_length=1)
    description: str = ""
    lang: str = "JavaScript"
    live: str = ""
    repo: str = ""


class LocalPost(BaseModel):
    """A blog post in the local CMS."""

    id: str | None = None
    title: str = Field(..., min_length=1)
    content: str = ""
    created_at: str = Field(default_factory=utc_now_iso)
