# =============================================================================
# core/models/post.py - Blog Post Schemas
# =============================================================================
# These models define the contract for blog posts:
# - PostUpsert: Admin form input (create or replace by slug)
# - PostSummary: Row shape for listings (home page, dashboard)
# - Post: Full post including content, for the post page
#
# The slug is the natural key. The id and created_at are assigned by the
# database on first insert and survive later upserts of the same slug.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostUpsert(BaseModel):
    """
    Schema for creating or updating a post.

    slug, title and content are required; excerpt is optional and an empty
    excerpt is stored as NULL.

    Example:
        {
            "slug": "my-first-post",
            "title": "My first post",
            "excerpt": "Short summary",
            "content": "# Hello\\n\\nSome **markdown**."
        }
    """

    slug: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    excerpt: str | None = None
    content: str = Field(..., min_length=1)

    @field_validator("slug")
    @classmethod
    def slug_has_no_slash(cls, value: str) -> str:
        # A slash would make /post/{slug} unreachable
        if "/" in value:
            raise ValueError("slug must not contain '/'")
        return value

    @field_validator("excerpt")
    @classmethod
    def blank_excerpt_is_none(cls, value: str | None) -> str | None:
        return value or None


class PostSummary(BaseModel):
    """A post without its content, as listed on the home page and dashboard."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    slug: str
    title: str
    excerpt: str | None = None
    created_at: datetime | None = None


class Post(PostSummary):
    """A full post."""

    content: str | None = None
