# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - message.py: Contact message schemas
# - post.py: Blog post schemas
# - project.py: Portfolio projects shown on the home page
# - local.py: Records of the local CMS workspace
#
# These models define the "contract" between routes, services and storage.
# =============================================================================

from .local import LocalPost, LocalProject
from .message import ContactRequest, ContactResponse, Message
from .post import Post, PostSummary, PostUpsert
from .project import DEFAULT_PROJECTS, Project

__all__ = [
    # Messages
    "ContactRequest",
    "ContactResponse",
    "Message",
    # Posts
    "Post",
    "PostSummary",
    "PostUpsert",
    # Projects
    "DEFAULT_PROJECTS",
    "Project",
    # Local CMS
    "LocalPost",
    "LocalProject",
]
