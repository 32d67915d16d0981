# =============================================================================
# core/models/message.py - Contact Message Schemas
# =============================================================================
# These models define the contract for contact messages:
# - ContactRequest: Validated body of POST /api/contact
# - Message: A stored message as shown on the admin dashboard
# - ContactResponse: What the public API echoes back
#
# Messages are created by anyone, never updated, and deleted only by the admin.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ContactRequest(BaseModel):
    """
    Schema for a public contact submission.

    All three fields are required and must be non-empty. The body may arrive
    as JSON or as an urlencoded form; both are validated against this model.

    Example:
        {
            "name": "Ada",
            "email": "ada@example.com",
            "message": "Are you available for a project?"
        }
    """

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)


class Message(BaseModel):
    """A stored contact message."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    message: str
    created_at: datetime | None = None


class ContactResponse(BaseModel):
    """Returned by POST /api/contact after the message row is written."""

    success: bool = True
    id: int = Field(..., description="Server-assigned message id")
