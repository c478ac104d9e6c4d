"""
Notes API: Pydantic Request/Response Schemas
==============================================

What:  Pydantic models defining the HTTP contract of the service.
How:   FastAPI validates request bodies against the request models and
       serializes responses through the response models.
Who:   Used by route handlers as body parameters and response models.

Design Decision:
    Schemas are separate from the Note dataclass so the wire format can be
    read at a glance here and the store stays free of Pydantic.

Field presence on update:
    NoteUpdate uses Optional[str] with None meaning "absent". JSON null is
    treated as absent too. An empty string is a real value, so
    {"content": ""} clears the content while {} changes nothing.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models: What clients send
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """Body of POST /notes."""

    title: str = Field(description="Note title (required, may be empty)")
    content: str = Field(default="", description="Note body (optional)")


class NoteUpdate(BaseModel):
    """
    Body of PATCH /notes/{id}.

    Both fields are optional; at least one must be present. That rule is
    enforced by NoteService (422) rather than here, so the check runs in a
    known order relative to the store lookup.
    """

    title: Optional[str] = Field(default=None, description="New title, if changing")
    content: Optional[str] = Field(default=None, description="New content, if changing")

    def is_empty(self) -> bool:
        """True when neither field was supplied."""
        return self.title is None and self.content is None


# ══════════════════════════════════════════════════════════════════════════
# Response Models: What the API returns
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """A stored note, as returned by GET /notes and POST /notes."""

    id: int = Field(description="Store-assigned note identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note body")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    Standardized error body for application errors.

    Example:
        {
            "error": "not_found",
            "message": "note with ID '7' was not found",
            "details": {"resource": "note", "resource_id": 7},
            "request_id": "1f0c2a9e"
        }
    """

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health."""

    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    notes: int = Field(description="Number of notes currently stored")
    uptime_seconds: float = Field(description="Seconds since the app was created")
