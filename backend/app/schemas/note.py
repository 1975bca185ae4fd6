"""
Notes API Backend: Pydantic Request/Response Schemas
====================================================

What:  Pydantic models defining the JSON contract between the browser client
       and the API.
How:   Route handlers return these envelopes; FastAPI validates and serializes
       them and documents them in the OpenAPI schema.

Every response is an envelope:

    { "success": bool, "data"?: ..., "message"?: str, "count"?: int }

Keys that do not apply to a given response are left out rather than sent
as null (routes use `response_model_exclude_none=True` where needed).
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from app.models.note import Note, format_timestamp


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    Fields accepted by POST /api/notes, from JSON or form data.

    Both are optional at this layer: absence, blankness and trimming are the
    Note Store's business, so every rejection reports the same message. A
    non-string value fails validation here and is reported the same way.
    """
    title: Optional[str] = None
    content: Optional[str] = None

    model_config = {"extra": "ignore"}


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """Wire form of a Note; `createdAt` is ISO-8601 UTC with milliseconds."""
    id: int = Field(description="Unique, increasing note identifier")
    title: str = Field(description="Trimmed note title")
    content: str = Field(description="Trimmed note body")
    created_at: str = Field(
        alias="createdAt",
        description="Creation time, e.g. 2024-01-15T12:00:00.123Z",
    )

    model_config = {"populate_by_name": True}

    @classmethod
    def from_note(cls, note: Note) -> "NoteResponse":
        return cls(
            id=note.id,
            title=note.title,
            content=note.content,
            created_at=format_timestamp(note.created_at),
        )


class NoteListEnvelope(BaseModel):
    """Returned by GET /api/notes: every note, newest first, plus the count."""
    success: bool = True
    data: List[NoteResponse]
    count: int


class NoteEnvelope(BaseModel):
    """
    Returned by POST /api/notes (with `message`) and GET /api/notes/{id}
    (without it).
    """
    success: bool = True
    message: Optional[str] = None
    data: NoteResponse


class ErrorEnvelope(BaseModel):
    """Body of every failed request; `message` is meant to be shown to the user."""
    success: bool = False
    message: str


class HealthResponse(BaseModel):
    success: bool = True
    message: str = "Notes API is running!"
    timestamp: str = Field(description="Server time, ISO-8601 UTC")
