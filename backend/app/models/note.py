"""
Notes API Backend: Note Domain Model
====================================

What:  The single domain entity, an immutable titled piece of text.
How:   A frozen dataclass; the Note Store is the only place that builds one.
Who:   Produced by `NoteStore`, serialized by the schemas in `app.schemas.note`.

Field rules:
    - id:          positive integer, assigned by the store, never reused
    - title:       non-empty, surrounding whitespace stripped
    - content:     non-empty, surrounding whitespace stripped
    - created_at:  timezone-aware UTC, truncated to milliseconds so the
                   serialized `createdAt` is exactly the stored value
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict


def utc_now() -> datetime:
    """Current UTC time with sub-millisecond precision dropped."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond - now.microsecond % 1000)


def format_timestamp(value: datetime) -> str:
    """
    Render a datetime as ISO-8601 UTC with milliseconds and a `Z` suffix.

    Example: 2024-01-15T12:00:00.123Z
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class Note:
    id: int
    title: str
    content: str
    created_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "createdAt": format_timestamp(self.created_at),
        }
