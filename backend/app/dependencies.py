"""
Notes API Backend: Route Dependencies
=====================================

What:  FastAPI dependency that hands route handlers the application's store.
How:   `create_app` stores one `NoteStore` on `app.state.note_store`; this
       dependency reads it back from the current request.

Usage in routes:
    @router.get("/notes")
    async def list_notes(store: NoteStore = Depends(get_note_store)):
        ...

Tests can override it with `app.dependency_overrides[get_note_store]`, or
simply build an app around their own store via `create_app(store=...)`.
"""

from fastapi import Request

from app.services.note_store import NoteStore


def get_note_store(request: Request) -> NoteStore:
    """Return the NoteStore owned by the application serving this request."""
    return request.app.state.note_store
