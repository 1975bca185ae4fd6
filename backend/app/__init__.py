"""
Notes API Backend: Application Package
======================================

What: The `app` package holding the in-memory notes service.
Who:  Imported by uvicorn (`app.main:app`), the `notes-api` entry point and pytest.

Layout:

    ┌─────────────────────────────────────┐
    │      Routes (API Service layer)     │  ← HTTP parsing, envelopes, status codes
    ├─────────────────────────────────────┤
    │       Services (Note Store)         │  ← ordering, id assignment, validation
    ├─────────────────────────────────────┤
    │     Models & Schemas (Data)         │  ← Note dataclass + Pydantic envelopes
    └─────────────────────────────────────┘

Routes never touch the notes list directly; they receive the store through
FastAPI dependency injection and translate its results into JSON envelopes.
"""

__version__ = "1.0.0"
