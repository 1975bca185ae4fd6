"""
Notes API Backend: Notes Route Handlers
=======================================

What:  GET /api/notes (list), POST /api/notes (create), GET /api/notes/{id}.
How:   Parses the request, delegates to the injected NoteStore and wraps the
       result in an envelope. Failures are raised as `app.exceptions` types.
Who:   Called by the browser notes form and list.

Request bodies for POST are accepted as JSON or as URL-encoded / multipart
form data, so a plain HTML <form> can post directly.
"""

import json
import logging
import re
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError as PydanticValidationError

from app.dependencies import get_note_store
from app.exceptions import MalformedRequestError, NotFoundError, ValidationError
from app.schemas.note import (
    ErrorEnvelope,
    NoteCreate,
    NoteEnvelope,
    NoteListEnvelope,
    NoteResponse,
)
from app.services.note_store import NoteStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Notes"])

FORM_CONTENT_TYPES = frozenset({"application/x-www-form-urlencoded", "multipart/form-data"})

# Ids are plain base-10 integers; anything else cannot match a note.
_NOTE_ID_PATTERN = re.compile(r"[+-]?\d+")

_CREATE_BODY_SCHEMA = NoteCreate.model_json_schema()


async def read_note_payload(request: Request) -> NoteCreate:
    """
    Decode the POST body into a NoteCreate regardless of its encoding.

    - JSON (or no Content-Type): empty body → {}, invalid or too deeply nested
      JSON → MalformedRequestError
    - form-urlencoded / multipart: parsed by Starlette's form parser
    - anything else: treated as an empty body

    A decoded value that is not an object counts as an empty body. Fields of
    the wrong type (numbers, uploads) fail validation with the same message as
    missing fields.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    raw: Any
    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        raw = {key: form.get(key) for key in form.keys()}
    elif not content_type or content_type == "application/json" or content_type.endswith("+json"):
        body = await request.body()
        if not body.strip():
            raw = {}
        else:
            try:
                raw = json.loads(body)
            except (ValueError, RecursionError) as exc:
                raise MalformedRequestError(context={"error": str(exc)}) from exc
    else:
        logger.debug("Ignoring body with unsupported content type %r", content_type)
        raw = {}

    if not isinstance(raw, dict):
        raw = {}

    try:
        return NoteCreate.model_validate(raw)
    except PydanticValidationError as exc:
        fields: Dict[str, str] = {
            ".".join(str(p) for p in err["loc"]): err["type"] for err in exc.errors()
        }
        raise ValidationError(context={"fields": fields}) from exc


@router.get(
    "/notes",
    response_model=NoteListEnvelope,
    summary="List all notes, newest first",
)
async def list_notes(store: NoteStore = Depends(get_note_store)) -> NoteListEnvelope:
    notes = store.list_all()
    logger.info("Fetching all notes (%d)", len(notes))
    return NoteListEnvelope(
        data=[NoteResponse.from_note(note) for note in notes],
        count=len(notes),
    )


@router.post(
    "/notes",
    status_code=201,
    response_model=NoteEnvelope,
    responses={
        400: {"description": "Title or content missing", "model": ErrorEnvelope},
    },
    summary="Create a note",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": _CREATE_BODY_SCHEMA},
                "application/x-www-form-urlencoded": {"schema": _CREATE_BODY_SCHEMA},
            },
        }
    },
)
async def create_note(
    payload: NoteCreate = Depends(read_note_payload),
    store: NoteStore = Depends(get_note_store),
) -> NoteEnvelope:
    """
    Create a note from `title` and `content`.

    The store trims both fields and rejects blanks with ValidationError (400),
    in which case nothing is inserted. On success the note lands at the head
    of the list with the next id.
    """
    logger.info("Creating new note: title=%r", payload.title)
    note = store.create(payload.title, payload.content)
    return NoteEnvelope(
        message="Note created successfully",
        data=NoteResponse.from_note(note),
    )


@router.get(
    "/notes/{note_id}",
    response_model=NoteEnvelope,
    response_model_exclude_none=True,
    responses={
        404: {"description": "No note with this id", "model": ErrorEnvelope},
    },
    summary="Get a single note by id",
)
async def get_note(
    note_id: str,
    store: NoteStore = Depends(get_note_store),
) -> NoteEnvelope:
    # Ids that are not plain integers, or too long to convert, match no note.
    note = None
    if _NOTE_ID_PATTERN.fullmatch(note_id):
        try:
            note = store.get_by_id(int(note_id))
        except ValueError:
            note = None

    if note is None:
        raise NotFoundError(resource="Note", resource_id=note_id)

    return NoteEnvelope(data=NoteResponse.from_note(note))
