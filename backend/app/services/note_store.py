"""
Notes API Backend: In-Memory Note Store
=======================================

What:  The authoritative collection of notes plus the next-id counter.
How:   A Python list kept newest-first, guarded by a `threading.Lock`.
Who:   One instance per application, created by `app.main.create_app` and
       injected into route handlers through `get_note_store`.
When:  Lives for the lifetime of the process; nothing is persisted.

Ordering contract ("insert at head"):
    create() places the new note at index 0. Seeded example notes are appended
    in id order at construction, so they stay at the tail as [1, 2] while
    newer notes pile up in front of them:

        [n5, n4, n3, note 1, note 2]

Critical section:
    Reading the counter, building the note, inserting it and bumping the
    counter happen under one lock acquisition. Two concurrent creates can
    never share an id, and neither can be lost from the list.
"""

import logging
import threading
from datetime import datetime
from typing import Callable, List, Optional

from app.exceptions import ValidationError
from app.models.note import Note, utc_now

logger = logging.getLogger(__name__)

EXAMPLE_NOTES = (
    (
        "Welcome to Notes App",
        "This is your first note! Try adding more notes using the form above.",
    ),
    (
        "Demo Note",
        "This app demonstrates basic fullstack development with React frontend and Express backend.",
    ),
)


class NoteStore:
    """
    Thread-safe, volatile store of `Note` records.

    Responsibilities:
        - list_all():    snapshot of all notes, newest first
        - create():      validate, assign next id, insert at head
        - get_by_id():   linear lookup, None when missing

    Args:
        seed:  Populate the store with the two example notes (ids 1 and 2).
        clock: Callable returning the creation timestamp; tests may pin it.
    """

    def __init__(self, seed: bool = True, clock: Callable[[], datetime] = utc_now):
        self._notes: List[Note] = []
        self._next_id = 1
        self._lock = threading.Lock()
        self._clock = clock

        if seed:
            self._seed()

    def _seed(self) -> None:
        with self._lock:
            for title, content in EXAMPLE_NOTES:
                self._notes.append(
                    Note(id=self._next_id, title=title, content=content, created_at=self._clock())
                )
                self._next_id += 1
        logger.debug("Seeded %d example notes", len(EXAMPLE_NOTES))

    def __len__(self) -> int:
        with self._lock:
            return len(self._notes)

    @property
    def next_id(self) -> int:
        """The id the next successful create() will receive."""
        with self._lock:
            return self._next_id

    def list_all(self) -> List[Note]:
        """Return a copy of the notes, newest first."""
        with self._lock:
            return list(self._notes)

    def create(self, title: Optional[str], content: Optional[str]) -> Note:
        """
        Create a note and insert it at the head of the collection.

        Both fields are stripped first; if either ends up empty (or was never
        supplied) ValidationError is raised and the store is left untouched.

        Returns:
            The newly created Note.

        Raises:
            ValidationError: title or content missing or blank.
        """
        clean_title = (title or "").strip()
        clean_content = (content or "").strip()
        if not clean_title or not clean_content:
            missing = "title" if not clean_title else "content"
            raise ValidationError(field=missing)

        with self._lock:
            note = Note(
                id=self._next_id,
                title=clean_title,
                content=clean_content,
                created_at=self._clock(),
            )
            self._notes.insert(0, note)
            self._next_id += 1

        logger.info("Note %d created: %r", note.id, note.title)
        return note

    def get_by_id(self, note_id: int) -> Optional[Note]:
        """Return the note carrying `note_id`, or None if there is none."""
        with self._lock:
            for note in self._notes:
                if note.id == note_id:
                    return note
        return None
