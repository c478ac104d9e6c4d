"""
Notes API: Note Service (Business Logic)
==========================================

What:  The four note operations as seen by the HTTP layer.
How:   Wraps a NoteStore handed in at construction. Performs the request-shape
       checks that must happen before the store is touched, converts store
       records into response schemas, and logs each mutation.
Who:   Built per request by notes_api.dependencies.get_note_service and
       called by the route handlers in routes/notes.py.

Validation order for update:
    1. Body shape: neither title nor content → ValidationError (422).
       Runs without the store, so the result does not depend on the id.
    2. Store lookup: unknown id → NotFoundError (404), raised by the store.
"""

import logging
from typing import List

from notes_api.exceptions import ValidationError
from notes_api.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from notes_api.storage.note_store import NoteStore

logger = logging.getLogger(__name__)


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - list_notes(): snapshot of every note
        - create_note(): store a new note and return it
        - update_note(): partial update with the "at least one field" rule
        - delete_note(): remove a note by id

    Store errors (NotFoundError) propagate unchanged to the global handlers.
    """

    def __init__(self, store: NoteStore):
        self.store = store

    async def list_notes(self) -> List[NoteResponse]:
        notes = await self.store.list_notes()
        return [NoteResponse.model_validate(note) for note in notes]

    async def create_note(self, payload: NoteCreate) -> NoteResponse:
        note = await self.store.create_note(title=payload.title, content=payload.content)
        logger.info("Note created: %d", note.id)
        return NoteResponse.model_validate(note)

    async def update_note(self, note_id: int, payload: NoteUpdate) -> None:
        """
        Apply a partial update to a note.

        Args:
            note_id: Id from the request path
            payload: Parsed PATCH body; None fields are left unchanged

        Raises:
            ValidationError: neither title nor content supplied
            NotFoundError: no note with this id
        """
        if payload.is_empty():
            raise ValidationError(
                message="At least one of 'title' or 'content' must be provided",
                context={"fields": ["title", "content"]},
            )

        await self.store.update_note(
            note_id,
            title=payload.title,
            content=payload.content,
        )
        logger.info(
            "Note updated: %d (fields=%s)",
            note_id,
            ",".join(name for name in ("title", "content") if getattr(payload, name) is not None),
        )

    async def delete_note(self, note_id: int) -> None:
        """
        Raises:
            NotFoundError: no note with this id
        """
        await self.store.delete_note(note_id)
        logger.info("Note deleted: %d", note_id)
