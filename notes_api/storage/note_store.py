"""
Notes API: In-Memory Note Store
=================================

What:  The single shared collection of notes plus the id counter.
How:   An ordered list of Note records guarded by one asyncio.Lock.
       Every public method holds the lock for its whole body
       (`async with self._lock`), so the lock is released on every exit path,
       including when NotFoundError is raised.
Who:   Constructed once by create_app() and stored on app.state; injected into
       NoteService through notes_api.dependencies.
When:  Lives from application startup to shutdown. Nothing is persisted.

Locking model:
    One exclusive lock for readers and writers alike. list_notes() waits
    behind any in-flight write and vice versa. The collection is small and
    in-memory, so serializing everything keeps the store free of
    reader/writer races at negligible cost.

Id allocation:
    Ids come from an itertools.count, advanced with next(). The counter is
    separate from the list but is only ever advanced while the lock is held,
    so the id order matches the append order. Code that lets creates run
    without the lock must re-establish that ordering on its own.

Complexity:
    Lookups for update/delete are linear scans, O(n).
"""

import asyncio
import itertools
import logging
from typing import Iterator, List, Optional

from notes_api.exceptions import NotFoundError
from notes_api.models.note import Note, NoteId

logger = logging.getLogger(__name__)


class NoteStore:
    """
    Exclusive-access in-memory collection of notes.

    Callers only ever receive copies of stored notes; mutation happens
    through update_note() and delete_note().
    """

    def __init__(self, id_start: int = 1):
        self._notes: List[Note] = []
        self._ids: Iterator[int] = itertools.count(id_start)
        self._lock = asyncio.Lock()

    async def list_notes(self) -> List[Note]:
        """Snapshot of all notes in insertion order."""
        async with self._lock:
            return [note.copy() for note in self._notes]

    async def create_note(self, title: str, content: str = "") -> Note:
        """
        Allocate the next id, append a new note and return a copy of it.

        No error path: the request layer has already ensured a title is present.
        """
        async with self._lock:
            note = Note(id=NoteId(next(self._ids)), title=title, content=content)
            self._notes.append(note)
            logger.debug("Stored note %d (%d notes total)", note.id, len(self._notes))
            return note.copy()

    async def update_note(
        self,
        note_id: int,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> None:
        """
        Apply the supplied fields to an existing note.

        A field passed as None is left untouched. An empty string is a real
        value and overwrites the field.

        Raises:
            NotFoundError: no note with this id
        """
        async with self._lock:
            note = self._find(note_id)
            if note is None:
                raise NotFoundError(resource="note", resource_id=note_id)
            if title is not None:
                note.title = title
            if content is not None:
                note.content = content

    async def delete_note(self, note_id: int) -> None:
        """
        Remove a note. Remaining notes keep their ids; the counter is untouched.

        Raises:
            NotFoundError: no note with this id
        """
        async with self._lock:
            for index, note in enumerate(self._notes):
                if note.id == note_id:
                    del self._notes[index]
                    return
            raise NotFoundError(resource="note", resource_id=note_id)

    async def count(self) -> int:
        async with self._lock:
            return len(self._notes)

    def _find(self, note_id: int) -> Optional[Note]:
        # Caller must hold self._lock.
        for note in self._notes:
            if note.id == note_id:
                return note
        return None
