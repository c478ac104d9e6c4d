"""
Notes API: Note Domain Model
==============================

What:  The record held by the note store.
How:   Plain dataclass; the store owns live instances and hands out copies.
Who:   Created and mutated only by NoteStore. Serialized by the route layer
       through schemas.note.NoteResponse.

Field summary:
    id       Store-assigned, unique for the process lifetime, never reused
    title    Required text (empty string allowed)
    content  Optional text, defaults to ""
"""

from dataclasses import dataclass, replace
from typing import NewType

# Non-negative integer parsed from the `{note_id:int}` path segment.
NoteId = NewType("NoteId", int)


@dataclass
class Note:
    id: NoteId
    title: str
    content: str = ""

    def copy(self) -> "Note":
        """Detached copy, safe to hand out after the store lock is released."""
        return replace(self)

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title[:30]!r})>"
