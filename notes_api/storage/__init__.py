"""
Notes API: Storage Package
============================

What:  Holds the process-lifetime note collection.
How:   note_store.NoteStore keeps notes in memory behind a single asyncio.Lock.
       There is no database and no state file; everything is lost on restart.
"""

from notes_api.storage.note_store import NoteStore

__all__ = ["NoteStore"]
