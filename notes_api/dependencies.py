"""
Notes API: Request Dependencies
=================================

What:  FastAPI dependency providers for the store and the service.
How:   The NoteStore lives on app.state (set by create_app). Route handlers
       declare `service: NoteService = Depends(get_note_service)` and FastAPI
       resolves the chain request → store → service on every request.
Who:   Used by routes/notes.py and routes/health.py.

There is no module-level store. Two apps created by create_app() have two
independent stores, which is what the test suite relies on.
"""

from fastapi import Depends, Request

from notes_api.services.note_service import NoteService
from notes_api.storage.note_store import NoteStore


def get_note_store(request: Request) -> NoteStore:
    """The store owned by the application handling this request."""
    return request.app.state.note_store


def get_note_service(store: NoteStore = Depends(get_note_store)) -> NoteService:
    """
    Example usage in a route:
        @router.get("/notes")
        async def list_notes(service: NoteService = Depends(get_note_service)):
            return await service.list_notes()
    """
    return NoteService(store)
