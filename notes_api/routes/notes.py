"""
Notes API: Notes Route Handlers
=================================

What:  GET/POST /notes and PATCH/DELETE /notes/{id}.
How:   Each handler takes an already-validated body from FastAPI, calls
       NoteService, and returns the status code and body for the operation.
Who:   Any HTTP client of the service.

Id path segment:
    Routes use Starlette's int convertor ("{note_id:int}"), which only
    matches decimal digits. "/notes/abc" or "/notes/-1" therefore matches no
    route at all and is answered with 404 by the not-found handler, the
    same as any other unknown path.

Status codes:
    GET    /notes       200  list of notes
    POST   /notes       201  created note
    PATCH  /notes/{id}  204  | 404 unknown id | 422 no fields
    DELETE /notes/{id}  204  | 404 unknown id
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from notes_api.dependencies import get_note_service
from notes_api.schemas.note import (
    ErrorResponse,
    NoteCreate,
    NoteResponse,
    NoteUpdate,
)
from notes_api.services.note_service import NoteService

router = APIRouter(tags=["Notes"])


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    summary="List all notes",
)
async def list_notes(
    service: NoteService = Depends(get_note_service),
) -> List[NoteResponse]:
    """All notes in creation order. There is no pagination."""
    return await service.list_notes()


@router.post(
    "/notes",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        413: {"description": "Body larger than the configured limit", "model": ErrorResponse},
    },
    summary="Create a note",
)
async def create_note(
    payload: NoteCreate,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return await service.create_note(payload)


@router.patch(
    "/notes/{note_id:int}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        404: {"description": "Note not found", "model": ErrorResponse},
        422: {"description": "Neither title nor content supplied", "model": ErrorResponse},
    },
    summary="Update a note's title and/or content",
)
async def update_note(
    note_id: int,
    payload: NoteUpdate,
    service: NoteService = Depends(get_note_service),
) -> Response:
    """
    Partial update. Fields left out of the body keep their current value.

    An empty body ({}) is rejected with 422 before the id is looked up.
    """
    await service.update_note(note_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/notes/{note_id:int}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Delete a note",
)
async def delete_note(
    note_id: int,
    service: NoteService = Depends(get_note_service),
) -> Response:
    await service.delete_note(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
