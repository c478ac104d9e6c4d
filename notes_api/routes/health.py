"""
Notes API: Health Check Route
===============================

What:  Liveness check for process supervisors and load balancers.
How:   Reports version, number of stored notes and uptime. The note count
       goes through the store lock, so a 200 also shows the store is not
       wedged.
When:  Polled periodically; excluded from access logging.
"""

import time

from fastapi import APIRouter, Depends, Request

from notes_api import __version__
from notes_api.dependencies import get_note_store
from notes_api.schemas.note import HealthResponse
from notes_api.storage.note_store import NoteStore

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    request: Request,
    store: NoteStore = Depends(get_note_store),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        notes=await store.count(),
        uptime_seconds=round(time.monotonic() - request.app.state.started_at, 2),
    )
