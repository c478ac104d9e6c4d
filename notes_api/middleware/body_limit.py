"""
Notes API: Request Body Size Limit Middleware
==============================================

What:  Rejects request bodies larger than settings.max_body_bytes with 413.
How:   Checks the Content-Length header when there is one. Without it
       (chunked upload), pulls body chunks from `receive` one at a time,
       stops as soon as the running total passes the cap, and otherwise
       replays the buffered chunks to the app. At most max_body_bytes plus
       one chunk is ever held in memory.
Who:   Applied to every request via Starlette middleware.
When:  Innermost middleware, directly in front of routing. FastAPI only reads
       and parses the JSON body after this has let the request through, so an
       oversized body never reaches the parser or the store.

Written as a plain ASGI middleware rather than BaseHTTPMiddleware: it has to
own `receive` to count bytes before anything downstream reads them.
"""

import logging
from typing import List, Optional

from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from notes_api.exceptions import NotesError, PayloadTooLargeError
from notes_api.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)


class BodySizeLimitMiddleware:
    """
    Enforces an upper bound on request body size.

    Configuration:
        max_body_bytes: passed in by create_app() from Settings
                        (default 16384)

    Response on violation:
        HTTP 413 with the standard error body:
        {"error": "payload_too_large", "message": ..., "details": {"limit": ..., "size": ...}}
        For chunked bodies "size" is the number of bytes read before giving up.
    """

    BODY_METHODS = {"POST", "PUT", "PATCH"}

    def __init__(self, app: ASGIApp, max_body_bytes: int = 16 * 1024):
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] not in self.BODY_METHODS:
            await self.app(scope, receive, send)
            return

        header = Headers(scope=scope).get("content-length")
        if header is not None:
            try:
                size = int(header)
            except ValueError:
                response = self._error_response(
                    NotesError(message="Invalid Content-Length header"),
                    status_code=400,
                    error_code="bad_request",
                )
                await response(scope, receive, send)
                return

            if size > self.max_body_bytes:
                await self._reject(scope, receive, send, size)
                return

            await self.app(scope, receive, send)
            return

        # No Content-Length: read up to the cap, then hand the chunks on.
        buffered: List[Message] = []
        total = 0
        while True:
            message = await receive()
            buffered.append(message)
            if message["type"] != "http.request":
                break
            total += len(message.get("body", b""))
            if total > self.max_body_bytes:
                await self._reject(scope, receive, send, total)
                return
            if not message.get("more_body", False):
                break

        async def replay() -> Message:
            if buffered:
                return buffered.pop(0)
            return await receive()

        await self.app(scope, replay, send)

    async def _reject(self, scope: Scope, receive: Receive, send: Send, size: int) -> None:
        logger.warning(
            "Rejected %s %s: body of %d bytes exceeds %d byte limit",
            scope["method"],
            scope["path"],
            size,
            self.max_body_bytes,
        )
        response = self._error_response(PayloadTooLargeError(limit=self.max_body_bytes, size=size))
        await response(scope, receive, send)

    @staticmethod
    def _error_response(
        exc: NotesError,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status_code or exc.status_code,
            content={
                "error": error_code or exc.error_code,
                "message": exc.message,
                "details": exc.context,
                "request_id": request_id_var.get(""),
            },
        )
