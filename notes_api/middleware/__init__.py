# Middleware package init
"""
Notes API: Middleware Package
===============================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [Body Limit] → Route Handler

    1. Request ID: correlation ID for log lines and error bodies
    2. Logging: access line with status and duration, carrying the request ID
    3. Body Limit: rejects oversized bodies before FastAPI parses any JSON

    Responses travel back out in reverse order, so the access log sees the
    413 produced by the body limit and the request ID header is added last.
"""
