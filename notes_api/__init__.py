"""
Notes API: Application Package
================================

What: A small in-memory notes service over HTTP.

Architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Request-shape rules, logging
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Note dataclass + Pydantic
    ├─────────────────────────────────────┤
    │        Storage (In-Memory)          │  ← NoteStore behind one lock
    └─────────────────────────────────────┘

Start the server with `notes-api` or `python -m notes_api`.
"""

__version__ = "1.0.0"
