# Routes package init
"""
Notes API: API Routes Package
===============================

Route Inventory:
    - notes.py:   GET    /notes            (list notes)
                  POST   /notes            (create note)
                  PATCH  /notes/{id}       (partial update)
                  DELETE /notes/{id}       (delete note)
    - health.py:  GET    /health           (service health check)

Routes stay thin: they take validated input, call NoteService, and pick the
status code. Rules about what a request may do live in the service.
"""
