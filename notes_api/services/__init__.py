# Services package init
"""
Notes API: Services Package
=============================

    - note_service.py: NoteService, the business rules in front of NoteStore
"""
