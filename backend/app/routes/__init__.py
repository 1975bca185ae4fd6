# Routes package init
"""
Notes API Backend: API Routes Package
=====================================

Route Inventory:
    - notes.py:   GET  /api/notes            (list all notes, newest first)
                  POST /api/notes            (create a note)
                  GET  /api/notes/{id}       (get a single note)
    - health.py:  GET  /api/health           (liveness check)

Routes stay thin: parse the request, call the Note Store, wrap the result in
an envelope. Failures are raised as `app.exceptions` types and turned into
error envelopes by the handlers registered in `app.main`.
"""
