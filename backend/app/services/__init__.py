# Services package init
"""
Notes API Backend: Services Layer
=================================

What:  State-owning logic that sits below the HTTP routes.

Service Inventory:
    - NoteStore: in-memory notes collection with head insertion, id
      assignment and presence validation

Routes receive the store through dependency injection, so a test can hand
the application its own isolated instance.
"""
