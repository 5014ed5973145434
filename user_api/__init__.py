"""User API Package: REST CRUD over the User resource backed by MongoDB.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
