"""Pydantic Schemas: request/response validation for API endpoints.

Design Decisions:
    - Separate from storage: schemas are API contracts, records are plain dicts
"""
