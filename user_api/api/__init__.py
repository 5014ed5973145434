"""API Layer: FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All user endpoints return the status envelope {statusCode, message, data?}
"""
