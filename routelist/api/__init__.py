"""API Layer: FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in create_app() (no auto-discovery)
    - All endpoints return structured JSON responses
"""
