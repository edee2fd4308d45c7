"""API Layer — FastAPI route table, handlers and error handlers.

Invariants:
    - Routes registered explicitly from route_table.ROUTES (no auto-discovery)
    - All endpoints return JSON responses
"""
