"""API Layer — FastAPI routes, dependency wiring and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses

Design Decisions:
    - Thin routes delegate to services; services are built per request in deps.py
"""
