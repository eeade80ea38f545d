"""API Layer — FastAPI routers, body parsing and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response body is JSON; errors use {"error": ...} or {"errors": [...]}

Design Decisions:
    - Thin routes delegate to ResourceService
"""
