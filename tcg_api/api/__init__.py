"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All error responses are {"error": code, "message": text}

Design Decisions:
    - Thin routes delegate to services/resource_service.py
"""
