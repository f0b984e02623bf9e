"""TCG API Package — in-memory CRUD backend for trading-card and deck resources.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
