"""Infrastructure Layer — storage implementation and cross-cutting concerns.

Invariants:
    - Infrastructure imports from core/ and models/, never from api/ or services/
"""
