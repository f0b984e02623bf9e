"""Route Modules — one file per resource.

Invariants:
    - Each resource module builds its APIRouter with build_resource_router
    - Routes never contain business logic (delegate to ResourceService)
"""
