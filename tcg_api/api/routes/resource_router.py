"""Resource Router — the CRUD dispatch table shared by every resource kind.

Invariants:
    - Collection path answers on both /<prefix> and /<prefix>/
    - Collection routes are registered before item routes; the item
      parameter is a path parameter, so it swallows any remaining suffix
      ("<id>/", "<id>/extra") and parse_record_id decides on it
    - PUT/DELETE without an id → 400 id_required; POST with an id → 405
    - Any other method → 405 (framework routing, see error_handlers.py)
"""

from operator import attrgetter

from fastapi import APIRouter, Depends, Request, Response, status

from tcg_api.core.domain_types import ResourceKind
from tcg_api.core.errors import MethodNotAllowedError, RecordIdRequiredError
from tcg_api.infrastructure.memory_store import Storage, get_storage
from tcg_api.services.resource_service import ResourceService


def build_resource_router(
    prefix: str,
    kind: ResourceKind,
    model: type,
    label: str,
    store_attr: str,
) -> APIRouter:
    """Router for one resource kind backed by `getattr(storage, store_attr)`."""
    router = APIRouter(prefix=prefix, tags=[kind.value])
    service = ResourceService(kind, model, label)
    store_of = attrgetter(store_attr)
    name = kind.value.replace("-", "_")

    # ─── Collection ──────────────────────────────────────────────

    @router.get("", response_model=list[model], name=f"list_{name}")
    @router.get("/", response_model=list[model], include_in_schema=False)
    async def list_records(storage: Storage = Depends(get_storage)):
        return service.list_records(store_of(storage))

    @router.post(
        "", response_model=model, status_code=status.HTTP_201_CREATED,
        name=f"create_{name}",
    )
    @router.post(
        "/", response_model=model, status_code=status.HTTP_201_CREATED,
        include_in_schema=False,
    )
    async def create_record(
        request: Request, storage: Storage = Depends(get_storage),
    ):
        """id is generated when the body has none."""
        return service.create_record(store_of(storage), await request.body())

    @router.put("", include_in_schema=False)
    @router.put("/", include_in_schema=False)
    async def update_without_id():
        raise RecordIdRequiredError(label, "update")

    @router.delete("", include_in_schema=False)
    @router.delete("/", include_in_schema=False)
    async def delete_without_id():
        raise RecordIdRequiredError(label, "deletion")

    # ─── Item ────────────────────────────────────────────────────

    @router.get("/{record_id:path}", response_model=model, name=f"get_{name}")
    async def get_record(record_id: str, storage: Storage = Depends(get_storage)):
        return service.get_record(store_of(storage), record_id)

    @router.post("/{record_id:path}", include_in_schema=False)
    async def create_with_id(record_id: str):
        raise MethodNotAllowedError("Method not allowed for this path")

    @router.put(
        "/{record_id:path}", response_model=model, name=f"update_{name}",
    )
    async def update_record(
        record_id: str, request: Request,
        storage: Storage = Depends(get_storage),
    ):
        """Replace wholesale. The path id overrides any body id."""
        return service.update_record(
            store_of(storage), record_id, await request.body(),
        )

    @router.delete(
        "/{record_id:path}", status_code=status.HTTP_204_NO_CONTENT,
        name=f"delete_{name}",
    )
    async def delete_record(
        record_id: str, storage: Storage = Depends(get_storage),
    ):
        service.delete_record(store_of(storage), record_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
