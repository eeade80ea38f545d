"""Resource Routes — one generated router per catalog entry (GET/POST/PUT/DELETE/OPTIONS).

Invariants:
    - List → {total, limit, offset, results}; item → record; create → 201 record
    - Delete → {"message": "<Label> deleted", "<singular>": record}
    - Non-integer path ids resolve to 404, like any other unknown id
    - OPTIONS → 204 with an empty body on every path
    - Routes never contain business logic (delegate to ResourceService)

Design Decisions:
    - Router factory over 12 hand-written modules: the resources differ only in
      configuration, which the catalog supplies
    - Filter params read from request.query_params: the set differs per resource;
      limit/offset/q are declared so FastAPI rejects non-integer pagination
"""

from fastapi import APIRouter, Depends, Query, Request, Response, status

from app.api.request_body import read_json_body
from app.core.errors import ResourceNotFoundError
from app.core.resource_definitions import ResourceDefinition
from app.infrastructure.resource_registry import ResourceRegistry, get_registry
from app.services.resource_service import ResourceService


def parse_record_id(raw: str, label: str) -> int:
    """Path segment → int id, or 404 for anything that is not plain ASCII digits."""
    if not (raw.isascii() and raw.isdigit()):
        raise ResourceNotFoundError(label, raw)
    return int(raw)


def filter_params(request: Request, definition: ResourceDefinition) -> dict[str, str]:
    params = request.query_params
    return {
        spec.param: params[spec.param]
        for spec in definition.filters if spec.param in params
    }


def build_resource_router(definition: ResourceDefinition, prefix: str) -> APIRouter:
    router = APIRouter(
        prefix=f"{prefix}/{definition.path}", tags=[definition.path],
    )
    label = definition.label
    singular = definition.name.singular

    @router.get("", name=f"list_{definition.path}")
    async def list_records(
        request: Request,
        q: str | None = Query(None),
        limit: int | None = Query(None),
        offset: int | None = Query(None),
        registry: ResourceRegistry = Depends(get_registry),
    ):
        """Filtered, searched, paginated listing."""
        return ResourceService(registry, definition).list_page(
            filter_params(request, definition), q=q, limit=limit, offset=offset,
        )

    @router.get("/{record_id}", name=f"get_{singular}")
    async def get_record(
        record_id: str, registry: ResourceRegistry = Depends(get_registry),
    ):
        return ResourceService(registry, definition).get(
            parse_record_id(record_id, label),
        )

    @router.post(
        "", name=f"create_{singular}", status_code=status.HTTP_201_CREATED,
    )
    async def create_record(
        request: Request, registry: ResourceRegistry = Depends(get_registry),
    ):
        body = await read_json_body(request)
        return ResourceService(registry, definition).create(body)

    @router.put("/{record_id}", name=f"update_{singular}")
    async def update_record(
        record_id: str,
        request: Request,
        registry: ResourceRegistry = Depends(get_registry),
    ):
        """Partial update: absent fields keep their values, id is fixed."""
        service = ResourceService(registry, definition)
        record_key = parse_record_id(record_id, label)
        service.get(record_key)
        body = await read_json_body(request)
        return service.update(record_key, body)

    @router.delete("/{record_id}", name=f"delete_{singular}")
    async def delete_record(
        record_id: str, registry: ResourceRegistry = Depends(get_registry),
    ):
        deleted = ResourceService(registry, definition).delete(
            parse_record_id(record_id, label),
        )
        return {"message": f"{label} deleted", singular: deleted}

    @router.options("", include_in_schema=False)
    @router.options("/{record_id}", include_in_schema=False)
    async def preflight():
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
