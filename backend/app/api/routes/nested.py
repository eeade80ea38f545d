"""Nested Collection Routes — child listings and creation scoped by a parent id.

Invariants:
    - Missing parent → 404 "<Parent> not found" for GET and POST alike
    - GET applies the child's own filters and search on top of the parent scope
    - POST forces the parent id into the foreign key, whatever the body says
"""

from fastapi import APIRouter, Depends, Query, Request, Response, status

from app.api.request_body import read_json_body
from app.api.routes.resources import filter_params, parse_record_id
from app.core.errors import ResourceNotFoundError
from app.core.resource_catalog import get_definition
from app.core.resource_definitions import NestedCollection
from app.infrastructure.resource_registry import ResourceRegistry, get_registry
from app.services.resource_service import ResourceService


def build_nested_router(nested: NestedCollection, prefix: str) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[nested.parent.value])
    child = get_definition(nested.child)
    parent_label = nested.parent.label
    path = f"/{nested.path}"

    def resolve_parent(raw: str, registry: ResourceRegistry) -> int:
        parent_id = parse_record_id(raw, parent_label)
        if not registry.exists(nested.parent, parent_id):
            raise ResourceNotFoundError(parent_label, parent_id)
        return parent_id

    @router.get(path, name=f"list_{nested.parent.singular}_{nested.child.value}")
    async def list_children(
        parent_id: str,
        request: Request,
        q: str | None = Query(None),
        limit: int | None = Query(None),
        offset: int | None = Query(None),
        registry: ResourceRegistry = Depends(get_registry),
    ):
        scope = {nested.foreign_key: resolve_parent(parent_id, registry)}
        filters = filter_params(request, child)
        filters.pop(nested.foreign_key, None)
        return ResourceService(registry, child).list_page(
            filters, q=q, limit=limit, offset=offset,
            scope=scope, default_limit=nested.default_limit,
        )

    @router.post(
        path,
        name=f"create_{nested.parent.singular}_{nested.child.singular}",
        status_code=status.HTTP_201_CREATED,
    )
    async def create_child(
        parent_id: str,
        request: Request,
        registry: ResourceRegistry = Depends(get_registry),
    ):
        forced = {nested.foreign_key: resolve_parent(parent_id, registry)}
        body = await read_json_body(request)
        return ResourceService(registry, child).create(body, forced=forced)

    @router.options(path, include_in_schema=False)
    async def preflight():
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
