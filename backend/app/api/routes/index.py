"""API Index — discovery document listing every resource and nested collection.

Invariants:
    - One entry per catalog resource with its path and live record count
"""

from fastapi import APIRouter, Depends

from app import __version__
from app.config import get_settings
from app.core.resource_catalog import NESTED_COLLECTIONS, RESOURCE_CATALOG
from app.infrastructure.resource_registry import ResourceRegistry, get_registry

router = APIRouter(prefix=get_settings().api_prefix, tags=["index"])


@router.get("")
async def api_index(registry: ResourceRegistry = Depends(get_registry)):
    """Resources available to prototype against."""
    prefix = get_settings().api_prefix
    counts = registry.counts()
    return {
        "name": "ResponseRift",
        "version": __version__,
        "resources": [
            {
                "name": definition.path,
                "path": f"{prefix}/{definition.path}",
                "count": counts[definition.path],
                "filters": [spec.param for spec in definition.filters],
                "search": list(definition.search_fields),
                "defaultLimit": definition.default_limit,
            }
            for definition in RESOURCE_CATALOG
        ],
        "nested": [f"{prefix}/{nested.path}" for nested in NESTED_COLLECTIONS],
    }
