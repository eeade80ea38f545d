"""Resource Catalog — the 12 resource definitions and 7 nested collections.

Invariants:
    - Exactly one definition per ResourceName
    - Default limits preserved per resource: albums, photos, todos (and the nested
      user/album collections) page by 10, everything else by 100
    - Post slug/tags/category/timestamps and order status/createdAt are
      server-derived; clients cannot set createdAt

Design Decisions:
    - Configuration, not code: a new resource is a new entry here plus a schema
"""

from app.core.domain_types import FilterMode, Record, ResourceName
from app.core.query_pipeline import FilterField
from app.core.referential_validation import Reference
from app.core.resource_definitions import (
    NestedCollection, ResourceDefinition, slugify, utc_timestamp,
)
from app.schemas.resources import (
    AlbumCreate, CartCreate, CategoryCreate, CommentCreate, OrderCreate,
    PhotoCreate, PostCreate, ProductCreate, ReviewCreate, TagCreate,
    TodoCreate, UserCreate,
)

DEFAULT_POST_CATEGORY = "General"
DEFAULT_ORDER_STATUS = "Processing"


# ─── Hooks ───────────────────────────────────────────────────────

def _normalize_post(record: Record) -> Record:
    created = record.get("createdAt") or utc_timestamp()
    return {
        **record,
        "tags": record.get("tags") or [],
        "category": record.get("category") or DEFAULT_POST_CATEGORY,
        "createdAt": created,
        "updatedAt": record.get("updatedAt") or created,
        "slug": record.get("slug") or slugify(record.get("title", "")),
    }


def _build_post(payload: Record) -> Record:
    now = utc_timestamp()
    return {
        "userId": payload["userId"],
        "title": payload["title"],
        "slug": slugify(payload["title"]),
        "body": payload["body"],
        "tags": payload.get("tags") or [],
        "category": payload.get("category") or DEFAULT_POST_CATEGORY,
        "createdAt": now,
        "updatedAt": now,
    }


def _update_post(existing: Record, patch: Record) -> Record:
    patch = {**patch, "updatedAt": utc_timestamp()}
    if "title" in patch and patch["title"] != existing.get("title"):
        patch["slug"] = slugify(patch["title"])
    return patch


def _stamp_created(payload: Record) -> Record:
    return {**payload, "createdAt": utc_timestamp()}


def _normalize_order(record: Record) -> Record:
    return {**record, "status": record.get("status") or DEFAULT_ORDER_STATUS}


# ─── Definitions ─────────────────────────────────────────────────

_USER_ID = FilterField("userId", "userId")

RESOURCE_CATALOG: tuple[ResourceDefinition, ...] = (
    ResourceDefinition(
        ResourceName.USERS, UserCreate,
        search_fields=("id", "username", "name", "email"),
    ),
    ResourceDefinition(
        ResourceName.POSTS, PostCreate,
        filters=(
            _USER_ID,
            FilterField("tag", "tags", FilterMode.CONTAINS),
            FilterField("category", "category", FilterMode.CASE_INSENSITIVE),
        ),
        search_fields=("title", "body"),
        references=(Reference("userId", ResourceName.USERS),),
        normalize_seed=_normalize_post,
        build_record=_build_post,
        prepare_update=_update_post,
    ),
    ResourceDefinition(
        ResourceName.COMMENTS, CommentCreate,
        filters=(FilterField("postId", "postId"), _USER_ID),
        search_fields=("body",),
        references=(
            Reference("postId", ResourceName.POSTS),
            Reference("userId", ResourceName.USERS),
        ),
        build_record=_stamp_created,
    ),
    ResourceDefinition(
        ResourceName.ALBUMS, AlbumCreate, default_limit=10,
        filters=(_USER_ID,),
        search_fields=("title",),
        references=(Reference("userId", ResourceName.USERS),),
    ),
    ResourceDefinition(
        ResourceName.PHOTOS, PhotoCreate, default_limit=10,
        filters=(FilterField("albumId", "albumId"),),
        search_fields=("title",),
        references=(Reference("albumId", ResourceName.ALBUMS),),
    ),
    ResourceDefinition(
        ResourceName.TODOS, TodoCreate, default_limit=10,
        filters=(
            _USER_ID,
            FilterField("completed", "completed", FilterMode.BOOLEAN),
        ),
        search_fields=("title",),
        references=(Reference("userId", ResourceName.USERS),),
    ),
    ResourceDefinition(
        ResourceName.PRODUCTS, ProductCreate,
        filters=(FilterField("category", "category", FilterMode.CASE_INSENSITIVE),),
        search_fields=("title", "description"),
    ),
    ResourceDefinition(
        ResourceName.CATEGORIES, CategoryCreate,
        search_fields=("name", "description"),
    ),
    ResourceDefinition(
        ResourceName.TAGS, TagCreate,
        search_fields=("name",),
    ),
    ResourceDefinition(
        ResourceName.CARTS, CartCreate,
        filters=(_USER_ID,),
        references=(
            Reference("userId", ResourceName.USERS),
            Reference("productId", ResourceName.PRODUCTS, within="products"),
        ),
    ),
    ResourceDefinition(
        ResourceName.ORDERS, OrderCreate,
        filters=(_USER_ID, FilterField("status", "status")),
        references=(
            Reference("userId", ResourceName.USERS),
            Reference("cartId", ResourceName.CARTS),
        ),
        normalize_seed=_normalize_order,
        build_record=_stamp_created,
    ),
    ResourceDefinition(
        ResourceName.REVIEWS, ReviewCreate,
        filters=(FilterField("productId", "productId"), _USER_ID),
        search_fields=("comment",),
        references=(
            Reference("productId", ResourceName.PRODUCTS),
            Reference("userId", ResourceName.USERS),
        ),
        build_record=_stamp_created,
    ),
)

NESTED_COLLECTIONS: tuple[NestedCollection, ...] = (
    NestedCollection(ResourceName.USERS, ResourceName.POSTS, "userId", 10),
    NestedCollection(ResourceName.USERS, ResourceName.ALBUMS, "userId", 10),
    NestedCollection(ResourceName.USERS, ResourceName.TODOS, "userId", 10),
    NestedCollection(ResourceName.USERS, ResourceName.REVIEWS, "userId", 10),
    NestedCollection(ResourceName.ALBUMS, ResourceName.PHOTOS, "albumId", 10),
    NestedCollection(ResourceName.POSTS, ResourceName.COMMENTS, "postId"),
    NestedCollection(ResourceName.PRODUCTS, ResourceName.REVIEWS, "productId"),
)

_BY_NAME = {definition.name: definition for definition in RESOURCE_CATALOG}


def get_definition(name: ResourceName) -> ResourceDefinition:
    return _BY_NAME[name]
