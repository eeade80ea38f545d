"""Resource Definitions — the configuration that specializes the generic store/pipeline/validators.

Invariants:
    - A definition is frozen: routes and services share one instance per resource
    - normalize_seed runs once per fixture record at load time
    - build_record runs after validation succeeds, before the store assigns the id
    - prepare_update runs after validation succeeds, receives the existing record

Design Decisions:
    - Hooks are plain callables with identity defaults — most resources need none
    - Timestamps match JavaScript's toISOString(): UTC, millisecond precision, "Z"
"""

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable

from pydantic import BaseModel

from app.core.domain_types import Record, ResourceName
from app.core.query_pipeline import FilterField
from app.core.referential_validation import Reference

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def utc_timestamp() -> str:
    """Current time as "2024-01-31T12:00:00.000Z"."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def slugify(title: str) -> str:
    """Lowercase, collapse non-alphanumeric runs to "-", trim dashes."""
    return _NON_SLUG_CHARS.sub("-", title.lower()).strip("-")


def _unchanged(record: Record) -> Record:
    return record


def _no_update_hook(existing: Record, patch: Record) -> Record:
    return patch


@dataclass(frozen=True)
class ResourceDefinition:
    """Everything that differs between two resources."""
    name: ResourceName
    schema: type[BaseModel]
    default_limit: int = 100
    filters: tuple[FilterField, ...] = ()
    search_fields: tuple[str, ...] = ()
    references: tuple[Reference, ...] = ()
    normalize_seed: Callable[[Record], Record] = field(default=_unchanged)
    build_record: Callable[[Record], Record] = field(default=_unchanged)
    prepare_update: Callable[[Record, Record], Record] = field(
        default=_no_update_hook,
    )

    @property
    def label(self) -> str:
        return self.name.label

    @property
    def path(self) -> str:
        return self.name.value


@dataclass(frozen=True)
class NestedCollection:
    """Child records scoped by a parent id, e.g. /users/{id}/todos."""
    parent: ResourceName
    child: ResourceName
    foreign_key: str
    default_limit: int = 100

    @property
    def path(self) -> str:
        return f"{self.parent.value}/{{parent_id}}/{self.child.value}"
