"""Query Pipeline — uniform filter / search / paginate semantics for every list endpoint.

Invariants:
    - Order of operations: scope → filters (AND) → search → total → slice
    - total is the post-filter, pre-pagination count
    - Negative limit/offset clamp to 0; offsets past the end yield an empty page
    - Empty-string filter values and an empty q are treated as absent
    - Pure function: no IO, input records never mutated

Design Decisions:
    - Filters described by FilterField (param, field, mode) so one pipeline
      serves all 12 resources — the catalog supplies the configuration
    - EXACT compares str(value) to the raw query string: "1" matches 1 without
      guessing the field's type from the query string
    - Search stringifies values so numeric fields (user id) are searchable
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Sequence

from app.core.domain_types import FilterMode, Record


@dataclass(frozen=True)
class FilterField:
    """Maps a query-string parameter onto a record field."""
    param: str
    field: str
    mode: FilterMode = FilterMode.EXACT


@dataclass(frozen=True)
class ListQuery:
    """Parsed list request — filters keyed by query param name."""
    limit: int
    offset: int = 0
    q: str | None = None
    filters: Mapping[str, str] = field(default_factory=dict)
    scope: Mapping[str, Any] = field(default_factory=dict)


def _matches_filter(record: Record, spec: FilterField, expected: str) -> bool:
    value = record.get(spec.field)
    if spec.mode == FilterMode.CASE_INSENSITIVE:
        return value is not None and str(value).casefold() == expected.casefold()
    if spec.mode == FilterMode.CONTAINS:
        return isinstance(value, list) and expected in value
    if spec.mode == FilterMode.BOOLEAN:
        return value == (expected.strip().lower() == "true")
    if value is None:
        return False
    if isinstance(value, bool):
        return str(value).lower() == expected
    return str(value) == expected


def _matches_search(record: Record, needle: str, search_fields: Sequence[str]) -> bool:
    """Case-insensitive substring match across search fields (OR)."""
    for name in search_fields:
        value = record.get(name)
        if value is not None and needle in str(value).lower():
            return True
    return False


def apply_filters(
    records: Iterable[Record],
    filter_fields: Sequence[FilterField],
    params: Mapping[str, str],
) -> list[Record]:
    """Apply every present filter with AND semantics, in declaration order."""
    filtered = list(records)
    for spec in filter_fields:
        expected = params.get(spec.param)
        if expected is None or expected == "":
            continue
        filtered = [r for r in filtered if _matches_filter(r, spec, expected)]
    return filtered


def apply_search(
    records: Iterable[Record], q: str | None, search_fields: Sequence[str],
) -> list[Record]:
    if not q or not search_fields:
        return list(records)
    needle = q.lower()
    return [r for r in records if _matches_search(r, needle, search_fields)]


def paginate(records: Sequence[Record], limit: int, offset: int) -> dict:
    """Slice [offset, offset + limit) and wrap in the page envelope."""
    limit = max(0, limit)
    offset = max(0, offset)
    return {
        "total": len(records),
        "limit": limit,
        "offset": offset,
        "results": list(records[offset:offset + limit]),
    }


def _matches_scope(record: Record, scope: Mapping[str, Any]) -> bool:
    """Typed equality: a boolean never stands in for an integer id."""
    for name, expected in scope.items():
        value = record.get(name)
        if isinstance(value, bool) != isinstance(expected, bool) or value != expected:
            return False
    return True


def run_list_query(
    records: Iterable[Record],
    query: ListQuery,
    filter_fields: Sequence[FilterField] = (),
    search_fields: Sequence[str] = (),
) -> dict:
    """Scope, filter, search and paginate a collection.

    Returns {"total", "limit", "offset", "results"}.
    """
    scoped = [r for r in records if _matches_scope(r, query.scope)]
    filtered = apply_filters(scoped, filter_fields, query.filters)
    searched = apply_search(filtered, query.q, search_fields)
    return paginate(searched, query.limit, query.offset)
