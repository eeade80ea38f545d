"""Referential Validation — foreign-key existence checks at write time.

Invariants:
    - Every reference field present is checked — no short-circuit across fields
    - A field listed in skip_fields (its type check failed) is not looked up
    - Values that are not positive ints are skipped (type validation owns them)
    - Nested references (cart products[].productId) stop at the first missing id
    - Pure: existence is answered by the injected `exists` callable, no store access

Design Decisions:
    - Reference declared as data (field, target, within) on the resource definition
    - Messages name the offending field and id: "Invalid productId: product 9999 does not exist"
"""

from dataclasses import dataclass
from typing import Any, Callable, Collection, Mapping

from app.core.domain_types import ResourceName

ExistsFn = Callable[[ResourceName, int], bool]


@dataclass(frozen=True)
class Reference:
    """A foreign-key field; `within` names the list holding it for nested refs."""
    field: str
    target: ResourceName
    within: str | None = None

    @property
    def top_level_field(self) -> str:
        return self.within or self.field


def _is_record_id(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


def _violation(ref: Reference, value: int) -> str:
    return f"Invalid {ref.field}: {ref.target.singular} {value} does not exist"


def _check_nested(ref: Reference, items: Any, exists: ExistsFn) -> list[str]:
    if not isinstance(items, list):
        return []
    for item in items:
        if not isinstance(item, Mapping):
            continue
        value = item.get(ref.field)
        if _is_record_id(value) and not exists(ref.target, value):
            return [_violation(ref, value)]
    return []


def check_references(
    payload: Mapping[str, Any],
    references: Collection[Reference],
    exists: ExistsFn,
    skip_fields: Collection[str] = (),
) -> list[str]:
    """Return one message per dangling reference (empty = valid)."""
    violations: list[str] = []
    for ref in references:
        if ref.top_level_field in skip_fields or ref.top_level_field not in payload:
            continue
        if ref.within is not None:
            violations.extend(_check_nested(ref, payload[ref.within], exists))
            continue
        value = payload[ref.field]
        if _is_record_id(value) and not exists(ref.target, value):
            violations.append(_violation(ref, value))
    return violations
