"""Payload Validation — per-resource structural/type checks on request bodies.

Invariants:
    - Never raises: every failure becomes a human-readable error string
    - Non-object bodies (list, null, scalar) produce exactly ["Invalid body format"]
    - partial=True (PUT): top-level "missing" errors are dropped, nested ones kept —
      a patch may omit a field but cannot send half a cart item
    - extract_patch keeps only declared fields (plus extras when the schema
      allows them) and never the "id"

Design Decisions:
    - Rules live in pydantic models (app.schemas.resources) — strict types,
      bounds and min lengths are declarative, not hand-written if-chains
    - Errors rendered "<dotted.loc>: <msg>", matching the RequestValidationError handler
    - PayloadIssue keeps the top-level field so referential checks can skip
      fields whose type check already failed
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from app.core.domain_types import Record

INVALID_BODY_FORMAT = "Invalid body format"


@dataclass(frozen=True)
class PayloadIssue:
    """One validation failure, addressed by its dotted location."""
    loc: tuple[str | int, ...]
    message: str

    @property
    def field(self) -> str | None:
        """Top-level field the issue belongs to (None for whole-body issues)."""
        return str(self.loc[0]) if self.loc else None

    def __str__(self) -> str:
        if not self.loc:
            return self.message
        return f"{'.'.join(str(part) for part in self.loc)}: {self.message}"


def find_payload_issues(
    schema: type[BaseModel], body: Any, partial: bool = False,
) -> list[PayloadIssue]:
    """Validate body against schema and return structured issues."""
    if not isinstance(body, dict):
        return [PayloadIssue((), INVALID_BODY_FORMAT)]
    try:
        schema.model_validate(body)
    except ValidationError as exc:
        issues = []
        for error in exc.errors():
            loc = tuple(error["loc"])
            if partial and error["type"] == "missing" and len(loc) == 1:
                continue
            issues.append(PayloadIssue(loc, error["msg"]))
        return issues
    return []


def validate_payload(
    schema: type[BaseModel], body: Any, partial: bool = False,
) -> list[str]:
    """(unknown) → list of error strings. Empty list means valid."""
    return [str(issue) for issue in find_payload_issues(schema, body, partial)]


def build_payload(schema: type[BaseModel], body: dict) -> Record:
    """Validated, defaults-applied create payload. Call only after validation passed."""
    return schema.model_validate(body).model_dump()


def extract_patch(schema: type[BaseModel], body: dict) -> Record:
    """Fields of a validated patch body that may be merged into a record."""
    allow_extra = schema.model_config.get("extra") == "allow"
    return {
        key: value for key, value in body.items()
        if key != "id" and (key in schema.model_fields or allow_extra)
    }
