"""Resource Service — one read or write against the registry, validation first.

Invariants:
    - Validation (payload + references) runs to completion before any mutation
    - Type errors and reference errors are reported together; reference checks
      skip fields whose type check failed
    - Forced fields (nested routes' parent id) override the body before validation
    - Update never lets the body change "id"; missing record → 404 before body checks

Design Decisions:
    - Thin routes delegate here (imperative shell around the pure core)
    - Stateless per call: constructed with the registry + definition each request
"""

import logging
from typing import Any, Mapping

from app.core.domain_types import Record
from app.core.errors import (
    ErrorContext, PayloadValidationError, ReferentialViolationError,
)
from app.core.payload_validation import (
    build_payload, extract_patch, find_payload_issues,
)
from app.core.query_pipeline import ListQuery, run_list_query
from app.core.referential_validation import check_references
from app.core.resource_definitions import ResourceDefinition
from app.core.resource_store import ResourceStore
from app.infrastructure.resource_registry import ResourceRegistry

logger = logging.getLogger(__name__)


class ResourceService:
    """CRUD + list operations for one resource."""

    def __init__(self, registry: ResourceRegistry, definition: ResourceDefinition):
        self.registry = registry
        self.definition = definition

    @property
    def store(self) -> ResourceStore:
        return self.registry.store(self.definition.name)

    # ─── Reads ───────────────────────────────────────────────────

    def list_page(
        self,
        filters: Mapping[str, str],
        q: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        scope: Mapping[str, Any] | None = None,
        default_limit: int | None = None,
    ) -> dict:
        """Filtered, searched, paginated page of records."""
        if limit is None:
            limit = default_limit or self.definition.default_limit
        query = ListQuery(
            limit=limit,
            offset=offset or 0,
            q=q,
            filters=dict(filters),
            scope=dict(scope or {}),
        )
        return run_list_query(
            self.store.list_all(), query,
            self.definition.filters, self.definition.search_fields,
        )

    def get(self, record_id: int) -> Record:
        return self.store.get(record_id)

    # ─── Writes ──────────────────────────────────────────────────

    def create(self, body: Any, forced: Mapping[str, Any] | None = None) -> Record:
        if forced and isinstance(body, dict):
            body = {**body, **forced}
        self._validate(body, partial=False)
        record = self.definition.build_record(
            build_payload(self.definition.schema, body),
        )
        created = self.store.insert(record)
        logger.info(
            f"Created {self.definition.name.singular} {created['id']}",
            extra={"resource": self.definition.path, "record_id": created["id"]},
        )
        return created

    def update(self, record_id: int, body: Any) -> Record:
        existing = self.store.get(record_id)
        self._validate(body, partial=True)
        patch = self.definition.prepare_update(
            existing, extract_patch(self.definition.schema, body),
        )
        updated = self.store.update(record_id, patch)
        logger.info(
            f"Updated {self.definition.name.singular} {record_id}",
            extra={"resource": self.definition.path, "record_id": record_id},
        )
        return updated

    def delete(self, record_id: int) -> Record:
        deleted = self.store.delete(record_id)
        logger.info(
            f"Deleted {self.definition.name.singular} {record_id}",
            extra={"resource": self.definition.path, "record_id": record_id},
        )
        return deleted

    def _validate(self, body: Any, partial: bool) -> None:
        """Raise PayloadValidationError / ReferentialViolationError on failure."""
        context = ErrorContext(resource=self.definition.path)
        issues = find_payload_issues(self.definition.schema, body, partial)
        if not isinstance(body, dict):
            raise PayloadValidationError([str(i) for i in issues], context)
        violations = check_references(
            body,
            self.definition.references,
            self.registry.exists,
            skip_fields={issue.field for issue in issues if issue.field},
        )
        if issues:
            raise PayloadValidationError(
                [str(i) for i in issues] + violations, context,
            )
        if violations:
            raise ReferentialViolationError(violations, context)
