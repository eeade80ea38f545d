"""Resource Registry — one ResourceStore per resource, seeded from JSON fixtures.

Invariants:
    - Every ResourceName has a store (missing fixture → empty collection + warning)
    - Fixture records pass through the definition's normalize_seed exactly once
    - Stores deep-copy their seed — fixture data is never aliased
    - A fixture that exists but is not a JSON array raises FixtureLoadError at startup

Design Decisions:
    - Singleton registry initialized on startup: FastAPI lifespan manages lifecycle
      (no global import side effects)
    - get_registry is the FastAPI dependency — tests override it with isolated instances
"""

import json
import logging
from pathlib import Path
from typing import Iterable, Mapping

from app.core.domain_types import Record, ResourceName
from app.core.errors import FixtureLoadError
from app.core.resource_catalog import get_definition
from app.core.resource_store import ResourceStore

logger = logging.getLogger(__name__)


def load_fixture(data_dir: Path, name: ResourceName) -> list[Record]:
    """Read <data_dir>/<resource>.json as a list of records."""
    path = Path(data_dir) / f"{name.value}.json"
    if not path.is_file():
        logger.warning(
            f"Fixture missing for {name.value}, starting empty",
            extra={"resource": name.value, "path": str(path)},
        )
        return []
    try:
        with path.open(encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, ValueError) as e:
        raise FixtureLoadError(str(e), str(path))
    if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
        raise FixtureLoadError("expected a JSON array of objects", str(path))
    return data


class ResourceRegistry:
    """Holds the live collections for the process (or for one test)."""

    def __init__(self, records: Mapping[ResourceName, Iterable[Record]] | None = None):
        records = records or {}
        self._stores: dict[ResourceName, ResourceStore] = {}
        for name in ResourceName:
            self.reset(name, records.get(name, ()))

    @classmethod
    def from_fixtures(cls, data_dir: Path) -> "ResourceRegistry":
        return cls({name: load_fixture(data_dir, name) for name in ResourceName})

    def reset(self, name: ResourceName, records: Iterable[Record] = ()) -> ResourceStore:
        """Replace one collection with freshly normalized records."""
        definition = get_definition(name)
        store = ResourceStore(
            definition.label,
            (definition.normalize_seed(dict(r)) for r in records),
        )
        self._stores[name] = store
        return store

    def store(self, name: ResourceName) -> ResourceStore:
        return self._stores[name]

    def exists(self, name: ResourceName, record_id: int) -> bool:
        return self._stores[name].exists(record_id)

    def counts(self) -> dict[str, int]:
        return {name.value: len(store) for name, store in self._stores.items()}


# Singleton (initialized on startup)
registry: ResourceRegistry | None = None


def init_registry(data_dir: Path) -> ResourceRegistry:
    global registry
    registry = ResourceRegistry.from_fixtures(data_dir)
    logger.info(
        f"Loaded {sum(registry.counts().values())} fixture records from {data_dir}",
        extra={"count": sum(registry.counts().values())},
    )
    return registry


def get_registry() -> ResourceRegistry:
    """FastAPI dependency for the live registry."""
    if not registry:
        raise RuntimeError("Resource registry not initialized")
    return registry
