"""Root conftest — shared test configuration.

Invariants:
    - Every test that asks for `registry` gets a fresh copy of the packaged fixtures
"""

import os

import pytest

# Keep test output quiet and deterministic
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("LOG_FORMAT", "text")

from app.config import get_settings  # noqa: E402
from app.infrastructure.resource_registry import ResourceRegistry  # noqa: E402


@pytest.fixture
def registry() -> ResourceRegistry:
    return ResourceRegistry.from_fixtures(get_settings().data_dir)
