"""Shared pytest fixtures for the test suite.

Fixture overview
----------------
registry        — registry loaded from the shipped configs/schemas.yaml
test_client     — FastAPI TestClient with the lifespan running
api             — SchemaApiClient talking to the in-process app
storage         — in-memory key-value storage
file_storage    — JSON file storage under tmp_path
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from apps.backend.api.app import create_app
from apps.backend.core.utils.settings import ApiSettings
from apps.backend.services import SchemaRegistry, load_registry
from apps.frontend.api_client import SchemaApiClient
from apps.frontend.storage import JsonFileStorage, MemoryStorage

# ── API service ──────────────────────────────────────────────────────────────


@pytest.fixture
def registry() -> SchemaRegistry:
    return load_registry()


@pytest.fixture
def test_client(registry: SchemaRegistry) -> Iterator[TestClient]:
    app = create_app(ApiSettings(), registry=registry)
    with TestClient(app) as client:
        yield client


# ── Client ───────────────────────────────────────────────────────────────────


@pytest.fixture
def api(test_client: TestClient) -> SchemaApiClient:
    return SchemaApiClient(client=test_client)


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def file_storage(tmp_path: Path) -> JsonFileStorage:
    return JsonFileStorage.in_directory(tmp_path / "state")
