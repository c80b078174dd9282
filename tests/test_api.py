"""
HTTP-level tests for the FastAPI application.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from apps.backend.api.app import _QuietPollFilter, create_app
from apps.backend.core.errors import RegistryError
from apps.backend.core.utils.settings import ApiSettings
from apps.backend.services import SchemaRegistry


class TestMetaRoutes:
    def test_welcome(self, test_client: TestClient) -> None:
        response = test_client.get("/")
        assert response.status_code == 200
        assert response.json() == {"message": "Welcome to resonance Backend API"}

    def test_health(self, test_client: TestClient) -> None:
        body = test_client.get("/api/health").json()
        assert body["status"] == "healthy"
        assert datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00")).tzinfo is not None


class TestSchemaRoutes:
    def test_list_schemas(self, test_client: TestClient) -> None:
        body = test_client.get("/schemas").json()
        assert body["version"] == "1.0.0"
        assert [s["id"] for s in body["schemas"]] == ["cards", "characters"]
        assert set(body["schemas"][0]) == {"id", "name", "icon"}

    def test_get_cards(self, test_client: TestClient) -> None:
        response = test_client.get("/schema/cards")
        assert response.status_code == 200
        body = response.json()
        assert body["id"] == "cards"
        rarity = next(c for c in body["columns"] if c["field"] == "rarity")
        assert rarity["type"] == "text"
        assert {"id": 1, "name": "화염의 검", "rarity": "Epic"}.items() <= body["data"][0].items()

    def test_column_shape(self, test_client: TestClient) -> None:
        column = test_client.get("/schema/characters").json()["columns"][0]
        assert set(column) == {"field", "header", "sortable", "editable", "type"}

    def test_unknown_schema_is_404(self, test_client: TestClient) -> None:
        response = test_client.get("/schema/nonexistent")
        assert response.status_code == 404
        assert response.json() == {"error": "Schema 'nonexistent' not found"}


class TestDataRoute:
    @pytest.mark.parametrize(
        "payload",
        [{"id": 1, "name": "changed"}, [1, 2, 3], {"data": []}],
    )
    def test_any_payload_acknowledged(self, test_client: TestClient, payload) -> None:
        response = test_client.post("/data/cards", json=payload)
        assert response.status_code == 200
        assert response.json() == {"version": 1}

    def test_empty_and_non_json_body(self, test_client: TestClient) -> None:
        assert test_client.post("/data/cards").json() == {"version": 1}
        assert test_client.post("/data/cards", content=b"not json").json() == {"version": 1}

    def test_submit_does_not_persist(self, test_client: TestClient) -> None:
        before = test_client.get("/schema/cards").json()
        test_client.post("/data/cards", json={"id": 1, "name": "changed", "rarity": "Common"})
        assert test_client.get("/schema/cards").json() == before


class TestApplication:
    def test_cors_header(self, test_client: TestClient) -> None:
        response = test_client.get("/schemas", headers={"Origin": "http://localhost:5173"})
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"

    def test_registry_loaded_from_settings(self, tmp_path: Path) -> None:
        path = tmp_path / "schemas.yaml"
        path.write_text(
            "schemas:\n"
            "  - {id: items, name: Items, columns: [], data: []}\n",
            encoding="utf-8",
        )
        app = create_app(ApiSettings(registry_path=path))
        with TestClient(app) as client:
            assert [s["id"] for s in client.get("/schemas").json()["schemas"]] == ["items"]
            assert client.get("/schema/cards").status_code == 404

    def test_startup_log_reports_registry_size(
        self, registry: SchemaRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO, logger="apps.backend.api.app")
        with TestClient(create_app(ApiSettings(port=5000), registry=registry)):
            pass
        messages = [r.getMessage() for r in caplog.records if r.name == "apps.backend.api.app"]
        assert "Backend ready – serving 2 schemas" in messages
        assert not any("port" in m for m in messages)

    def test_invalid_registry_fails_startup(self, tmp_path: Path) -> None:
        path = tmp_path / "schemas.yaml"
        path.write_text(
            "schemas:\n"
            "  - {id: items, name: Items, columns: [{field: x, header: X}], data: [{}]}\n",
            encoding="utf-8",
        )
        with pytest.raises(RegistryError):
            with TestClient(create_app(ApiSettings(registry_path=path))):
                pass

    def test_health_polls_filtered_from_access_log(self) -> None:
        flt = _QuietPollFilter()
        noisy = logging.LogRecord("uvicorn.access", logging.INFO, "", 0, '"GET /api/health HTTP/1.1" 200', None, None)
        normal = logging.LogRecord("uvicorn.access", logging.INFO, "", 0, '"GET /schemas HTTP/1.1" 200', None, None)
        assert not flt.filter(noisy)
        assert flt.filter(normal)
