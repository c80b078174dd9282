"""
HTTP adapter for the resonance API.

Each call returns the parsed response body as the declared model, or lets
the underlying ``httpx`` failure propagate unchanged: ``httpx.TransportError``
for network problems, ``httpx.HTTPStatusError`` for non-2xx responses. There
are no retries and no timeout policy beyond the httpx default.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from apps.backend.schemas import SchemaDetail, SchemasResponse, SubmitAck
from apps.frontend.settings import DEFAULT_API_BASE_URL

logger = logging.getLogger(__name__)


class SchemaApiClient:
    """Typed wrapper around the three registry endpoints.

    Args:
        base_url: API origin. Ignored when ``client`` is given.
        client: Pre-configured ``httpx.Client`` (e.g. FastAPI's ``TestClient``).
    """

    def __init__(self, base_url: str = DEFAULT_API_BASE_URL, client: httpx.Client | None = None):
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=base_url,
            headers={"Content-Type": "application/json"},
        )

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> SchemaApiClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _get(self, path: str) -> Any:
        logger.debug("GET %s%s", self.base_url, path)
        response = self._client.get(path)
        response.raise_for_status()
        return response.json()

    def get_schemas(self) -> SchemasResponse:
        return SchemasResponse.model_validate(self._get("/schemas"))

    def get_schema(self, schema_id: str) -> SchemaDetail:
        return SchemaDetail.model_validate(self._get(f"/schema/{quote(schema_id, safe='')}"))

    def submit_data(self, schema_id: str, payload: Any = None) -> SubmitAck:
        """POST ``payload`` to the data endpoint. The server does not store it."""
        path = f"/data/{quote(schema_id, safe='')}"
        logger.debug("POST %s%s", self.base_url, path)
        response = self._client.post(path, json=payload)
        response.raise_for_status()
        return SubmitAck.model_validate(response.json())
