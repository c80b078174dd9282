"""Schema registry service – the read-only store behind the API.

The registry is built once at startup from ``configs/schemas.yaml`` and
handed to the route layer through ``app.state``. No code path mutates it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from apps.backend.core.errors import RegistryError, SchemaNotFoundError
from apps.backend.core.utils.config import DEFAULT_REGISTRY_PATH, load_config
from apps.backend.schemas import Schema, SchemaDetail, SchemasResponse, SubmitAck

logger = logging.getLogger(__name__)

REGISTRY_VERSION = "1.0.0"
# Constant marker returned by ``submit_data``; there is no write path behind it.
SUBMIT_ACK_VERSION = 1


class SchemaRegistry:
    """Immutable set of schema descriptors and their details, in listing order."""

    def __init__(
        self,
        descriptors: list[Schema],
        details: list[SchemaDetail],
        version: str = REGISTRY_VERSION,
    ):
        self._version = version
        self._descriptors = tuple(descriptors)
        self._details: dict[str, SchemaDetail] = {}

        for detail in details:
            if detail.id in self._details:
                raise RegistryError(f"Duplicate schema id: {detail.id!r}")
            _check_rows(detail)
            self._details[detail.id] = detail

        listed = [d.id for d in self._descriptors]
        if len(set(listed)) != len(listed):
            raise RegistryError(f"Duplicate schema id in listing: {listed}")
        if set(listed) != set(self._details):
            raise RegistryError(
                f"Listed schemas {sorted(listed)} do not match details {sorted(self._details)}"
            )

    @property
    def version(self) -> str:
        return self._version

    @property
    def schema_ids(self) -> list[str]:
        return [d.id for d in self._descriptors]

    def __contains__(self, schema_id: object) -> bool:
        return schema_id in self._details

    def __len__(self) -> int:
        return len(self._descriptors)

    def list_schemas(self) -> SchemasResponse:
        """Return the fixed descriptor set."""
        return SchemasResponse(version=self._version, schemas=self._descriptors)

    def get_schema_detail(self, schema_id: str) -> SchemaDetail:
        """Look up one schema by id.

        Returns a deep copy; callers cannot reach the registry's own rows.

        Raises:
            SchemaNotFoundError: If ``schema_id`` has no entry.
        """
        try:
            detail = self._details[schema_id]
        except KeyError:
            raise SchemaNotFoundError(schema_id) from None
        return detail.model_copy(deep=True)

    def submit_data(self, schema_id: str, body: Any = None) -> SubmitAck:
        """Acknowledge an update payload without validating or storing it.

        Persistence is unimplemented: the body is discarded and the registry
        is left untouched.
        """
        logger.warning(
            "Data submitted for schema %r was discarded (persistence not implemented)",
            schema_id,
        )
        return SubmitAck(version=SUBMIT_ACK_VERSION)


def _check_rows(detail: SchemaDetail) -> None:
    """Every row must carry a value for each declared column field."""
    fields = set(detail.fields)
    for index, row in enumerate(detail.data):
        missing = fields - row.keys()
        if missing:
            raise RegistryError(
                f"Row {index} of schema {detail.id!r} is missing fields: {sorted(missing)}"
            )


def build_registry(config: dict[str, Any]) -> SchemaRegistry:
    """Convert the parsed registry config into a :class:`SchemaRegistry`."""
    descriptors: list[Schema] = []
    details: list[SchemaDetail] = []
    for entry in config.get("schemas") or []:
        try:
            descriptors.append(Schema.model_validate(entry))
            details.append(
                SchemaDetail.model_validate(
                    {
                        "id": entry.get("id"),
                        "name": entry.get("name"),
                        "columns": entry.get("columns") or [],
                        "data": entry.get("data") or [],
                    }
                )
            )
        except (AttributeError, ValidationError) as exc:
            raise RegistryError(f"Invalid schema entry {entry!r}: {exc}") from exc

    return SchemaRegistry(
        descriptors,
        details,
        version=str(config.get("version", REGISTRY_VERSION)),
    )


def load_registry(path: str | Path = DEFAULT_REGISTRY_PATH) -> SchemaRegistry:
    """Load and validate the registry file at ``path``."""
    registry = build_registry(load_config(path))
    logger.info("Loaded %d schemas from %s: %s", len(registry), path, registry.schema_ids)
    return registry
