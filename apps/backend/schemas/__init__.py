"""Schema package – re-exports all public symbols for convenient imports."""

from __future__ import annotations

from apps.backend.schemas.registry import (
    ErrorOut,
    HealthOut,
    MessageOut,
    Row,
    Schema,
    SchemaColumn,
    SchemaDetail,
    SchemasResponse,
    SubmitAck,
)

__all__ = [
    "ErrorOut",
    "HealthOut",
    "MessageOut",
    "Row",
    "Schema",
    "SchemaColumn",
    "SchemaDetail",
    "SchemasResponse",
    "SubmitAck",
]
