"""Pydantic schemas shared by the API service and the client.

The API serialises these models; the client parses responses back into
them, so both sides agree on one set of shapes.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

Row = dict[str, Any]

# ── Registry models ─────────────────────────────────────────────────────────


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Schema(_Frozen):
    """Descriptor of one named collection of tabular data."""

    id: str
    name: str
    icon: str = ""


class SchemaColumn(_Frozen):
    field: str
    header: str
    sortable: bool = False
    editable: bool = False
    type: Literal["text", "number"] = "text"


class SchemaDetail(_Frozen):
    """Full definition of one schema: its columns and current rows."""

    id: str
    name: str
    columns: tuple[SchemaColumn, ...] = ()
    data: tuple[Row, ...] = ()

    @property
    def fields(self) -> list[str]:
        return [col.field for col in self.columns]

    def column(self, field: str) -> SchemaColumn | None:
        for col in self.columns:
            if col.field == field:
                return col
        return None


class SchemasResponse(_Frozen):
    version: str
    schemas: tuple[Schema, ...] = ()


# ── Response models ─────────────────────────────────────────────────────────


class SubmitAck(BaseModel):
    """Acknowledgment returned by the data endpoint. Nothing is stored."""

    version: int


class MessageOut(BaseModel):
    message: str


class HealthOut(BaseModel):
    status: Literal["healthy"] = "healthy"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ErrorOut(BaseModel):
    error: str
