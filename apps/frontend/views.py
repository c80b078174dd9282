"""
Rich renderings of the registry listing and of one schema's data grid.
"""

from __future__ import annotations

from typing import Any

from rich.table import Table

from apps.backend.schemas import Row, SchemaDetail, SchemasResponse


class SortError(ValueError):
    """Requested sort field is unknown or not sortable."""


def schema_list_table(listing: SchemasResponse) -> Table:
    """Root view: one line per registered schema."""
    table = Table(title=f"Schemas (v{listing.version})", title_justify="left")
    table.add_column("Path", style="bold cyan")
    table.add_column("Name")
    table.add_column("Icon", style="dim")
    for schema in listing.schemas:
        table.add_row(f"/{schema.id}", schema.name, schema.icon)
    return table


def _sort_key(value: Any, numeric: bool) -> tuple:
    # Ranks: numbers, then text, then missing values (ascending order)
    if value is None:
        return (2, 0.0, "")
    if numeric:
        try:
            return (0, float(value), "")
        except (TypeError, ValueError):
            pass
    return (1, 0.0, str(value))


def sort_rows(detail: SchemaDetail, field: str, descending: bool = False) -> list[Row]:
    """Return the schema's rows ordered by a sortable column."""
    column = detail.column(field)
    if column is None:
        raise SortError(f"Unknown column {field!r}; choose from {detail.fields}")
    if not column.sortable:
        raise SortError(f"Column {field!r} is not sortable")
    numeric = column.type == "number"
    return sorted(
        detail.data,
        key=lambda row: _sort_key(row.get(field), numeric),
        reverse=descending,
    )


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def schema_table(detail: SchemaDetail, rows: list[Row] | None = None) -> Table:
    """Data grid for one schema. Editable columns are marked with ``✎``."""
    table = Table(title=f"{detail.name} ({detail.id})", title_justify="left")
    for col in detail.columns:
        header = f"{col.header} ✎" if col.editable else col.header
        table.add_column(
            header,
            justify="right" if col.type == "number" else "left",
            no_wrap=col.type == "number",
        )
    for row in detail.data if rows is None else rows:
        table.add_row(*(_cell(row.get(col.field)) for col in detail.columns))
    return table
