#!/usr/bin/env python3
"""
Resonance client.

Fetches schemas from the resonance API and renders them as tables. The last
visited schema path is remembered between runs, so ``resonance-client open``
with no path returns to where you left off.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
import httpx
from rich.console import Console

from apps.backend.core.utils.logging_setup import setup_logging
from apps.frontend.api_client import SchemaApiClient
from apps.frontend.router import ROOT_PATH, Router
from apps.frontend.settings import ClientSettings
from apps.frontend.storage import JsonFileStorage
from apps.frontend.views import SortError, schema_list_table, schema_table, sort_rows

console = Console()
logger = logging.getLogger(__name__)


class ClientContext:
    """Objects shared by every subcommand."""

    def __init__(self, settings: ClientSettings, api: SchemaApiClient | None = None):
        self.settings = settings
        self.api = api or SchemaApiClient(settings.api_base_url)
        self.router = Router(JsonFileStorage.in_directory(settings.state_dir))


def _report_http_error(exc: httpx.HTTPError) -> None:
    if isinstance(exc, httpx.HTTPStatusError):
        try:
            message = exc.response.json().get("error") or exc.response.text
        except (ValueError, AttributeError):
            message = exc.response.text
        console.print(f"[bold red]API error {exc.response.status_code}:[/bold red] {message}")
    else:
        console.print(f"[bold red]Request failed:[/bold red] {exc}")
    logger.debug("HTTP failure", exc_info=exc)


@click.group()
@click.option("--base-url", default=None, help="API origin (default: $RESONANCE_API_BASE_URL).")
@click.option("--state-dir", type=click.Path(file_okay=False), default=None,
              help="Directory holding the last visited path (default: $RESONANCE_STATE_DIR).")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, base_url: str | None, state_dir: str | None, verbose: bool):
    """Browse the resonance schema registry."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)
    if ctx.obj is None:
        settings = ClientSettings.from_env()
        if base_url or state_dir:
            settings = ClientSettings(
                api_base_url=base_url or settings.api_base_url,
                state_dir=Path(state_dir) if state_dir else settings.state_dir,
            )
        ctx.obj = ClientContext(settings)
        ctx.call_on_close(ctx.obj.api.close)


@main.command("open")
@click.argument("path", default=ROOT_PATH)
@click.option("--sort", "sort_field", default=None, help="Sort rows by a sortable column.")
@click.option("--desc", is_flag=True, default=False, help="Sort in descending order.")
@click.pass_obj
def open_path(obj: ClientContext, path: str, sort_field: str | None, desc: bool):
    """Open PATH ("/" or "/<schemaId>") and render its view."""
    nav = obj.router.navigate(path)
    if nav.redirected_from is not None:
        console.print(f"[dim]Resuming last visited path {nav.path}[/dim]")
    if nav.route is None:
        console.print(f"[bold red]No route matches[/bold red] {nav.path}")
        raise SystemExit(1)

    try:
        if nav.route.name == "home":
            console.print(schema_list_table(obj.api.get_schemas()))
            return
        detail = obj.api.get_schema(nav.route.params["schemaId"])
    except httpx.HTTPError as exc:
        _report_http_error(exc)
        raise SystemExit(1) from exc

    rows = None
    if sort_field:
        try:
            rows = sort_rows(detail, sort_field, descending=desc)
        except SortError as exc:
            raise click.BadParameter(str(exc), param_hint="--sort") from exc
    console.print(schema_table(detail, rows))


@main.command()
@click.argument("schema_id")
@click.option("--data", "data", default=None, help="JSON payload to send.")
@click.pass_obj
def submit(obj: ClientContext, schema_id: str, data: str | None):
    """Send a data payload for SCHEMA_ID. The server does not store it."""
    try:
        payload = json.loads(data) if data is not None else None
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"Invalid JSON: {exc}", param_hint="--data") from exc

    try:
        ack = obj.api.submit_data(schema_id, payload)
    except httpx.HTTPError as exc:
        _report_http_error(exc)
        raise SystemExit(1) from exc

    console.print(f"Acknowledged (version {ack.version})")
    console.print("[yellow]Persistence is not implemented: nothing was stored.[/yellow]")


@main.command()
@click.pass_obj
def forget(obj: ClientContext):
    """Clear the remembered last visited path."""
    obj.router.forget()
    console.print("Last visited path cleared.")


if __name__ == "__main__":
    main()
