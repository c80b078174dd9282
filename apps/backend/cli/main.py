#!/usr/bin/env python3
"""
Resonance API server.

Entry point for the schema registry backend. Runs the FastAPI application
under uvicorn on ``HOST``:``PORT`` (default port 3000).
"""

from __future__ import annotations

import logging

import click
import uvicorn
from rich.console import Console

from apps.backend.core.utils.logging_setup import setup_logging
from apps.backend.core.utils.settings import ApiSettings

console = Console()


@click.command()
@click.option("--host", default=None, help="Bind address (default: $HOST or 0.0.0.0).")
@click.option("--port", "-p", type=int, default=None, help="Listening port (default: $PORT or 3000).")
@click.option("--reload", is_flag=True, default=False, help="Restart the server on code changes.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable verbose output.")
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging.")
def main(host: str | None, port: int | None, reload: bool, verbose: bool, debug: bool):
    """Serve the resonance schema registry over HTTP."""
    settings = ApiSettings.from_env()
    if debug:
        log_level = "DEBUG"
    elif verbose:
        log_level = "INFO"
    else:
        log_level = settings.log_level
    setup_logging(log_level)

    host = host or settings.host
    port = port or settings.port

    console.print(f"[bold cyan]⚡️ Server is running at http://localhost:{port}[/bold cyan]")
    uvicorn.run(
        "apps.backend.api.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=logging.getLevelName(logging.getLogger().level).lower(),
        log_config=None,
    )


if __name__ == "__main__":
    main()
