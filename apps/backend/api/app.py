"""FastAPI application factory.

Instantiate with:
    uvicorn apps.backend.api.app:app --reload --port 3000
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from apps.backend.api.router import router
from apps.backend.core.errors import SchemaNotFoundError
from apps.backend.core.utils.settings import ApiSettings
from apps.backend.schemas import ErrorOut
from apps.backend.services import SchemaRegistry, load_registry

logger = logging.getLogger(__name__)


def create_app(
    settings: ApiSettings | None = None,
    registry: SchemaRegistry | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: API settings; read from the environment when omitted.
        registry: Prebuilt registry; loaded from ``settings.registry_path``
            at startup when omitted.
    """
    settings = settings or ApiSettings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Build the read-only schema registry once per process."""
        app.state.registry = (
            registry if registry is not None else load_registry(settings.registry_path)
        )
        logger.info("Backend ready – serving %d schemas", len(app.state.registry))
        yield

    application = FastAPI(
        title="Resonance API",
        version="1.0.0",
        description="Schema registry backend for the resonance data tables",
        lifespan=lifespan,
    )
    application.state.settings = settings

    # ── CORS ───────────────────────────────────────────────────────────────
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Routes (mounted at the root, as the client expects) ────────────────
    application.include_router(router)

    # ── Domain errors ──────────────────────────────────────────────────────
    application.add_exception_handler(SchemaNotFoundError, _schema_not_found_handler)

    # ── Suppress noisy access-log lines for health polls ───────────────────
    _install_access_log_filter()

    return application


async def _schema_not_found_handler(request: Request, exc: SchemaNotFoundError) -> JSONResponse:
    logger.info("Schema lookup failed on %s: %s", request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.http_status,
        content=ErrorOut(error=exc.message).model_dump(),
    )


class _QuietPollFilter(logging.Filter):
    """Drop uvicorn access-log records for /api/health."""

    _NOISY = ("/api/health",)

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        return not any(path in msg for path in self._NOISY)


def _install_access_log_filter() -> None:
    """Attach the filter to uvicorn's access logger (once)."""
    uvicorn_access = logging.getLogger("uvicorn.access")
    if not any(isinstance(f, _QuietPollFilter) for f in uvicorn_access.filters):
        uvicorn_access.addFilter(_QuietPollFilter())


# Module-level instance used by uvicorn and tests.
app = create_app()
