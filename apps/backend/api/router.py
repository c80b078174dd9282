"""API route handlers.

All endpoints are gathered in a single router so they can be included into
the FastAPI application in ``app.py``. Handlers stay thin: every lookup goes
through the :class:`SchemaRegistry` injected by :func:`get_registry`.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from apps.backend.schemas import (
    ErrorOut,
    HealthOut,
    MessageOut,
    SchemaDetail,
    SchemasResponse,
    SubmitAck,
)
from apps.backend.services import SchemaRegistry

router = APIRouter()

WELCOME_MESSAGE = "Welcome to resonance Backend API"


def get_registry(request: Request) -> SchemaRegistry:
    """Dependency returning the registry built during application startup."""
    return request.app.state.registry


# ── Routes ─────────────────────────────────────────────────────────────────


@router.get("/", response_model=MessageOut)
async def welcome() -> MessageOut:
    return MessageOut(message=WELCOME_MESSAGE)


@router.get("/api/health", response_model=HealthOut)
async def health_check() -> HealthOut:
    """Liveness probe (suppressed from access log via log filter)."""
    return HealthOut()


@router.get("/schemas", response_model=SchemasResponse)
async def list_schemas(registry: SchemaRegistry = Depends(get_registry)) -> SchemasResponse:
    """Return every registered schema descriptor."""
    return registry.list_schemas()


@router.get(
    "/schema/{schema_id}",
    response_model=SchemaDetail,
    responses={404: {"model": ErrorOut}},
)
async def get_schema(
    schema_id: str, registry: SchemaRegistry = Depends(get_registry)
) -> SchemaDetail:
    """Return columns and rows of one schema; 404 if the id is unknown."""
    return registry.get_schema_detail(schema_id)


@router.post("/data/{schema_id}", response_model=SubmitAck)
async def submit_data(
    schema_id: str, registry: SchemaRegistry = Depends(get_registry)
) -> SubmitAck:
    """Accept an update payload for a schema.

    Persistence is not implemented: the request body is never read and the
    registry is unchanged. The response is always ``{"version": 1}``.
    """
    return registry.submit_data(schema_id)
