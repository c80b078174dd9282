"""Services package – re-exports all public service symbols."""

from __future__ import annotations

from apps.backend.services.registry import (
    REGISTRY_VERSION,
    SUBMIT_ACK_VERSION,
    SchemaRegistry,
    build_registry,
    load_registry,
)

__all__ = [
    "REGISTRY_VERSION",
    "SUBMIT_ACK_VERSION",
    "SchemaRegistry",
    "build_registry",
    "load_registry",
]
