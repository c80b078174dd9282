"""Top-level apps package.

Sub-packages
------------
apps.backend
    FastAPI server (api/), registry service (services/), shared pydantic
    models (schemas/), errors and utilities (core/), server CLI (cli/)
apps.frontend
    Terminal client: httpx API adapter, router with last-route memory,
    rich table views and the ``resonance-client`` CLI
"""

from __future__ import annotations
