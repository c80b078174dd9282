"""
Runtime settings for the API service, read from environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from apps.backend.core.utils.config import DEFAULT_REGISTRY_PATH

DEFAULT_PORT = 3000


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(frozen=True)
class ApiSettings:
    """Process-wide API settings.

    Safe defaults allow the local dev origins only. Override in production:
    ``CORS_ORIGINS="https://your-domain.com"``.
    """

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    cors_origins: list[str] = field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"]
    )
    registry_path: Path = DEFAULT_REGISTRY_PATH
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> ApiSettings:
        defaults = cls()
        return cls(
            host=os.getenv("HOST", defaults.host),
            port=int(os.getenv("PORT", str(defaults.port))),
            cors_origins=_split_origins(
                os.getenv("CORS_ORIGINS", ",".join(defaults.cors_origins))
            ),
            registry_path=Path(os.getenv("REGISTRY_PATH", str(defaults.registry_path))),
            log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper(),
        )
