"""
Client settings, read from environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_API_BASE_URL = "http://localhost:3000"
DEFAULT_STATE_DIR = Path.home() / ".resonance"


@dataclass(frozen=True)
class ClientSettings:
    api_base_url: str = DEFAULT_API_BASE_URL
    state_dir: Path = DEFAULT_STATE_DIR

    @classmethod
    def from_env(cls) -> ClientSettings:
        return cls(
            api_base_url=os.getenv("RESONANCE_API_BASE_URL") or DEFAULT_API_BASE_URL,
            state_dir=Path(os.getenv("RESONANCE_STATE_DIR") or DEFAULT_STATE_DIR).expanduser(),
        )
