"""
Configuration Loading Utilities.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

# Repository-level configs/ directory (next to the ``apps`` package).
CONFIG_DIR = Path(__file__).resolve().parents[4] / "configs"
DEFAULT_REGISTRY_PATH = CONFIG_DIR / "schemas.yaml"


def load_config(config_path: str | Path) -> dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f)

    # An empty file parses to None
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ValueError(f"Configuration root must be a mapping: {config_path}")

    # Missing sections become empty so callers can validate content
    config.setdefault("schemas", [])

    return config
