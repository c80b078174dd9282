#!/usr/bin/env python3
"""Dependency doctor — verifies every runtime package can be imported.

Exit-code 0 means all good; 1 means at least one package is missing, and the
output tells you exactly which one and how to install it.
"""

from __future__ import annotations

import importlib
import sys

# Mapping:  import-name  →  pip-install-name
PACKAGES: dict[str, str] = {
    "fastapi": "fastapi",
    "uvicorn": "uvicorn",
    "pydantic": "pydantic",
    "httpx": "httpx",
    "yaml": "pyyaml",
    "rich": "rich",
    "click": "click",
}


def missing_packages(packages: dict[str, str] | None = None) -> list[str]:
    """Return the pip names of packages that fail to import."""
    missing = []
    for mod, pip_name in (packages or PACKAGES).items():
        try:
            importlib.import_module(mod)
        except ImportError:
            missing.append(pip_name)
    return missing


def main(packages: dict[str, str] | None = None) -> int:
    packages = packages or PACKAGES
    missing = missing_packages(packages)
    for mod, pip_name in packages.items():
        if pip_name in missing:
            print(f"  \033[31m✗\033[0m {pip_name:20s} MISSING  →  pip install {pip_name}")
        else:
            version = getattr(sys.modules.get(mod), "__version__", "?")
            print(f"  \033[32m✓\033[0m {pip_name:20s} {version}")

    print()
    if missing:
        print("\033[33mFix: run  pip install -e .  to install everything at once.\033[0m")
        return 1

    print("\033[32mAll dependencies present ✓\033[0m")
    return 0


if __name__ == "__main__":
    sys.exit(main())
