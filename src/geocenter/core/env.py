"""
Environment helpers.

`load_dotenv_if_present()` loads a repo-local `.env` once so `GEOCENTER_*`
variables can live there during development. It never overrides variables
already set in the process environment.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv


def _iter_parents(start: Path) -> list[Path]:
    start = start.resolve()
    return [start, *list(start.parents)]


def _find_env_file() -> Path | None:
    explicit = os.getenv("GEOCENTER_ENV_FILE")
    if explicit:
        env_path = Path(explicit).expanduser().resolve()
        return env_path if env_path.is_file() else None

    for candidate in _iter_parents(Path.cwd()):
        if (candidate / ".env").is_file():
            return candidate / ".env"
        # Stop at the repository boundary.
        if (candidate / ".git").exists() or (candidate / "pyproject.toml").is_file():
            return None
    return None


@lru_cache
def load_dotenv_if_present() -> Path | None:
    """Load `.env` once if present; returns the loaded env path (or None)."""
    env_path = _find_env_file()
    if env_path is None:
        return None
    load_dotenv(dotenv_path=env_path, override=False)
    return env_path
