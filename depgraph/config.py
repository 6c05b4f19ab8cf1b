"""Configuration helpers for loading environment variables.

Variables defined in a project-level ``.env`` file are loaded before they are
read. Consumers should rely on :func:`get_env` instead of :func:`os.getenv` so
that the configuration is loaded in a single, well-defined place. Values
already present in the process environment always win.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

TRUTHY = {"1", "true", "yes", "on"}


def _env_path() -> Path:
    return Path(__file__).resolve().parents[1] / ".env"


@lru_cache(maxsize=1)
def _load_environment() -> None:
    """Load environment variables from the project's ``.env`` file.

    When the project file is missing :func:`load_dotenv` still runs so its
    default discovery can find a file elsewhere. Calls are cached so the file
    is only read once per process.
    """

    env_path = _env_path()
    if env_path.exists():
        load_dotenv(env_path, override=False)
    else:
        load_dotenv(override=False)


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Return the value for ``key`` from the environment, or ``default``."""

    _load_environment()
    return os.environ.get(key, default)


def parse_bool(value: object, default: bool = False) -> bool:
    """Interpret a flag given as a bool, a string such as ``"false"``, or ``None``."""

    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY
    raise TypeError(f"Expected a boolean flag, got {type(value).__name__}")


def get_bool(key: str, default: bool = False) -> bool:
    """Interpret ``key`` as a boolean flag."""

    return parse_bool(get_env(key), default)


def package_manager() -> str:
    return get_env("DEPGRAPH_PACKAGE_MANAGER", "npm") or "npm"


def project_path() -> str:
    return get_env("DEPGRAPH_PROJECT_PATH", ".") or "."


def log_level() -> str:
    return (get_env("DEPGRAPH_LOG_LEVEL", "WARNING") or "WARNING").upper()


def strict() -> bool:
    return get_bool("DEPGRAPH_STRICT")


__all__ = ["get_bool", "get_env", "parse_bool", "log_level", "package_manager", "project_path", "strict"]
