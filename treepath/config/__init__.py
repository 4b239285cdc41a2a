"""treepath runtime settings.

All settings are backed by environment variables following the TP_* naming convention.

Example:
    >>> from treepath.config import settings
    >>> settings.trace_resolution
    False

Environment Variables:
    TP_TRACE_RESOLUTION: Emit a structured trace entry per resolved path element (default: false)
    TP_LOG_DIR: Directory for JSON-lines trace files (default: unset, traces go to stderr)
    TP_LOG_CONSOLE: Also write trace entries to stderr (default: true)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


def _env(name: str, default: str) -> str:
    """Get environment variable with TP_* prefix validation."""
    if not name.startswith("TP_"):
        raise ValueError(f"Only TP_* env vars are allowed, got: {name}")
    return os.getenv(name, default)


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name, str(default))
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_optional(name: str) -> Optional[str]:
    raw = _env(name, "").strip()
    return raw or None


@dataclass(frozen=True)
class Settings:
    """Runtime settings for treepath.

    Frozen to prevent accidental mutation at runtime. For testing, either reload
    this module after setting environment variables or monkeypatch the
    module-level `settings` instance with a new ``Settings(...)``.
    """

    trace_resolution: bool = _env_bool("TP_TRACE_RESOLUTION", False)
    log_dir: Optional[str] = _env_optional("TP_LOG_DIR")
    log_console: bool = _env_bool("TP_LOG_CONSOLE", True)


# Module-level instance for convenient access
settings = Settings()

__all__ = ["settings", "Settings"]
