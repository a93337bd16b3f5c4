"""Server configuration loaded from environment variables with sensible defaults."""

from __future__ import annotations

import logging
import os


def _get_env_str(key: str, default: str) -> str:
    """Get a stripped, lower-cased string from an environment variable."""
    raw = os.environ.get(key, "").strip()
    if not raw:
        return default
    return raw.lower()


def _get_env_bool(key: str, default: bool) -> bool:
    """Get a boolean from an environment variable."""
    raw = os.environ.get(key, "")
    if not raw:
        return default
    return raw.lower() in ("true", "1", "yes")


def _get_env_log_level(key: str, default: str) -> str:
    """Get a logging level name from an environment variable."""
    raw = os.environ.get(key, "").strip().upper()
    if raw and isinstance(logging.getLevelName(raw), int):
        return raw
    return default


# Enumeration backend — "auto", "win32" or "mss"
DISPLAY_BACKEND: str = _get_env_str("DISPLAY_MCP_BACKEND", "auto")

# Log level for the stderr handler (stdout carries the protocol)
LOG_LEVEL: str = _get_env_log_level("DISPLAY_MCP_LOG_LEVEL", "WARNING")

# Per-monitor DPI awareness on Windows, so geometry is in physical pixels
DPI_AWARE: bool = _get_env_bool("DISPLAY_MCP_DPI_AWARE", True)

# Server identity advertised during initialization
SERVER_NAME: str = "display-info"
