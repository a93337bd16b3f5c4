"""Platform display-enumeration backends.

Every backend implements the DisplayFacility interface; select_facility
picks one at run time from configuration and the host platform.
"""

from __future__ import annotations

import logging
import sys

from display_mcp import config
from display_mcp.facility.base import (
    DisplayFacility,
    find_display_at_point,
    find_display_by_name,
)

logger = logging.getLogger(__name__)

BACKENDS = ("auto", "win32", "mss")

__all__ = [
    "BACKENDS",
    "DisplayFacility",
    "find_display_at_point",
    "find_display_by_name",
    "select_facility",
]


def select_facility(backend: str | None = None) -> DisplayFacility:
    """Instantiate the enumeration backend.

    Args:
        backend: "auto", "win32" or "mss". Defaults to config.DISPLAY_BACKEND.
            "auto" uses Win32 on Windows and mss everywhere else.
    """
    name = (backend or config.DISPLAY_BACKEND).lower()
    if name not in BACKENDS:
        raise ValueError(f"Unknown display backend '{name}', expected one of {', '.join(BACKENDS)}")

    if name == "auto":
        name = "win32" if sys.platform == "win32" else "mss"

    # Backends import their platform libraries lazily
    if name == "win32":
        from display_mcp.facility.win32 import Win32DisplayFacility

        facility: DisplayFacility = Win32DisplayFacility()
    else:
        from display_mcp.facility.mss_backend import MssDisplayFacility

        facility = MssDisplayFacility()

    logger.info("Using %s display backend", name)
    return facility
