"""Cross-platform display enumeration backed by mss monitor geometry."""

from __future__ import annotations

import logging

import mss

from display_mcp.errors import FacilityError
from display_mcp.facility.base import find_display_at_point, find_display_by_name
from display_mcp.models import DisplayRecord

logger = logging.getLogger(__name__)


class MssDisplayFacility:
    """Geometry-only backend.

    mss reports position and resolution for each monitor but nothing about
    physical size, refresh rate, scaling or rotation, so those stay unknown.
    """

    def enumerate_all(self) -> list[DisplayRecord]:
        try:
            with mss.mss() as sct:
                # monitors[0] is the bounding box of the whole virtual screen
                monitors = list(sct.monitors[1:])
        except Exception as exc:
            logger.error("mss monitor enumeration failed: %s", exc)
            raise FacilityError(f"Failed to enumerate monitors: {exc}") from exc

        primary_index = next(
            (i for i, mon in enumerate(monitors) if mon["left"] == 0 and mon["top"] == 0),
            0,
        )

        return [
            DisplayRecord(
                name=f"Monitor {i + 1}",
                x=mon["left"],
                y=mon["top"],
                width=mon["width"],
                height=mon["height"],
                is_primary=i == primary_index,
            )
            for i, mon in enumerate(monitors)
        ]

    def resolve_at_point(self, x: int, y: int) -> DisplayRecord:
        return find_display_at_point(self.enumerate_all(), x, y)

    def resolve_by_name(self, name: str) -> DisplayRecord:
        return find_display_by_name(self.enumerate_all(), name)
