"""Enumeration facility interface and lookups shared by the platform backends."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from display_mcp.errors import FacilityError
from display_mcp.models import DisplayRecord


@runtime_checkable
class DisplayFacility(Protocol):
    """Platform service that lists or resolves displays.

    Every method raises FacilityError when it cannot answer.
    """

    def enumerate_all(self) -> list[DisplayRecord]: ...

    def resolve_at_point(self, x: int, y: int) -> DisplayRecord: ...

    def resolve_by_name(self, name: str) -> DisplayRecord: ...


def find_display_at_point(records: Sequence[DisplayRecord], x: int, y: int) -> DisplayRecord:
    """Return the first display whose rectangle contains (x, y)."""
    for record in records:
        if record.contains(x, y):
            return record
    raise FacilityError(f"No display found at point ({x}, {y})")


def find_display_by_name(records: Sequence[DisplayRecord], name: str) -> DisplayRecord:
    """Return the display matching a name.

    Exact matches on the internal name win; otherwise the first
    case-insensitive match on either the internal or friendly name.
    """
    for record in records:
        if record.name == name:
            return record

    wanted = name.casefold()
    for record in records:
        if wanted in (record.name.casefold(), record.friendly_name.casefold()):
            return record

    raise FacilityError(f"No display named '{name}'")
