"""Shared test fixtures for the display server test suite."""

from __future__ import annotations

import pytest

from display_mcp.errors import FacilityError
from display_mcp.models import DisplayRecord


class StubFacility:
    """In-memory enumeration facility that records every query it receives."""

    def __init__(self, displays: list[DisplayRecord] | None = None, error: Exception | None = None) -> None:
        self.displays = displays or []
        self.error = error
        self.calls: list[tuple] = []

    def _maybe_fail(self) -> None:
        if self.error is not None:
            raise self.error

    def enumerate_all(self) -> list[DisplayRecord]:
        self.calls.append(("enumerate_all",))
        self._maybe_fail()
        return list(self.displays)

    def resolve_at_point(self, x: int, y: int) -> DisplayRecord:
        self.calls.append(("resolve_at_point", x, y))
        self._maybe_fail()
        for display in self.displays:
            if display.contains(x, y):
                return display
        raise FacilityError(f"No display found at point ({x}, {y})")

    def resolve_by_name(self, name: str) -> DisplayRecord:
        self.calls.append(("resolve_by_name", name))
        self._maybe_fail()
        for display in self.displays:
            if display.name == name:
                return display
        raise FacilityError(f"No display named '{name}'")


@pytest.fixture
def primary_display() -> DisplayRecord:
    """A 27-inch 4K primary monitor at 150% scaling."""
    return DisplayRecord(
        name="\\\\.\\DISPLAY1",
        friendly_name="DELL U2720Q",
        x=0,
        y=0,
        width=3840,
        height=2160,
        width_mm=600,
        height_mm=340,
        frequency=59.94,
        scale_factor=1.5,
        is_primary=True,
    )


@pytest.fixture
def secondary_display() -> DisplayRecord:
    """A portrait monitor left of the primary with nothing but geometry known."""
    return DisplayRecord(
        name="\\\\.\\DISPLAY2",
        x=-1080,
        y=0,
        width=1080,
        height=1920,
        rotation=90.0,
    )


@pytest.fixture
def display_list(primary_display: DisplayRecord, secondary_display: DisplayRecord) -> list[DisplayRecord]:
    return [primary_display, secondary_display]


@pytest.fixture
def stub_facility(display_list: list[DisplayRecord]) -> StubFacility:
    return StubFacility(display_list)


@pytest.fixture
def failing_facility() -> StubFacility:
    return StubFacility(error=FacilityError("display enumeration unavailable"))


@pytest.fixture
def make_facility():
    """Factory for stub facilities with custom displays or a forced failure."""
    return StubFacility
