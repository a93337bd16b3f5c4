"""Pydantic models for display records and tool parameters."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class DisplayRecord(BaseModel):
    """One physical or logical display as reported by the enumeration facility."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    friendly_name: str = ""
    x: int = Field(ge=INT32_MIN, le=INT32_MAX)
    y: int = Field(ge=INT32_MIN, le=INT32_MAX)
    width: int = Field(ge=INT32_MIN, le=INT32_MAX)
    height: int = Field(ge=INT32_MIN, le=INT32_MAX)
    width_mm: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX)
    height_mm: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX)
    frequency: float = 0.0
    scale_factor: float = 1.0
    rotation: float = 0.0
    is_primary: bool = False

    @property
    def label(self) -> str:
        """Human label, falling back to the internal name."""
        return self.friendly_name or self.name

    def contains(self, x: int, y: int) -> bool:
        """Check if a virtual-screen point lies inside this display."""
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height


class PointParams(BaseModel):
    """Parameters for get_display_at_point."""

    model_config = ConfigDict(strict=True)

    x: int = Field(ge=INT32_MIN, le=INT32_MAX, description="X coordinate on screen")
    y: int = Field(ge=INT32_MIN, le=INT32_MAX, description="Y coordinate on screen")


class NameParams(BaseModel):
    """Parameters for get_display_by_name."""

    model_config = ConfigDict(strict=True)

    name: str = Field(description="Display name to search for")
