"""Text rendering of display records.

Rendering is pure and deterministic: the same records always produce the
same text. Lines are emitted in a fixed order and optional lines are
dropped when the facility reports the attribute as unknown.
"""

from __future__ import annotations

import math
import struct
from collections.abc import Sequence

from display_mcp.models import INT32_MAX, INT32_MIN, DisplayRecord

MM_PER_INCH = 25.4
FLT_MAX = 3.4028234663852886e38


def _f32(value: float) -> float:
    """Round a float to single precision."""
    if abs(value) > FLT_MAX:
        return math.copysign(math.inf, value)
    return struct.unpack("f", struct.pack("f", value))[0]


def diagonal_inches(width_mm: int, height_mm: int) -> float:
    """Diagonal size in inches, evaluated in single precision."""
    diag_mm = _f32(math.sqrt(_f32(float(width_mm * width_mm + height_mm * height_mm))))
    return _f32(diag_mm / _f32(MM_PER_INCH))


def _truncate_degrees(rotation: float) -> int:
    # Saturating truncation toward zero; NaN maps to 0.
    if math.isnan(rotation):
        return 0
    if rotation >= INT32_MAX:
        return INT32_MAX
    if rotation <= INT32_MIN:
        return INT32_MIN
    return int(rotation)


def render_display(record: DisplayRecord) -> str:
    """Render a single display as a header line followed by indented attributes."""
    primary = " (primary)" if record.is_primary else ""
    lines = [
        f"{record.label}{primary}",
        f"  Resolution: {record.width}x{record.height}",
        f"  Position: ({record.x}, {record.y})",
    ]

    if record.width_mm > 0 and record.height_mm > 0:
        diag = diagonal_inches(record.width_mm, record.height_mm)
        lines.append(f'  Physical: {record.width_mm}mm x {record.height_mm}mm (~{diag:.1f}")')

    if record.frequency > 0:
        lines.append(f"  Refresh: {record.frequency:.0f}Hz")

    if record.scale_factor != 1.0:
        lines.append(f"  Scale: {record.scale_factor * 100:.0f}%")

    # Rotation is truncated, not rounded like refresh and scale
    if record.rotation != 0:
        lines.append(f"  Rotation: {_truncate_degrees(record.rotation)}°")

    return "".join(line + "\n" for line in lines)


def render_display_list(records: Sequence[DisplayRecord]) -> str:
    """Render every display in facility order, numbered from 1, with a total."""
    result = "Display Information:\n\n"

    if not records:
        return result + "No displays detected.\n"

    for i, record in enumerate(records, start=1):
        result += f"Display {i}: {render_display(record)}\n"

    result += f"Total displays: {len(records)}\n"
    return result
