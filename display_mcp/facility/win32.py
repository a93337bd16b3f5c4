"""Display enumeration through the Win32 monitor and display-device APIs."""

from __future__ import annotations

import ctypes
import logging

import win32api
import win32con
import win32gui
import win32print

from display_mcp.errors import FacilityError
from display_mcp.facility.base import find_display_by_name
from display_mcp.models import DisplayRecord

logger = logging.getLogger(__name__)

MONITORINFOF_PRIMARY = 1
MDT_EFFECTIVE_DPI = 0
UNSCALED_DPI = 96
PER_MONITOR_AWARE_V2 = ctypes.c_void_p(-4)

# DEVMODE.dmDisplayOrientation -> degrees
_ORIENTATION_DEGREES = {0: 0.0, 1: 90.0, 2: 180.0, 3: 270.0}


def enable_dpi_awareness() -> bool:
    """Make monitor geometry come back in physical pixels.

    Must run before the first Win32 call of the process. Returns False when
    neither the per-monitor v2 context nor the older shcore API is available.
    """
    try:
        if ctypes.windll.user32.SetProcessDpiAwarenessContext(PER_MONITOR_AWARE_V2):
            logger.info("Per-monitor DPI awareness v2 enabled")
            return True
        ctypes.windll.shcore.SetProcessDpiAwareness(2)
        logger.info("Per-monitor DPI awareness enabled through shcore")
        return True
    except (OSError, AttributeError) as exc:
        logger.warning("Could not enable DPI awareness: %s", exc)
        return False


def _monitor_scale(hmonitor: int) -> float:
    """Scale factor of a monitor from its effective DPI, 1.0 when unknown."""
    dpi_x = ctypes.c_uint()
    dpi_y = ctypes.c_uint()
    try:
        ctypes.windll.shcore.GetDpiForMonitor(
            ctypes.c_void_p(hmonitor), MDT_EFFECTIVE_DPI, ctypes.byref(dpi_x), ctypes.byref(dpi_y)
        )
    except (OSError, AttributeError) as exc:
        logger.debug("GetDpiForMonitor failed: %s", exc)
        return 1.0
    return dpi_x.value / UNSCALED_DPI if dpi_x.value else 1.0


def _friendly_name(device: str) -> str:
    """Monitor description for an adapter output, e.g. 'DELL U2720Q'."""
    try:
        return win32api.EnumDisplayDevices(device, 0).DeviceString.strip()
    except Exception as exc:
        logger.debug("EnumDisplayDevices failed for %s: %s", device, exc)
        return ""


def _display_settings(device: str) -> tuple[float, float]:
    """Current (frequency, rotation) for a device, zeros when unavailable."""
    try:
        mode = win32api.EnumDisplaySettings(device, win32con.ENUM_CURRENT_SETTINGS)
    except Exception as exc:
        logger.debug("EnumDisplaySettings failed for %s: %s", device, exc)
        return (0.0, 0.0)
    # Frequencies of 0 and 1 mean "hardware default"
    frequency = float(mode.DisplayFrequency) if mode.DisplayFrequency > 1 else 0.0
    rotation = _ORIENTATION_DEGREES.get(mode.DisplayOrientation, 0.0)
    return (frequency, rotation)


def _physical_size(device: str) -> tuple[int, int]:
    """Physical (width_mm, height_mm) reported by the device context."""
    try:
        hdc = win32gui.CreateDC("DISPLAY", device, None)
    except Exception as exc:
        logger.debug("CreateDC failed for %s: %s", device, exc)
        return (0, 0)
    try:
        return (
            win32print.GetDeviceCaps(hdc, win32con.HORZSIZE),
            win32print.GetDeviceCaps(hdc, win32con.VERTSIZE),
        )
    finally:
        win32gui.DeleteDC(hdc)


def _monitor_record(hmonitor, index: int) -> DisplayRecord:
    info = win32api.GetMonitorInfo(hmonitor)
    # info["Monitor"] = (left, top, right, bottom)
    # info["Device"] = device name string, e.g. \\.\DISPLAY1
    # info["Flags"] = 1 if primary
    left, top, right, bottom = info["Monitor"]
    device = info.get("Device", f"Monitor-{index}")

    width_mm, height_mm = _physical_size(device)
    frequency, rotation = _display_settings(device)

    return DisplayRecord(
        name=device,
        friendly_name=_friendly_name(device),
        x=left,
        y=top,
        width=right - left,
        height=bottom - top,
        width_mm=width_mm,
        height_mm=height_mm,
        frequency=frequency,
        scale_factor=_monitor_scale(int(hmonitor)),
        rotation=rotation,
        is_primary=bool(info.get("Flags", 0) & MONITORINFOF_PRIMARY),
    )


class Win32DisplayFacility:
    """Backend for Windows hosts."""

    def enumerate_all(self) -> list[DisplayRecord]:
        try:
            monitors_raw = win32api.EnumDisplayMonitors(None, None)
        except Exception as exc:
            logger.error("EnumDisplayMonitors failed: %s", exc)
            raise FacilityError(f"Failed to enumerate monitors: {exc}") from exc

        records: list[DisplayRecord] = []
        for i, (hmonitor, _hdc, _rect) in enumerate(monitors_raw):
            try:
                records.append(_monitor_record(hmonitor, i))
            except Exception as exc:
                logger.warning("Failed to get info for monitor %d: %s", i, exc)
                continue
        return records

    def resolve_at_point(self, x: int, y: int) -> DisplayRecord:
        try:
            hmonitor = win32api.MonitorFromPoint((x, y), win32con.MONITOR_DEFAULTTONULL)
        except Exception as exc:
            raise FacilityError(f"MonitorFromPoint failed: {exc}") from exc
        if not hmonitor:
            raise FacilityError(f"No display found at point ({x}, {y})")
        try:
            return _monitor_record(hmonitor, 0)
        except Exception as exc:
            raise FacilityError(f"Failed to read monitor info: {exc}") from exc

    def resolve_by_name(self, name: str) -> DisplayRecord:
        return find_display_by_name(self.enumerate_all(), name)
