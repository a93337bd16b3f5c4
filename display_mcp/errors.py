"""Structured error types and their mapping onto protocol errors."""

from __future__ import annotations

from mcp import types

# Error code constants
INVALID_PARAMS = "INVALID_PARAMS"
FACILITY_FAILED = "FACILITY_FAILED"
UNKNOWN_TOOL = "UNKNOWN_TOOL"

# Mapping of plugin error codes onto JSON-RPC error codes
_PROTOCOL_CODES: dict[str, int] = {
    INVALID_PARAMS: types.INVALID_PARAMS,
    FACILITY_FAILED: types.INTERNAL_ERROR,
    UNKNOWN_TOOL: types.METHOD_NOT_FOUND,
}


def protocol_code(code: str) -> int:
    """Return the JSON-RPC error code for a plugin error code."""
    return _PROTOCOL_CODES.get(code, types.INTERNAL_ERROR)


class DisplayPluginError(Exception):
    """Base exception for display server errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)

    def to_error_data(self) -> types.ErrorData:
        return types.ErrorData(code=protocol_code(self.code), message=self.message)


class ParameterValidationError(DisplayPluginError):
    def __init__(self, tool: str, detail: str) -> None:
        self.tool = tool
        super().__init__(INVALID_PARAMS, f"Invalid parameters for {tool}: {detail}")


class FacilityError(DisplayPluginError):
    """Raised by an enumeration backend when it cannot answer a query."""

    def __init__(self, message: str) -> None:
        super().__init__(FACILITY_FAILED, message)


class UnknownToolError(DisplayPluginError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(UNKNOWN_TOOL, f"Unknown tool: {name}")
