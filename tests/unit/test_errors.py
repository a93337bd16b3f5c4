"""Unit tests for error types in display_mcp/errors.py."""

from __future__ import annotations

from mcp import types

from display_mcp.errors import (
    FACILITY_FAILED,
    INVALID_PARAMS,
    FacilityError,
    ParameterValidationError,
    UnknownToolError,
    protocol_code,
)


class TestProtocolCodes:
    def test_known_codes(self):
        assert protocol_code(INVALID_PARAMS) == types.INVALID_PARAMS
        assert protocol_code(FACILITY_FAILED) == types.INTERNAL_ERROR

    def test_unknown_code_is_internal(self):
        assert protocol_code("SOMETHING_ELSE") == types.INTERNAL_ERROR


class TestErrorData:
    def test_validation_error(self):
        data = ParameterValidationError("get_display_at_point", "x: Field required").to_error_data()
        assert data.code == types.INVALID_PARAMS
        assert data.message == "Invalid parameters for get_display_at_point: x: Field required"

    def test_facility_error_message_verbatim(self):
        err = FacilityError("EnumDisplayMonitors: (5, 'Access is denied.')")
        assert str(err) == "EnumDisplayMonitors: (5, 'Access is denied.')"
        assert err.to_error_data().code == types.INTERNAL_ERROR

    def test_unknown_tool(self):
        data = UnknownToolError("reboot").to_error_data()
        assert data.code == types.METHOD_NOT_FOUND
        assert data.message == "Unknown tool: reboot"
