"""Tool registry and dispatch.

Each tool is a ToolSpec row in TOOLS: a parameter decoder and a handler
that queries the enumeration facility and renders the result. The
dispatcher is stateless apart from the injected facility, so calls are
independent and may run concurrently.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mcp import types
from mcp.shared.exceptions import McpError
from pydantic import BaseModel

from display_mcp.errors import DisplayPluginError, FacilityError, UnknownToolError
from display_mcp.facility import DisplayFacility
from display_mcp.models import NameParams, PointParams
from display_mcp.render import render_display, render_display_list
from display_mcp.validation import decode_name_params, decode_no_params, decode_point_params

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolSpec:
    """One advertised tool: how to decode its arguments and what to run."""

    name: str
    description: str
    params_model: type[BaseModel] | None
    decode: Callable[[str, Any], Any]
    handler: Callable[[DisplayFacility, Any], str]

    def input_schema(self) -> dict[str, Any]:
        if self.params_model is None:
            return {"type": "object", "properties": {}}
        return self.params_model.model_json_schema()

    def to_tool(self) -> types.Tool:
        return types.Tool(name=self.name, description=self.description, inputSchema=self.input_schema())


def _query(context: str, query: Callable[[], Any]) -> Any:
    """Run a facility query, wrapping any failure with the operation context."""
    try:
        return query()
    except Exception as exc:
        raise FacilityError(f"{context}: {exc}") from exc


def _display_info(facility: DisplayFacility, params: None) -> str:
    displays = _query("Failed to get display info", facility.enumerate_all)
    return render_display_list(displays)


def _display_at_point(facility: DisplayFacility, params: PointParams) -> str:
    display = _query(
        f"Failed to get display at ({params.x}, {params.y})",
        lambda: facility.resolve_at_point(params.x, params.y),
    )
    return f"Display at ({params.x}, {params.y}):\n{render_display(display)}"


def _display_by_name(facility: DisplayFacility, params: NameParams) -> str:
    display = _query(
        f"Failed to get display '{params.name}'",
        lambda: facility.resolve_by_name(params.name),
    )
    return render_display(display)


TOOLS: dict[str, ToolSpec] = {
    spec.name: spec
    for spec in (
        ToolSpec(
            name="get_display_info",
            description="Get display/monitor information (connected displays, resolutions, physical sizes)",
            params_model=None,
            decode=decode_no_params,
            handler=_display_info,
        ),
        ToolSpec(
            name="get_display_at_point",
            description=(
                "Get display info at specific screen coordinates "
                "(useful for determining which monitor contains a point)"
            ),
            params_model=PointParams,
            decode=decode_point_params,
            handler=_display_at_point,
        ),
        ToolSpec(
            name="get_display_by_name",
            description="Get display info by name",
            params_model=NameParams,
            decode=decode_name_params,
            handler=_display_by_name,
        ),
    )
}


class ToolDispatcher:
    """Routes named tool calls to their handlers against one facility."""

    def __init__(self, facility: DisplayFacility, tools: dict[str, ToolSpec] | None = None) -> None:
        self.facility = facility
        self.tools = TOOLS if tools is None else tools

    def list_tools(self) -> list[types.Tool]:
        return [spec.to_tool() for spec in self.tools.values()]

    def call(self, name: str, arguments: Any = None) -> types.CallToolResult:
        """Invoke a tool and return its text result.

        Raises McpError carrying structured ErrorData for unknown tools,
        invalid parameters and facility failures.
        """
        logger.debug("Tool call %s(%r)", name, arguments)
        try:
            spec = self.tools.get(name)
            if spec is None:
                raise UnknownToolError(name)
            params = spec.decode(name, arguments)
            text = spec.handler(self.facility, params)
        except DisplayPluginError as exc:
            logger.error("%s failed: %s", name, exc.message)
            raise McpError(exc.to_error_data()) from exc

        return types.CallToolResult(content=[types.TextContent(type="text", text=text)], isError=False)
