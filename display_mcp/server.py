"""MCP server instance bound to the tool dispatcher."""

from __future__ import annotations

import asyncio
import logging
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from display_mcp.descriptor import SERVER_DESCRIPTOR
from display_mcp.dispatch import ToolDispatcher
from display_mcp.facility import DisplayFacility, select_facility

logger = logging.getLogger(__name__)


def build_server(dispatcher: ToolDispatcher) -> Server:
    """Create a low-level MCP server whose tools come from the dispatcher's table.

    tools/call is a raw request handler, so a raised McpError reaches the
    client as a JSON-RPC error carrying its code.
    """
    server: Server = Server(SERVER_DESCRIPTOR.name)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return dispatcher.list_tools()

    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        # Platform enumeration blocks, keep it off the event loop
        result = await asyncio.to_thread(dispatcher.call, request.params.name, request.params.arguments)
        return types.ServerResult(result)

    server.request_handlers[types.CallToolRequest] = call_tool

    return server


async def serve(facility: DisplayFacility | None = None) -> None:
    """Run the server over stdio until the client disconnects."""
    dispatcher = ToolDispatcher(facility if facility is not None else select_facility())
    server = build_server(dispatcher)
    logger.info("Starting %s %s", SERVER_DESCRIPTOR.name, SERVER_DESCRIPTOR.version)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, SERVER_DESCRIPTOR.to_initialization_options())
