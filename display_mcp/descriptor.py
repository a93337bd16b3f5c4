"""Static server metadata handed to the transport during initialization."""

from __future__ import annotations

from mcp import types
from mcp.server.models import InitializationOptions
from pydantic import BaseModel, ConfigDict

from display_mcp import __version__, config

PROTOCOL_VERSION = "2024-11-05"
INSTRUCTIONS = "Cross-platform display/monitor information server"


class ServerDescriptor(BaseModel):
    """Identity, protocol version and capabilities of the server."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    protocol_version: str
    capabilities: types.ServerCapabilities
    instructions: str

    def to_initialization_options(self) -> InitializationOptions:
        return InitializationOptions(
            server_name=self.name,
            server_version=self.version,
            capabilities=self.capabilities,
            instructions=self.instructions,
        )


SERVER_DESCRIPTOR = ServerDescriptor(
    name=config.SERVER_NAME,
    version=__version__,
    protocol_version=PROTOCOL_VERSION,
    capabilities=types.ServerCapabilities(tools=types.ToolsCapability(listChanged=False)),
    instructions=INSTRUCTIONS,
)
