"""Cross-platform display/monitor information MCP server."""

__version__ = "0.1.0"
