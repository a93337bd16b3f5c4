"""Entry point for the display information MCP server.

Run with: python -m display_mcp
"""

from __future__ import annotations

import asyncio
import logging
import sys

from display_mcp import config
from display_mcp.server import serve


def main() -> None:
    # stdout carries the protocol, log to stderr
    logging.basicConfig(
        level=config.LOG_LEVEL,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if sys.platform == "win32" and config.DPI_AWARE:
        from display_mcp.facility.win32 import enable_dpi_awareness

        # Must happen before any Win32 API calls
        enable_dpi_awareness()

    asyncio.run(serve())


if __name__ == "__main__":
    main()
