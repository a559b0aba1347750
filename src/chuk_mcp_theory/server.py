#!/usr/bin/env python3
"""
Entry point for the CHUK Theory MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http).
"""

import argparse
import asyncio
import logging

from chuk_mcp_theory.constants import DEFAULT_HTTP_PORT, DEFAULT_TRANSPORT, THEORY_TOOLS

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def tools_epilog() -> str:
    """Help text listing the tools the server exposes."""
    width = max(len(name) for name in THEORY_TOOLS)
    lines = [f"  {name:<{width}}  {summary}" for name, summary in THEORY_TOOLS.items()]
    return "tools:\n" + "\n".join(lines)


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(
        description="CHUK Theory MCP Server - spelled notes, chords and scales",
        epilog=tools_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default=DEFAULT_TRANSPORT,
        help=f"Transport mode (default: {DEFAULT_TRANSPORT})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_HTTP_PORT,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Import after argument parsing so --debug applies to server setup
    from chuk_mcp_theory.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Theory MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Theory MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
