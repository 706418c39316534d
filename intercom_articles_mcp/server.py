#!/usr/bin/env python3
"""
Intercom Articles MCP Server
Exposes Intercom Help Center articles and collections as MCP tools over stdio.

Setup:
  1. pip install intercom-articles-mcp
  2. Create an access token in the Intercom Developer Hub
  3. Set INTERCOM_ACCESS_TOKEN env var or pass it in the MCP client config
  4. Run `intercom-articles-mcp` (or `python -m intercom_articles_mcp`)
"""

import asyncio
import logging
import sys
from typing import Any, Dict, List

from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool, ToolAnnotations

from . import __version__, client
from .dispatcher import ToolResult, invoke
from .tools import ToolSpec, list_tools

SERVER_NAME = "intercom-articles-mcp"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)

server = Server(SERVER_NAME, version=__version__)


def _to_mcp_tool(spec: ToolSpec) -> Tool:
    return Tool(
        name=spec.name,
        description=spec.description,
        inputSchema=spec.input_schema,
        annotations=ToolAnnotations(
            title=spec.title,
            readOnlyHint=spec.read_only,
            destructiveHint=spec.destructive,
            idempotentHint=spec.idempotent,
            openWorldHint=True,
        ),
    )


def render_result(result: ToolResult) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=result.text)],
        isError=result.is_error,
    )


@server.list_tools()
async def handle_list_tools() -> List[Tool]:
    return [_to_mcp_tool(spec) for spec in list_tools()]


# Arguments are validated by the dispatcher, which reports failures in-band.
@server.call_tool(validate_input=False)
async def handle_call_tool(name: str, arguments: Dict[str, Any]) -> CallToolResult:
    return render_result(await invoke(name, arguments))


# ─── Entry Point ─────────────────────────────────────────────────────────────


async def serve() -> None:
    """Run the MCP server over stdio until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main() -> None:
    # stdout carries the protocol, so logs go to stderr.
    logging.basicConfig(level=logging.INFO, stream=sys.stderr, format=LOG_FORMAT)

    if not client.ACCESS_TOKEN:
        logger.error("INTERCOM_ACCESS_TOKEN environment variable is required")
        logger.error("Please set it in your MCP configuration or environment")
        sys.exit(1)

    logger.info("Intercom Articles MCP Server v%s", __version__)
    logger.info("Running on stdio transport")
    logger.info("Tools available: %s", ", ".join(spec.name for spec in list_tools()))

    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
