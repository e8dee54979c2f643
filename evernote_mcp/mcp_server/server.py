"""
MCP Server
Model Context Protocol server exposing Evernote note and notebook tools
Source: https://github.com/modelcontextprotocol/python-sdk
"""

import asyncio
from typing import Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolRequest, CallToolResult, ServerResult, Tool

from evernote_mcp.core.config import EvernoteSettings, get_evernote_settings
from evernote_mcp.gateways.evernote_gateway import EvernoteGateway
from evernote_mcp.mcp_server.tools import ToolDispatcher, list_tools
from evernote_mcp.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_server(
    dispatcher: ToolDispatcher,
    settings: Optional[EvernoteSettings] = None,
) -> Server:
    """
    Build the MCP server and register the tool handlers.

    tools/call is registered as a raw request handler: an McpError raised by
    the dispatcher reaches the client as a JSON-RPC error carrying its code,
    and the dispatcher's credential and routing checks run before any
    argument validation.
    """
    settings = settings or get_evernote_settings()
    app = Server(settings.MCP_SERVER_NAME, version=settings.MCP_SERVER_VERSION)

    @app.list_tools()
    async def handle_list_tools() -> list[Tool]:
        return await list_tools()

    async def handle_call_tool(request: CallToolRequest) -> ServerResult:
        content = await dispatcher.call_tool(request.params.name, request.params.arguments)
        return ServerResult(CallToolResult(content=content))

    app.request_handlers[CallToolRequest] = handle_call_tool

    return app


def create_dispatcher(settings: Optional[EvernoteSettings] = None) -> ToolDispatcher:
    """Build a dispatcher whose gateway carries the configured credential."""
    settings = settings or get_evernote_settings()
    return ToolDispatcher(EvernoteGateway(settings=settings))


async def main() -> None:
    """Run the MCP server over stdio."""
    settings = get_evernote_settings()
    setup_logging(
        level=settings.LOG_LEVEL,
        log_file=settings.LOG_FILE,
        json_logs=settings.JSON_LOGS,
    )

    if not settings.has_api_key:
        logger.warning("EVERNOTE_API_KEY is not set; tool calls will be rejected")

    dispatcher = create_dispatcher(settings)
    app = create_server(dispatcher, settings)

    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Evernote MCP server running on stdio")
            await app.run(
                read_stream,
                write_stream,
                app.create_initialization_options(),
            )
    finally:
        await dispatcher.close()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
