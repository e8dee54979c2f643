"""Tool registry and dispatcher for the Evernote MCP server."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Protocol

from mcp.shared.exceptions import McpError
from mcp.types import TextContent, Tool

from evernote_mcp.core.enums import ToolName
from evernote_mcp.gateways.evernote_gateway import EvernoteGateway
from evernote_mcp.utils.errors import internal_error, invalid_request_error, method_not_found_error
from evernote_mcp.utils.logging import get_logger

from . import notebooks, notes

logger = get_logger(__name__)

ToolHandler = Callable[[EvernoteGateway, dict[str, Any]], Awaitable[list[TextContent]]]


class ToolProvider(Protocol):
    HANDLERS: dict[ToolName, ToolHandler]

    async def list_tools(self) -> list[Tool]:  # pragma: no cover - Protocol definition
        ...


_TOOL_MODULES: list[ToolProvider] = [notes, notebooks]

_HANDLERS: dict[ToolName, ToolHandler] = {
    tool_name: handler
    for module in _TOOL_MODULES
    for tool_name, handler in module.HANDLERS.items()
}


async def list_tools() -> list[Tool]:
    """Aggregate tool metadata from all registered modules, in registry order."""
    tools: list[Tool] = []
    for module in _TOOL_MODULES:
        tools.extend(await module.list_tools())
    return tools


class ToolDispatcher:
    """
    Routes tool calls to their handlers.

    The gateway carries the API credential; a dispatcher built with an empty
    credential rejects every call before routing.
    """

    def __init__(self, gateway: EvernoteGateway):
        self.gateway = gateway

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        """
        Execute one tool call.

        Raises:
            McpError: INVALID_REQUEST when no API key is configured,
                METHOD_NOT_FOUND for unknown tool names, INTERNAL_ERROR for
                any other failure
        """
        if not self.gateway.has_credentials:
            logger.warning(f"Rejected call to {name}: API key not configured")
            raise invalid_request_error()

        try:
            tool_name = ToolName.lookup(name)
            if tool_name is None:
                raise method_not_found_error(name)

            logger.info(f"Calling tool {tool_name.value}")
            return await _HANDLERS[tool_name](self.gateway, arguments or {})
        except McpError as e:
            logger.warning(f"Tool {name} failed: {e}")
            raise
        except Exception as e:
            logger.error(f"Tool {name} failed: {e}")
            raise internal_error(e) from e

    async def close(self) -> None:
        await self.gateway.close()


__all__ = ["ToolDispatcher", "list_tools"]
