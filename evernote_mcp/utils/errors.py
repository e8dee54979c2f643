"""
Custom Exceptions
Classified MCP errors returned to tool callers
Source: https://modelcontextprotocol.io/specification/2025-06-18/basic#responses
"""

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_REQUEST, METHOD_NOT_FOUND, ErrorData

API_KEY_NOT_CONFIGURED = "Evernote API key not configured"
API_ERROR_PREFIX = "Evernote API error: "


def invalid_request_error(message: str = API_KEY_NOT_CONFIGURED) -> McpError:
    """Raised when the request cannot be served (missing credential)."""
    return McpError(ErrorData(code=INVALID_REQUEST, message=message))


def method_not_found_error(name: str) -> McpError:
    """Raised when the tool name matches no registered tool."""
    return McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))


def internal_error(error: BaseException | str) -> McpError:
    """Wrap any unclassified failure from a tool handler."""
    return McpError(ErrorData(code=INTERNAL_ERROR, message=f"{API_ERROR_PREFIX}{error}"))