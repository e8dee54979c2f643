"""
Core Enumerations for the Evernote MCP server.
"""

from enum import Enum


class ToolName(str, Enum):
    """Tools exposed by the server, in registry order."""

    CREATE_NOTE = "create_note"
    SEARCH_NOTES = "search_notes"
    GET_NOTE = "get_note"
    UPDATE_NOTE = "update_note"
    LIST_NOTEBOOKS = "list_notebooks"
    CREATE_NOTEBOOK = "create_notebook"

    @classmethod
    def lookup(cls, name: str) -> "ToolName | None":
        """Exact-match lookup; returns None for unknown names."""
        try:
            return cls(name)
        except ValueError:
            return None


class HTTPMethod(str, Enum):
    """HTTP methods used against the Evernote API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
