"""Evernote MCP server: note and notebook tools over the Model Context Protocol."""

__version__ = "0.1.0"
