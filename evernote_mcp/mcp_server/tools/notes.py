"""
Note MCP Tools
create_note, search_notes, get_note, update_note
Source: https://modelcontextprotocol.io/docs/concepts/tools
"""

import json
from typing import Any

from mcp.types import TextContent, Tool

from evernote_mcp.core.enums import ToolName
from evernote_mcp.gateways.evernote_gateway import EvernoteGateway
from evernote_mcp.schemas.note import (
    CreateNoteArgs,
    GetNoteArgs,
    NoteSummary,
    SearchNotesArgs,
    UpdateNoteArgs,
)
from evernote_mcp.utils.enml import wrap_enml
from evernote_mcp.utils.logging import get_logger

logger = get_logger(__name__)


CREATE_NOTE_TOOL = Tool(
    name=ToolName.CREATE_NOTE.value,
    description="Create a new note in Evernote",
    inputSchema={
        "type": "object",
        "properties": {
            "title": {
                "type": "string",
                "description": "Note title",
            },
            "content": {
                "type": "string",
                "description": "Note content (can include HTML)",
            },
            "notebook": {
                "type": "string",
                "description": "Notebook name (optional)",
            },
            "tags": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Tags for the note",
            },
        },
        "required": ["title", "content"],
    },
)

SEARCH_NOTES_TOOL = Tool(
    name=ToolName.SEARCH_NOTES.value,
    description="Search for notes in Evernote",
    inputSchema={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "Search query",
            },
            "notebook": {
                "type": "string",
                "description": "Limit search to specific notebook",
            },
            "limit": {
                "type": "number",
                "description": "Maximum number of results",
                "default": 10,
            },
        },
        "required": ["query"],
    },
)

GET_NOTE_TOOL = Tool(
    name=ToolName.GET_NOTE.value,
    description="Get a specific note by ID",
    inputSchema={
        "type": "object",
        "properties": {
            "noteId": {
                "type": "string",
                "description": "Note ID",
            },
            "includeContent": {
                "type": "boolean",
                "description": "Include note content",
                "default": True,
            },
        },
        "required": ["noteId"],
    },
)

UPDATE_NOTE_TOOL = Tool(
    name=ToolName.UPDATE_NOTE.value,
    description="Update an existing note",
    inputSchema={
        "type": "object",
        "properties": {
            "noteId": {
                "type": "string",
                "description": "Note ID",
            },
            "title": {
                "type": "string",
                "description": "New title",
            },
            "content": {
                "type": "string",
                "description": "New content",
            },
            "tags": {
                "type": "array",
                "items": {"type": "string"},
                "description": "New tags",
            },
        },
        "required": ["noteId"],
    },
)


def _text(text: str) -> list[TextContent]:
    return [TextContent(type="text", text=text)]


def _pretty_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


async def create_note(gateway: EvernoteGateway, arguments: dict[str, Any]) -> list[TextContent]:
    args = CreateNoteArgs.model_validate(arguments)
    data = await gateway.create_note(
        title=args.title,
        content=wrap_enml(args.content),
        notebook_guid=args.notebook,
        tag_names=args.tags,
    )
    logger.info(f"Created note {data.get('guid')}")
    return _text(f"Note created successfully with ID: {data.get('guid')}")


async def search_notes(gateway: EvernoteGateway, arguments: dict[str, Any]) -> list[TextContent]:
    args = SearchNotesArgs.model_validate(arguments)
    data = await gateway.search_notes(query=args.build_query(), max_notes=args.limit)

    notes = data.get("notes")
    if not isinstance(notes, list):
        raise ValueError("Search response is missing the notes list")

    results = [NoteSummary.from_remote(note).model_dump() for note in notes]
    logger.info(f"Search returned {len(results)} notes")
    return _text(_pretty_json(results))


async def get_note(gateway: EvernoteGateway, arguments: dict[str, Any]) -> list[TextContent]:
    args = GetNoteArgs.model_validate(arguments)
    data = await gateway.get_note(args.noteId, include_content=args.includeContent)
    return _text(_pretty_json(data))


async def update_note(gateway: EvernoteGateway, arguments: dict[str, Any]) -> list[TextContent]:
    args = UpdateNoteArgs.model_validate(arguments)
    changes = args.to_changes()
    await gateway.update_note(args.noteId, changes)
    logger.info(f"Updated note {args.noteId} fields={sorted(changes)}")
    return _text("Note updated successfully")


TOOLS: list[Tool] = [CREATE_NOTE_TOOL, SEARCH_NOTES_TOOL, GET_NOTE_TOOL, UPDATE_NOTE_TOOL]

HANDLERS = {
    ToolName.CREATE_NOTE: create_note,
    ToolName.SEARCH_NOTES: search_notes,
    ToolName.GET_NOTE: get_note,
    ToolName.UPDATE_NOTE: update_note,
}


async def list_tools() -> list[Tool]:
    """Expose the note tools to the MCP server."""
    return list(TOOLS)
