"""
Notebook MCP Tools
list_notebooks, create_notebook
"""

import json
from typing import Any

from mcp.types import TextContent, Tool

from evernote_mcp.core.enums import ToolName
from evernote_mcp.gateways.evernote_gateway import EvernoteGateway
from evernote_mcp.schemas.notebook import CreateNotebookArgs, NotebookSummary
from evernote_mcp.utils.logging import get_logger

logger = get_logger(__name__)


LIST_NOTEBOOKS_TOOL = Tool(
    name=ToolName.LIST_NOTEBOOKS.value,
    description="List all notebooks",
    inputSchema={
        "type": "object",
        "properties": {},
    },
)

CREATE_NOTEBOOK_TOOL = Tool(
    name=ToolName.CREATE_NOTEBOOK.value,
    description="Create a new notebook",
    inputSchema={
        "type": "object",
        "properties": {
            "name": {
                "type": "string",
                "description": "Notebook name",
            },
        },
        "required": ["name"],
    },
)


async def list_notebooks(gateway: EvernoteGateway, arguments: dict[str, Any]) -> list[TextContent]:
    """List notebooks; ``arguments`` is accepted for a uniform signature and ignored."""
    notebooks = await gateway.list_notebooks()
    results = [NotebookSummary.from_remote(notebook).model_dump() for notebook in notebooks]
    return [TextContent(type="text", text=json.dumps(results, indent=2, ensure_ascii=False))]


async def create_notebook(gateway: EvernoteGateway, arguments: dict[str, Any]) -> list[TextContent]:
    args = CreateNotebookArgs.model_validate(arguments)
    data = await gateway.create_notebook(args.name)
    logger.info(f"Created notebook {data.get('guid')}")
    return [
        TextContent(
            type="text",
            text=f"Notebook created successfully with ID: {data.get('guid')}",
        )
    ]


TOOLS: list[Tool] = [LIST_NOTEBOOKS_TOOL, CREATE_NOTEBOOK_TOOL]

HANDLERS = {
    ToolName.LIST_NOTEBOOKS: list_notebooks,
    ToolName.CREATE_NOTEBOOK: create_notebook,
}


async def list_tools() -> list[Tool]:
    """Expose the notebook tools to the MCP server."""
    return list(TOOLS)
