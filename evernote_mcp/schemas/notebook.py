"""
Notebook Schemas
"""

from typing import Any

from pydantic import BaseModel

from evernote_mcp.schemas.note import ToolArguments
from evernote_mcp.utils.dates import epoch_millis_to_iso


class CreateNotebookArgs(ToolArguments):
    """Arguments for create_notebook"""

    name: str


class NotebookSummary(BaseModel):
    """Normalized notebook listing entry"""

    id: str | None
    name: str | None
    created: str

    @classmethod
    def from_remote(cls, notebook: dict[str, Any]) -> "NotebookSummary":
        return cls(
            id=notebook.get("guid"),
            name=notebook.get("name"),
            created=epoch_millis_to_iso(notebook.get("serviceCreated")),
        )
