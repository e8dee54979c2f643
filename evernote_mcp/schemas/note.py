"""
Note Schemas
Pydantic models for note tool arguments and search results
Source: https://docs.pydantic.dev/latest/
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from evernote_mcp.utils.dates import epoch_millis_to_iso
from evernote_mcp.utils.enml import wrap_enml


class ToolArguments(BaseModel):
    """Base for tool argument bags; unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")


class CreateNoteArgs(ToolArguments):
    """Arguments for create_note"""

    title: str
    content: str
    notebook: str | None = None
    tags: list[str] | None = None


class SearchNotesArgs(ToolArguments):
    """Arguments for search_notes"""

    query: str
    notebook: str | None = None
    limit: int | float = 10

    def build_query(self) -> str:
        """Prefix the query with a notebook clause when a notebook is given."""
        if self.notebook:
            return f'notebook:"{self.notebook}" {self.query}'
        return self.query


class GetNoteArgs(ToolArguments):
    """Arguments for get_note"""

    noteId: str = Field(..., min_length=1)
    includeContent: bool = True


class UpdateNoteArgs(ToolArguments):
    """Arguments for update_note"""

    noteId: str = Field(..., min_length=1)
    title: str | None = None
    content: str | None = None
    tags: list[str] | None = None

    def to_changes(self) -> dict[str, Any]:
        """
        Build the partial update body.

        Only supplied fields appear in the result: empty title/content count
        as not supplied, while an empty tag list is sent to clear tags.
        """
        changes: dict[str, Any] = {}
        if self.title:
            changes["title"] = self.title
        if self.content:
            changes["content"] = wrap_enml(self.content)
        if self.tags is not None:
            changes["tagNames"] = self.tags
        return changes


class NoteSummary(BaseModel):
    """Normalized search result entry"""

    id: str | None
    title: str | None
    created: str
    updated: str
    notebook: str | None

    @classmethod
    def from_remote(cls, note: dict[str, Any]) -> "NoteSummary":
        return cls(
            id=note.get("guid"),
            title=note.get("title"),
            created=epoch_millis_to_iso(note.get("created")),
            updated=epoch_millis_to_iso(note.get("updated")),
            notebook=note.get("notebookGuid"),
        )
