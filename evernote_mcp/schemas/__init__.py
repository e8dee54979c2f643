"""
Pydantic schemas for tool arguments and normalized results.
"""

from evernote_mcp.schemas.note import (
    CreateNoteArgs,
    GetNoteArgs,
    NoteSummary,
    SearchNotesArgs,
    UpdateNoteArgs,
)
from evernote_mcp.schemas.notebook import CreateNotebookArgs, NotebookSummary

__all__ = [
    "CreateNoteArgs",
    "CreateNotebookArgs",
    "GetNoteArgs",
    "NoteSummary",
    "NotebookSummary",
    "SearchNotesArgs",
    "UpdateNoteArgs",
]
