"""
Evernote API Gateway.

One method per remote endpoint:
- POST /notes
- GET  /notes/search
- GET  /notes/{id}
- PUT  /notes/{id}
- GET  /notebooks
- POST /notebooks
"""

from typing import Any, Optional
from urllib.parse import quote

import httpx

from evernote_mcp.core.config import EvernoteSettings, get_evernote_settings
from evernote_mcp.core.enums import HTTPMethod
from evernote_mcp.gateways.base import BaseHTTPGateway, GatewayConfig, ProviderResponseError


class EvernoteGateway(BaseHTTPGateway):
    """HTTP client for the Evernote REST API."""

    provider_name = "evernote"

    def __init__(
        self,
        config: Optional[GatewayConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        settings: Optional[EvernoteSettings] = None,
    ):
        if config is None:
            settings = settings or get_evernote_settings()
            config = GatewayConfig(
                base_url=settings.EVERNOTE_API_URL,
                api_key=settings.EVERNOTE_API_KEY,
                timeout_seconds=settings.EVERNOTE_TIMEOUT_SECONDS,
            )
        super().__init__(config, transport=transport)

    # ---------- Notes ----------

    async def create_note(
        self,
        title: str,
        content: str,
        notebook_guid: Optional[str] = None,
        tag_names: Optional[list[str]] = None,
    ) -> dict[str, Any]:
        """Create a note. ``content`` must already be ENML."""
        body: dict[str, Any] = {"title": title, "content": content}
        if notebook_guid is not None:
            body["notebookGuid"] = notebook_guid
        if tag_names is not None:
            body["tagNames"] = tag_names
        return self._expect_object(await self._request(HTTPMethod.POST, "/notes", json=body))

    async def search_notes(self, query: str, max_notes: int | float) -> dict[str, Any]:
        params = {"query": query, "maxNotes": max_notes}
        return self._expect_object(
            await self._request(HTTPMethod.GET, "/notes/search", params=params)
        )

    async def get_note(self, note_id: str, include_content: bool = True) -> Any:
        """Fetch a note; the remote object is returned as-is."""
        params = {"includeContent": "true" if include_content else "false"}
        return await self._request(HTTPMethod.GET, self._note_path(note_id), params=params)

    async def update_note(self, note_id: str, changes: dict[str, Any]) -> Any:
        """
        Apply a partial update.

        Args:
            note_id: Note GUID
            changes: Only the fields to change; keys absent here are not sent
        """
        return await self._request(HTTPMethod.PUT, self._note_path(note_id), json=changes)

    # ---------- Notebooks ----------

    async def list_notebooks(self) -> list[dict[str, Any]]:
        data = await self._request(HTTPMethod.GET, "/notebooks")
        if not isinstance(data, list):
            raise ProviderResponseError(
                "Expected a list of notebooks", provider=self.provider_name
            )
        return data

    async def create_notebook(self, name: str) -> dict[str, Any]:
        return self._expect_object(
            await self._request(HTTPMethod.POST, "/notebooks", json={"name": name})
        )

    # ---------- Helpers ----------

    @staticmethod
    def _note_path(note_id: str) -> str:
        return f"/notes/{quote(note_id, safe='')}"

    def _expect_object(self, data: Any) -> dict[str, Any]:
        if not isinstance(data, dict):
            raise ProviderResponseError(
                f"Expected a JSON object, got {type(data).__name__}",
                provider=self.provider_name,
            )
        return data
