"""
Base HTTP Gateway for remote service access.

Provides:
- A shared httpx.AsyncClient with bearer authentication
- Translation of transport and status failures into GatewayError types

Each call issues exactly one request. There is no retry or fallback
layer; timeouts are handled by httpx.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

import httpx

from evernote_mcp.core.enums import HTTPMethod
from evernote_mcp.utils.logging import get_logger

logger = get_logger(__name__)


class GatewayError(Exception):
    """Base exception for gateway errors."""

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.provider = provider
        self.original_error = original_error


class ProviderUnavailableError(GatewayError):
    """Raised when the provider cannot be reached."""

    pass


class ProviderHTTPError(GatewayError):
    """Raised when the provider answers with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        provider: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message, provider=provider, original_error=original_error)
        self.status_code = status_code


class ProviderResponseError(GatewayError):
    """Raised when a provider response body cannot be decoded."""

    pass


@dataclass
class GatewayConfig:
    """Configuration for a gateway instance."""

    base_url: str
    api_key: str = ""
    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)


class BaseHTTPGateway:
    """
    JSON-over-HTTP gateway with bearer authentication.

    Subclasses expose one method per remote endpoint and call ``_request``.
    """

    provider_name = "http"

    def __init__(
        self,
        config: GatewayConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._transport = transport
        self._http_client: Optional[httpx.AsyncClient] = None

    @property
    def has_credentials(self) -> bool:
        return bool(self.config.api_key)

    def _auth_headers(self, json_body: bool = False) -> dict[str, str]:
        headers = {
            **self.config.default_headers,
            "Authorization": f"Bearer {self.config.api_key}",
        }
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _get_client(self) -> httpx.AsyncClient:
        if self._http_client is None or self._http_client.is_closed:
            self._http_client = httpx.AsyncClient(
                base_url=self.config.base_url,
                timeout=self.config.timeout_seconds,
                transport=self._transport,
            )
        return self._http_client

    async def _request(
        self,
        method: HTTPMethod,
        path: str,
        params: Optional[dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> Any:
        """
        Send one request and return the decoded JSON body.

        Raises:
            ProviderUnavailableError: Connection, timeout or other transport failure
            ProviderHTTPError: Non-2xx status
            ProviderResponseError: Body is not valid JSON
        """
        client = self._get_client()
        has_body = method in (HTTPMethod.POST, HTTPMethod.PUT)

        logger.debug(f"{self.provider_name}: {method.value} {path}")

        try:
            response = await client.request(
                method.value,
                path,
                params=params,
                json=json if has_body else None,
                headers=self._auth_headers(json_body=has_body),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ProviderHTTPError(
                f"Request failed with status code {e.response.status_code}",
                status_code=e.response.status_code,
                provider=self.provider_name,
                original_error=e,
            ) from e
        except httpx.HTTPError as e:
            raise ProviderUnavailableError(
                f"{type(e).__name__}: {e}",
                provider=self.provider_name,
                original_error=e,
            ) from e

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ProviderResponseError(
                f"Invalid JSON in response: {e}",
                provider=self.provider_name,
                original_error=e,
            ) from e

    async def close(self) -> None:
        """Release the underlying HTTP client."""
        if self._http_client is not None and not self._http_client.is_closed:
            await self._http_client.aclose()
        self._http_client = None

    async def __aenter__(self) -> "BaseHTTPGateway":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
