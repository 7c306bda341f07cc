"""Async HTTP client for the Hot Aisle API."""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import cache
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from hotaisle.api.exceptions import (
    APIError,
    DecodingError,
    SerializationError,
    TransportError,
)
from hotaisle.log import get_logger

if TYPE_CHECKING:
    from hotaisle.api.endpoints.bare_metal import BareMetalAPI
    from hotaisle.api.endpoints.teams import TeamsAPI
    from hotaisle.api.endpoints.user import UserAPI
    from hotaisle.api.endpoints.virtual_machines import VirtualMachinesAPI

DEFAULT_HOST = "admin.hotaisle.app"
BASE_URL = f"https://{DEFAULT_HOST}/api"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "hotaisle/1.0"

logger = get_logger(__name__)


@dataclass
class ClientConfig:
    """Connection settings applied once when a client is built.

    ``http_transport`` replaces httpx's network transport, which is how tests
    plug in ``httpx.MockTransport``.
    """

    base_url: str = BASE_URL
    token: str = ""
    user_agent: str = DEFAULT_USER_AGENT
    http_transport: httpx.AsyncBaseTransport | None = None
    timeout: float = DEFAULT_TIMEOUT


def normalize_base_url(base_url: str) -> str:
    return base_url.rstrip("/") or BASE_URL


@cache
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


class HotAisleClient:
    """Async API client for Hot Aisle.

    Uses a single long-lived httpx.AsyncClient to reuse TCP/TLS connections.
    The client is lazily initialized on first request. Headers are computed
    per request, so changing the token never affects a request already sent.
    """

    def __init__(self, config: ClientConfig | None = None, **overrides: Any) -> None:
        config = replace(config or ClientConfig(), **overrides)
        self._base_url = normalize_base_url(config.base_url)
        self._token = config.token or ""
        self._user_agent = config.user_agent or ""
        self._transport = config.http_transport
        self._timeout = config.timeout if config.timeout and config.timeout > 0 else DEFAULT_TIMEOUT
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def token(self) -> str:
        return self._token

    @property
    def user_agent(self) -> str:
        return self._user_agent

    @property
    def timeout(self) -> float:
        return self._timeout

    def set_token(self, token: str) -> None:
        """Use *token* for every request issued from now on."""
        self._token = token or ""

    def set_base_url(self, base_url: str) -> None:
        self._base_url = normalize_base_url(base_url)

    # -- resources --

    @property
    def user(self) -> UserAPI:
        from hotaisle.api.endpoints.user import UserAPI

        return UserAPI(self)

    @property
    def teams(self) -> TeamsAPI:
        from hotaisle.api.endpoints.teams import TeamsAPI

        return TeamsAPI(self)

    @property
    def bare_metal(self) -> BareMetalAPI:
        from hotaisle.api.endpoints.bare_metal import BareMetalAPI

        return BareMetalAPI(self)

    @property
    def virtual_machines(self) -> VirtualMachinesAPI:
        from hotaisle.api.endpoints.virtual_machines import VirtualMachinesAPI

        return VirtualMachinesAPI(self)

    # -- transport --

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                transport=self._transport,
            )
        return self._client

    def _build_url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def _build_headers(self, has_body: bool) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = self._token
        if has_body:
            headers["Content-Type"] = "application/json"
        if self._user_agent:
            headers["User-Agent"] = self._user_agent
        return headers

    @staticmethod
    def _encode_body(body: Any) -> bytes:
        try:
            return to_json(body, by_alias=True)
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise SerializationError(e) from e

    async def execute(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        result_type: Any = None,
        timeout: float | None = None,
    ) -> Any:
        """Send one request and decode the response.

        Args:
            method: HTTP verb.
            path: API path with parameters already substituted.
            body: Optional request payload (pydantic model, dict or list).
            result_type: Type to validate the JSON response into.
            timeout: Deadline for this call, overriding the client timeout.

        Returns:
            The decoded response, or None when the server sent no content or
            no result type was requested.

        Raises:
            SerializationError: The body could not be encoded.
            TransportError: No response was received.
            APIError: The server answered with status >= 400.
            DecodingError: A successful body did not fit ``result_type``.
        """
        content = self._encode_body(body) if body is not None else None
        url = self._build_url(path)
        headers = self._build_headers(content is not None)
        request_timeout = httpx.Timeout(timeout) if timeout is not None else httpx.USE_CLIENT_DEFAULT

        client = self._get_client()
        logger.debug(f"{method} {url}")
        try:
            response = await client.request(
                method, url, content=content, headers=headers, timeout=request_timeout
            )
        except httpx.TransportError as e:
            raise TransportError(f"request failed: {e}", e) from e

        raw = response.content
        logger.debug(f"{method} {url} -> {response.status_code} ({len(raw)} bytes)")

        if response.status_code >= 400:
            raise APIError(response.status_code, response.text)
        if response.status_code == 204 or not raw:
            return None
        if result_type is None:
            return None
        try:
            return _adapter(result_type).validate_json(raw)
        except ValidationError as e:
            raise DecodingError(raw, e) from e

    async def get(self, path: str, **kwargs: Any) -> Any:
        return await self.execute("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> Any:
        return await self.execute("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> Any:
        return await self.execute("PUT", path, **kwargs)

    async def patch(self, path: str, **kwargs: Any) -> Any:
        return await self.execute("PATCH", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> Any:
        return await self.execute("DELETE", path, **kwargs)

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> HotAisleClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()
