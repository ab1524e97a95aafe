"""
Async Graph API client.

Executes calls against the versioned API root with pooled connections.
Every media component talks to the remote service through this class.
"""
import json
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Any, Union
import aiohttp

from .config import APIConfig
from .errors import error_from_response
from .multipart import MultipartForm
from ..exceptions import TransportError


@dataclass(frozen=True)
class RawResponse:
    """Status, headers and undecoded body of one HTTP exchange."""
    status: int
    body: bytes = b''
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class AsyncAPIClient:
    """
    Asynchronous Graph API client.

    Features:
    - Base URL and version prefixing
    - Bearer credential injection on every default call
    - Connection pooling (safe for concurrent coroutines)
    - Raw escape hatch for calls with their own headers and body

    No retries: failures surface as TransportError immediately.

    Example:
        >>> config = APIConfig.default("EAAG...")
        >>> async with AsyncAPIClient(config) as client:
        ...     body = await client.request("1234567890", "GET")
    """

    def __init__(self, config: Optional[APIConfig] = None):
        """
        Initialize async API client.

        Args:
            config: API configuration (uses defaults if not provided)
        """
        self._config = config or APIConfig.default()
        self._session: Optional[aiohttp.ClientSession] = None
        self._connector: Optional[aiohttp.TCPConnector] = None
        self._closed = False

        from ..logging import get_logger
        self._logger = get_logger('wapipy.api')
        root_logger = logging.getLogger()
        if not root_logger.handlers:
            self._logger.setLevel(self._config.log_level)

    @property
    def config(self) -> APIConfig:
        """Get current configuration."""
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    async def __aenter__(self) -> 'AsyncAPIClient':
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or self._session.closed:
            self._connector = aiohttp.TCPConnector(
                **self._config.get_connector_kwargs()
            )
            self._session = aiohttp.ClientSession(
                connector=self._connector,
                **self._config.get_session_kwargs()
            )
        return self._session

    async def close(self):
        """Close client and release resources."""
        self._closed = True

        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

        if self._connector and not self._connector.closed:
            await self._connector.close()
        self._connector = None

    def build_url(self, path: str) -> str:
        """Build absolute URL for a relative API path."""
        return self._config.build_url(path)

    async def send(
        self,
        method: str,
        url: str,
        data: Any = None,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, str]] = None,
        authenticate: bool = True
    ) -> RawResponse:
        """
        Send one HTTP request and return the raw response.

        Does not raise on non-2xx statuses; callers decide what a status means.
        With ``authenticate=False`` the default credential and extra headers
        are skipped, so the caller fully controls the request headers.

        Args:
            method: HTTP method
            url: Absolute URL
            data: Request body (bytes, str or aiohttp.FormData)
            headers: Header overrides
            params: Query string parameters
            authenticate: Apply default credential headers

        Returns:
            RawResponse

        Raises:
            TransportError: On network failure or timeout
        """
        if self._closed:
            raise TransportError("Client is closed")

        session = await self._ensure_session()

        request_headers: Dict[str, str] = {}
        if authenticate:
            request_headers.update(self._config.default_headers())
        if headers:
            request_headers.update(headers)

        self._logger.debug(f"{method} {url}")

        try:
            async with session.request(
                method,
                url,
                data=data,
                params=params,
                headers=request_headers,
                proxy=self._config.proxy.to_aiohttp_proxy() if self._config.proxy else None
            ) as response:
                body = await response.read()
                self._logger.debug(f"{method} {url} -> {response.status} ({len(body)} bytes)")
                return RawResponse(
                    status=response.status,
                    body=body,
                    headers=dict(response.headers)
                )
        except asyncio.TimeoutError as e:
            self._logger.error(f"Timeout: {method} {url}")
            raise TransportError(f"Request timed out: {method} {url}") from e
        except aiohttp.ClientError as e:
            self._logger.error(f"Network error: {method} {url}: {e}")
            raise TransportError(f"Network error: {e}") from e

    async def request(
        self,
        path: str,
        method: str = 'GET',
        body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, str]] = None
    ) -> bytes:
        """
        Execute a JSON API call.

        Args:
            path: API path relative to the versioned root (e.g. ``"123/uploads"``)
            method: HTTP method
            body: JSON-serializable request body
            params: Query string parameters

        Returns:
            Raw response body

        Raises:
            TransportError: On network failure or non-2xx status
                (GraphAPIError when the body is a Graph error envelope)
        """
        headers = None
        data = None
        if body is not None:
            data = json.dumps(body)
            headers = {'Content-Type': 'application/json'}

        response = await self.send(
            method, self.build_url(path), data=data, headers=headers, params=params
        )
        return self._check(response)

    async def request_multipart(
        self,
        method: str,
        path: str,
        form: Union[MultipartForm, aiohttp.FormData]
    ) -> bytes:
        """
        Execute a multipart/form-data API call.

        The boundary-bearing Content-Type is generated by aiohttp.

        Args:
            method: HTTP method
            path: API path relative to the versioned root
            form: Form to send

        Returns:
            Raw response body

        Raises:
            TransportError: On network failure or non-2xx status
        """
        if isinstance(form, MultipartForm):
            self._logger.debug(f"Multipart {method} {path}: {len(form.parts)} parts, {form.size} bytes")
            form = form.to_form_data()

        response = await self.send(method, self.build_url(path), data=form)
        return self._check(response)

    def _check(self, response: RawResponse) -> bytes:
        if not response.ok:
            raise error_from_response(response.status, response.body)
        return response.body
