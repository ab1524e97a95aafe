"""
Protocol definitions for the media module.

The uploaders depend on these interfaces, not on AsyncAPIClient,
so any transport with the same call contract can be injected.
"""
from typing import Protocol, Dict, Any, Optional

from ..api.multipart import MultipartForm


class RawResponseProtocol(Protocol):
    """Undecoded HTTP response."""

    status: int
    body: bytes

    @property
    def ok(self) -> bool: ...


class RequestExecutorProtocol(Protocol):
    """
    Executes calls against the remote API.

    Owns base URL/version prefixing, default headers and credential
    injection for ``request`` and ``request_multipart``. ``send`` is the
    escape hatch for calls that need their own headers and a raw body.
    """

    async def request(
        self,
        path: str,
        method: str = 'GET',
        body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, str]] = None
    ) -> bytes:
        """
        Execute a JSON call.

        Returns:
            Raw response body

        Raises:
            TransportError: On network failure or non-2xx status
        """
        ...

    async def request_multipart(
        self,
        method: str,
        path: str,
        form: MultipartForm
    ) -> bytes:
        """
        Execute a multipart/form-data call.

        Returns:
            Raw response body

        Raises:
            TransportError: On network failure or non-2xx status
        """
        ...

    async def send(
        self,
        method: str,
        url: str,
        data: Any = None,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, str]] = None,
        authenticate: bool = True
    ) -> RawResponseProtocol:
        """
        Send a request to an absolute URL without status checking.

        Raises:
            TransportError: On network failure
        """
        ...
