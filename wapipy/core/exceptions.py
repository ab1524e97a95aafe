"""
Custom exceptions for media transfer operations.

Every error keeps the HTTP status and raw response body when they are
available, so callers can diagnose failures without re-issuing the call.
"""
from typing import Optional, Sequence, Any


class WapiException(Exception):
    """Base exception for all wapipy errors."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        body: Optional[bytes] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            status: HTTP status code (if available)
            body: Raw response body (if available)
        """
        self.status = status
        self.body = body
        super().__init__(message)

    @property
    def body_text(self) -> str:
        """Response body decoded for display."""
        if not self.body:
            return ''
        return self.body.decode('utf-8', errors='replace')


class TransportError(WapiException):
    """Network or HTTP-layer failure. Never retried by this library."""
    pass


class DecodeError(WapiException):
    """Response body could not be parsed into the expected shape."""
    pass


class ProtocolError(WapiException):
    """Well-formed response that lacks a required field."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        status: Optional[int] = None,
        body: Optional[bytes] = None
    ) -> None:
        self.field = field
        super().__init__(message, status, body)


class UploadFailed(ProtocolError):
    """The remote accepted an upload call but returned no usable identifier."""
    pass


class MediaNotFound(ProtocolError):
    """Media has no usable fetch URL, or no longer exists remotely."""

    def __init__(
        self,
        message: str,
        media_id: Optional[str] = None,
        field: Optional[str] = None,
        status: Optional[int] = None,
        body: Optional[bytes] = None
    ) -> None:
        self.media_id = media_id
        super().__init__(message, field, status, body)


class RejectedResult(WapiException):
    """Well-formed response that explicitly signals failure."""
    pass


class DeletionRejected(RejectedResult):
    """Delete call answered with ``success`` false."""

    def __init__(
        self,
        message: str,
        media_id: Optional[str] = None,
        status: Optional[int] = None,
        body: Optional[bytes] = None
    ) -> None:
        self.media_id = media_id
        super().__init__(message, status, body)


class AssetRejected(RejectedResult):
    """Asset upload answered with ``success`` false and validation errors."""

    def __init__(
        self,
        message: str,
        validation_errors: Sequence[Any] = (),
        status: Optional[int] = None,
        body: Optional[bytes] = None
    ) -> None:
        self.validation_errors = tuple(validation_errors)
        super().__init__(message, status, body)
