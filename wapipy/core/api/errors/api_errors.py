"""Graph API error envelope decoding."""
import json
from typing import Dict, Optional, Any

from ...exceptions import TransportError


class APIErrorCodes:
    """Graph API error codes the media endpoints are known to return."""

    ERROR_CODES: Dict[int, str] = {
        1: 'API Unknown: possibly a temporary issue due to downtime. Wait and retry.',
        2: 'API Service: temporary issue due to downtime. Wait and retry.',
        4: 'API Too Many Calls: the app has reached its API call rate limit.',
        10: 'Permission Denied: permission is either not granted or has been removed.',
        100: 'Invalid parameter: the request included invalid or unsupported parameters.',
        131009: 'Parameter value is not valid.',
        131052: 'Media download error: unable to download the media sent by the user.',
        131053: 'Media upload error: unable to upload the media used in the message.',
        190: 'Access token has expired or is invalid.',
        200: 'API Permission: permission is either not granted or has been removed.',
        368: 'Temporarily blocked for policies violations.',
    }

    # (code, subcode) pair the platform returns for objects that do not exist
    OBJECT_NOT_FOUND = (100, 33)

    @classmethod
    def get_message(cls, code: int) -> str:
        """Gets error message for error code."""
        return cls.ERROR_CODES.get(code, f"Unknown error: {code}")


class GraphAPIError(TransportError):
    """Non-2xx response carrying a Graph API error envelope."""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        error_type: Optional[str] = None,
        error_subcode: Optional[int] = None,
        fbtrace_id: Optional[str] = None,
        status: Optional[int] = None,
        body: Optional[bytes] = None
    ):
        self.code = code
        self.error_type = error_type
        self.error_subcode = error_subcode
        self.fbtrace_id = fbtrace_id
        super().__init__(message, status, body)

    @property
    def is_not_found(self) -> bool:
        """True when the remote reports the object as missing."""
        if self.status == 404:
            return True
        return (self.code, self.error_subcode) == APIErrorCodes.OBJECT_NOT_FOUND

    @classmethod
    def from_envelope(cls, envelope: Dict[str, Any], status: int, body: bytes) -> 'GraphAPIError':
        """Build from the ``error`` object of a Graph response."""
        code = envelope.get('code')
        message = envelope.get('message') or APIErrorCodes.get_message(code)
        return cls(
            f"HTTP {status}: {message}",
            code=code,
            error_type=envelope.get('type'),
            error_subcode=envelope.get('error_subcode'),
            fbtrace_id=envelope.get('fbtrace_id'),
            status=status,
            body=body
        )


def error_from_response(status: int, body: bytes) -> TransportError:
    """
    Map a non-2xx response to the most specific transport error.

    Args:
        status: HTTP status code
        body: Raw response body

    Returns:
        GraphAPIError when the body is a Graph error envelope,
        plain TransportError otherwise
    """
    try:
        payload = json.loads(body)
    except (ValueError, UnicodeDecodeError):
        payload = None

    if isinstance(payload, dict) and isinstance(payload.get('error'), dict):
        return GraphAPIError.from_envelope(payload['error'], status, body)

    text = body.decode('utf-8', errors='replace') if body else ''
    return TransportError(f"HTTP {status}: {text[:500]}", status=status, body=body)
