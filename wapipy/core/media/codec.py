"""
Response decoding shared by the media services.

Turns raw bodies into dicts and required fields into values, raising the
matching error class (DecodeError, ProtocolError subclass) with the raw body
attached.
"""
import json
from typing import Any, Dict, Optional, Type

from ..exceptions import DecodeError, ProtocolError


def decode_json(body: bytes, status: Optional[int] = None, what: str = 'response') -> Dict[str, Any]:
    """
    Decode a JSON object body.

    Args:
        body: Raw response body
        status: HTTP status, kept on the error
        what: Short description used in the error message

    Returns:
        Decoded object

    Raises:
        DecodeError: If the body is not a JSON object
    """
    try:
        payload = json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        raise DecodeError(f"Failed to parse {what}: {e}", status=status, body=body) from e

    if not isinstance(payload, dict):
        raise DecodeError(
            f"Failed to parse {what}: expected JSON object, got {type(payload).__name__}",
            status=status,
            body=body
        )
    return payload


def require_field(
    payload: Dict[str, Any],
    field: str,
    body: bytes,
    error_cls: Type[ProtocolError] = ProtocolError,
    what: str = 'response',
    status: Optional[int] = None,
    **error_kwargs
) -> str:
    """
    Return a non-empty string or integer field or raise ``error_cls``.

    Containers, booleans and floats are rejected rather than stringified.

    Args:
        payload: Decoded response
        field: Field name
        body: Raw body, kept on the error
        error_cls: ProtocolError subclass to raise
        what: Short description used in the error message
        status: HTTP status, kept on the error
        **error_kwargs: Extra keyword arguments for ``error_cls``

    Returns:
        Field value as a string
    """
    value = payload.get(field)
    valid = (
        (isinstance(value, str) and value != '')
        or (isinstance(value, int) and not isinstance(value, bool))
    )
    if not valid:
        text = body.decode('utf-8', errors='replace')
        raise error_cls(
            f"No usable {field!r} in {what}: {text[:500]}",
            field=field,
            status=status,
            body=body,
            **error_kwargs
        )
    return str(value)
