"""Graph API errors and exceptions."""
from .api_errors import GraphAPIError, APIErrorCodes, error_from_response

__all__ = [
    'GraphAPIError',
    'APIErrorCodes',
    'error_from_response',
]
