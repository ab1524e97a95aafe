"""Graph API transport module."""
from .config import APIConfig, ProxyConfig, SSLConfig, TimeoutConfig
from .async_client import AsyncAPIClient, RawResponse
from .multipart import MultipartForm, FormPart
from .errors import GraphAPIError, APIErrorCodes

__all__ = [
    # Client
    'AsyncAPIClient',
    'RawResponse',

    # Configuration
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',

    # Wire encoding
    'MultipartForm',
    'FormPart',

    # Errors
    'GraphAPIError',
    'APIErrorCodes',
]
