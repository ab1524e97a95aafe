"""
wapipy - Async Python client for the WhatsApp Cloud API media endpoints.

Usage:
    >>> from wapipy import WapiClient
    >>>
    >>> async with WapiClient("EAAG...") as wapi:
    ...     media_id = await wapi.upload_media_file("1234567890", "photo.png")
"""
import logging
from .client import WapiClient

# Configuration
from .core.api import (
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    AsyncAPIClient,
    GraphAPIError
)

# Media
from .core.media import (
    MediaManager,
    MediaMetadata,
    UploadSession,
    AssetUploadResult,
    AssetValidationError
)

# Errors
from .core.exceptions import (
    WapiException,
    TransportError,
    DecodeError,
    ProtocolError,
    UploadFailed,
    MediaNotFound,
    RejectedResult,
    DeletionRejected,
    AssetRejected
)

__version__ = '0.1.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for wapipy modules.

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'wapipy',
        'wapipy.api',
        'wapipy.client',
        'wapipy.media',
        'wapipy.media.simple',
        'wapipy.media.resumable',
        'wapipy.media.asset',
        'wapipy.media.metadata',
        'wapipy.media.file',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'WapiClient',
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'AsyncAPIClient',
    'MediaManager',
    'MediaMetadata',
    'UploadSession',
    'AssetUploadResult',
    'AssetValidationError',
    'WapiException',
    'TransportError',
    'GraphAPIError',
    'DecodeError',
    'ProtocolError',
    'UploadFailed',
    'MediaNotFound',
    'RejectedResult',
    'DeletionRejected',
    'AssetRejected',
    'setup_logging',
    '__version__',
]
