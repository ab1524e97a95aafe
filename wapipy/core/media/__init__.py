"""
Media transfer module.

Three upload protocols (single request, resumable session, asset form)
plus metadata resolution, each usable on its own or through MediaManager.
"""
from .facade import MediaManager
from .models import (
    MediaMetadata,
    UploadSession,
    UploadState,
    SourceSpan,
    AssetValidationError,
    AssetUploadResult
)
from .protocols import RequestExecutorProtocol
from .services import (
    SimpleUploader,
    ResumableUploader,
    AssetUploader,
    MediaMetadataResolver
)

__all__ = [
    # Main classes
    'MediaManager',
    'SimpleUploader',
    'ResumableUploader',
    'AssetUploader',
    'MediaMetadataResolver',

    # Models
    'MediaMetadata',
    'UploadSession',
    'UploadState',
    'SourceSpan',
    'AssetValidationError',
    'AssetUploadResult',

    # Protocols
    'RequestExecutorProtocol',
]
