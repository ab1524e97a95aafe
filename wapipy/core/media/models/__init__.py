"""Media models."""
from .media_models import (
    MediaMetadata,
    UploadSession,
    UploadState,
    SourceSpan,
    AssetValidationError,
    AssetUploadResult
)

__all__ = [
    'MediaMetadata',
    'UploadSession',
    'UploadState',
    'SourceSpan',
    'AssetValidationError',
    'AssetUploadResult'
]
