"""Media services module."""
from .file_service import FileValidator, AsyncFileReader
from .simple_upload import SimpleUploader
from .resumable_upload import ResumableUploader
from .asset_upload import AssetUploader
from .metadata_resolver import MediaMetadataResolver

__all__ = [
    'FileValidator',
    'AsyncFileReader',
    'SimpleUploader',
    'ResumableUploader',
    'AssetUploader',
    'MediaMetadataResolver',
]
