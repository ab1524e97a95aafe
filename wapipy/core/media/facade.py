"""
Media facade.

Provides a simplified interface over the four media components.
Follows Facade Pattern - hides which transfer protocol backs each call.
"""
from pathlib import Path
from typing import Any, BinaryIO, Dict, List, Optional, Union
import logging

from .models import AssetUploadResult, MediaMetadata, UploadSession
from .protocols import RequestExecutorProtocol
from .services import (
    SimpleUploader,
    ResumableUploader,
    AssetUploader,
    MediaMetadataResolver
)
from ..api.config import APIConfig


class MediaManager:
    """
    Entry point for media transfer.

    Components are independent; each can also be injected for testing.

    Example:
        >>> media = MediaManager(api_client, api_client.config)
        >>> media_id = await media.upload("1234567890", data, "photo.png", "image/png")
        >>> handle = await media.upload_for_template("APP_ID", data, "image/png")
    """

    def __init__(
        self,
        executor: RequestExecutorProtocol,
        config: APIConfig,
        simple: Optional[SimpleUploader] = None,
        resumable: Optional[ResumableUploader] = None,
        assets: Optional[AssetUploader] = None,
        resolver: Optional[MediaMetadataResolver] = None,
        log_level: int = logging.INFO
    ):
        """
        Initialize media manager.

        Args:
            executor: Request executor
            config: API configuration (injected into the resumable uploader)
            simple, resumable, assets, resolver: Optional component overrides
            log_level: Logging level
        """
        self._logger = logging.getLogger('wapipy.media')
        self._logger.setLevel(log_level)

        self.simple = simple or SimpleUploader(executor, config.messaging_product)
        self.resumable = resumable or ResumableUploader(executor, config)
        self.assets = assets or AssetUploader(executor)
        self.resolver = resolver or MediaMetadataResolver(executor)

    # Single-request upload

    async def upload(
        self,
        phone_number_id: str,
        file: Union[bytes, BinaryIO],
        filename: str,
        mime_type: str
    ) -> str:
        """Upload a payload; returns the media id."""
        return await self.simple.upload(phone_number_id, file, filename, mime_type)

    async def upload_file(
        self,
        phone_number_id: str,
        file_path: Union[str, Path],
        mime_type: Optional[str] = None
    ) -> str:
        """Upload a local file; returns the media id."""
        return await self.simple.upload_file(phone_number_id, file_path, mime_type)

    # Resumable upload

    async def create_upload_session(
        self,
        app_id: str,
        file_length: int,
        file_type: str
    ) -> UploadSession:
        """Create a resumable upload session."""
        return await self.resumable.create_session(app_id, file_length, file_type)

    async def upload_session_data(
        self,
        session: Union[UploadSession, str],
        data: bytes,
        file_offset: int = 0
    ) -> str:
        """Push data into a session; returns the media handle."""
        return await self.resumable.push_data(session, data, file_offset)

    async def upload_for_template(self, app_id: str, data: bytes, file_type: str) -> str:
        """
        Upload a payload through a resumable session.

        Returns:
            Media handle usable as a template ``header_handle``
        """
        return await self.resumable.upload(app_id, data, file_type)

    # Metadata

    async def get_metadata(self, media_id: str) -> MediaMetadata:
        return await self.resolver.get_metadata(media_id)

    async def get_url(self, media_id: str) -> str:
        """Resolve the transient fetch URL; re-resolve for every use."""
        return await self.resolver.resolve(media_id)

    async def delete(self, media_id: str) -> None:
        await self.resolver.delete(media_id)

    # Assets

    async def upload_flow_json(
        self,
        flow_id: str,
        flow_json: Union[str, bytes, Dict[str, Any], List[Any]]
    ) -> AssetUploadResult:
        """Upload a flow definition; inspect ``success`` on the result."""
        return await self.assets.push_asset(flow_id, flow_json)

    async def get_flow_json(self, flow_id: str) -> str:
        """Fetch the current flow definition as raw text."""
        return await self.assets.fetch_asset(flow_id)

    async def get_flow_json_bytes(self, flow_id: str) -> bytes:
        return await self.assets.fetch_asset_bytes(flow_id)
