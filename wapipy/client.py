"""
WapiClient - High-level async client for media transfer.

Example:
    >>> async with WapiClient("EAAG...") as wapi:
    ...     media_id = await wapi.upload_media_file("1234567890", "photo.png")
    ...     url = await wapi.get_media_url(media_id)
"""
from pathlib import Path
from typing import Any, BinaryIO, Dict, List, Optional, Union

from .core.api import AsyncAPIClient, APIConfig
from .core.media import MediaManager, AssetUploadResult
from .core.logging import get_logger


class WapiClient:
    """
    Owns the transport and exposes media operations.

    Args:
        access_token: Access credential (ignored when ``config`` is given)
        config: Full API configuration
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        config: Optional[APIConfig] = None
    ):
        if config is None:
            config = APIConfig.default(access_token or '')
        self._config = config
        self._api: Optional[AsyncAPIClient] = None
        self._media: Optional[MediaManager] = None
        self._logger = get_logger('wapipy.client')

    @property
    def config(self) -> APIConfig:
        return self._config

    @property
    def media(self) -> MediaManager:
        """Media manager; the client must be started first."""
        if self._media is None:
            raise RuntimeError("Client not started. Use 'async with WapiClient(...)' or await start().")
        return self._media

    async def start(self) -> 'WapiClient':
        """Open the transport."""
        if self._api is None:
            self._api = AsyncAPIClient(self._config)
            await self._api.__aenter__()
            self._media = MediaManager(self._api, self._config, log_level=self._config.log_level)
            self._logger.debug(f"Client started against {self._config.endpoint}")
        return self

    async def __aenter__(self) -> 'WapiClient':
        return await self.start()

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Close the client and release resources."""
        if self._api:
            await self._api.close()
            self._api = None
        self._media = None

    # Shortcuts

    async def upload_media(
        self,
        phone_number_id: str,
        file: Union[bytes, BinaryIO],
        filename: str,
        mime_type: str
    ) -> str:
        """Upload media; returns the media id."""
        return await self.media.upload(phone_number_id, file, filename, mime_type)

    async def upload_media_file(
        self,
        phone_number_id: str,
        file_path: Union[str, Path],
        mime_type: Optional[str] = None
    ) -> str:
        """Upload a local file; returns the media id."""
        return await self.media.upload_file(phone_number_id, file_path, mime_type)

    async def upload_media_for_template(self, app_id: str, data: bytes, file_type: str) -> str:
        """Upload media through a resumable session; returns the handle."""
        return await self.media.upload_for_template(app_id, data, file_type)

    async def get_media_url(self, media_id: str) -> str:
        return await self.media.get_url(media_id)

    async def delete_media(self, media_id: str) -> None:
        await self.media.delete(media_id)

    async def upload_flow_json(
        self,
        flow_id: str,
        flow_json: Union[str, bytes, Dict[str, Any], List[Any]]
    ) -> AssetUploadResult:
        return await self.media.upload_flow_json(flow_id, flow_json)

    async def get_flow_json(self, flow_id: str) -> str:
        return await self.media.get_flow_json(flow_id)

    async def get_flow_json_bytes(self, flow_id: str) -> bytes:
        return await self.media.get_flow_json_bytes(flow_id)
