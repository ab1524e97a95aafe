"""
Session-based resumable upload.

Two steps: create a session on ``{app_id}/uploads``, then push the payload
to ``/{session_id}`` at a byte offset. The push answers with a media handle
(``h``) that other payloads, such as template headers, can reference.

The push does not go through the executor's default request builder: it
carries the raw payload as body, an ``OAuth`` authorization header and a
``file_offset`` header. Only single pushes at a caller-given offset are
supported; chunked resumption would need per-session offset tracking and
serialized pushes.
"""
from pathlib import Path
from typing import Optional, Union
import logging

from ..codec import decode_json, require_field
from ..models import UploadSession, UploadState
from ..protocols import RequestExecutorProtocol
from ...api.config import APIConfig
from ...api.errors import error_from_response
from ...exceptions import UploadFailed
from .file_service import FileValidator, AsyncFileReader


class ResumableUploader:
    """
    Drives the create-session / push-data sequence.

    State per transfer lives in the UploadSession the caller holds;
    the uploader itself is stateless and safe to share.
    """

    def __init__(self, executor: RequestExecutorProtocol, config: APIConfig):
        """
        Initialize resumable uploader.

        Args:
            executor: Request executor
            config: Endpoint and credential used to build push requests
        """
        self._executor = executor
        self._config = config
        self._validator = FileValidator()
        self._reader = AsyncFileReader()
        self._logger = logging.getLogger('wapipy.media.resumable')

    async def create_session(
        self,
        app_id: str,
        file_length: int,
        file_type: str
    ) -> UploadSession:
        """
        Create an upload session.

        Args:
            app_id: Application identifier
            file_length: Total payload length in bytes
            file_type: Payload MIME type

        Returns:
            UploadSession in CREATED state

        Raises:
            ValueError: If file_length is not positive
            TransportError: If the call fails
            DecodeError: If the response is not JSON
            UploadFailed: If no session id was issued
        """
        if file_length <= 0:
            raise ValueError(f"file_length must be positive, got {file_length}")

        body = await self._executor.request(
            f"{app_id}/uploads",
            'POST',
            body={'file_length': file_length, 'file_type': file_type}
        )
        payload = decode_json(body, what='upload session response')
        session_id = require_field(
            payload, 'id', body, UploadFailed, what='upload session response'
        )

        self._logger.debug(f"Upload session created: {file_length} bytes, {file_type}")
        return UploadSession(
            session_id=session_id,
            file_length=file_length,
            file_type=file_type
        )

    def build_push_headers(self, file_offset: int) -> dict:
        """Headers for the data push."""
        return {
            'Authorization': f"OAuth {self._config.access_token}",
            'file_offset': str(file_offset),
        }

    async def push_data(
        self,
        session: Union[UploadSession, str],
        data: bytes,
        file_offset: int = 0
    ) -> str:
        """
        Push the payload into a session.

        Args:
            session: UploadSession or bare session id
            data: Payload bytes
            file_offset: Starting byte offset (0 for a full upload)

        Returns:
            Media handle

        Raises:
            ValueError: If the offset is negative, the session was already used,
                or the push does not end exactly at the declared file length
            TransportError: On network failure or non-2xx status
            DecodeError: If the response is not JSON
            UploadFailed: If the response carries no handle
        """
        if file_offset < 0:
            raise ValueError(f"file_offset must be non-negative, got {file_offset}")

        if isinstance(session, UploadSession):
            if not session.is_open:
                raise ValueError(
                    f"Upload session is {session.state.value}, it accepts a single push"
                )
            end = file_offset + len(data)
            if end != session.file_length:
                raise ValueError(
                    f"Push ends at byte {end} but session {session.session_id} "
                    f"declared {session.file_length} bytes"
                )
            session_id = session.session_id
        else:
            session_id = session

        url = self._config.build_url(session_id)
        self._logger.info(f"Pushing {len(data)} bytes at offset {file_offset}")

        try:
            response = await self._executor.send(
                'POST',
                url,
                data=data,
                headers=self.build_push_headers(file_offset),
                authenticate=False
            )
            if not response.ok:
                self._logger.error(f"Upload push failed with status {response.status}")
                raise error_from_response(response.status, response.body)

            payload = decode_json(response.body, response.status, what='upload push response')
            handle = require_field(
                payload, 'h', response.body, UploadFailed,
                what='upload push response', status=response.status
            )
        except Exception:
            if isinstance(session, UploadSession):
                session.state = UploadState.FAILED
            raise

        if isinstance(session, UploadSession):
            session.state = UploadState.COMPLETED
            session.handle = handle

        self._logger.info("Upload push completed")
        return handle

    async def upload(self, app_id: str, data: bytes, file_type: str) -> str:
        """
        Create a session and push the whole payload at offset 0.

        Args:
            app_id: Application identifier
            data: Payload bytes
            file_type: Payload MIME type

        Returns:
            Media handle

        Raises:
            The first error of either step.
        """
        session = await self.create_session(app_id, len(data), file_type)
        return await self.push_data(session, data, 0)

    async def upload_file(
        self,
        app_id: str,
        file_path: Union[str, Path],
        file_type: Optional[str] = None
    ) -> str:
        """
        Upload a local file through a resumable session.

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If path is not a file or the file is empty
        """
        path, size = self._validator.validate(file_path)
        self._validator.validate_size(size)
        file_type = file_type or self._validator.guess_mime_type(path)

        data = await self._reader.read_file(path)
        return await self.upload(app_id, data, file_type)
