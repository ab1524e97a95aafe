"""
Single-request media upload.

One multipart POST to ``{phone_number_id}/media``; the remote answers
with the media identifier used to reference the payload in messages.
"""
from pathlib import Path
from typing import BinaryIO, Optional, Union
import logging

from ..codec import decode_json, require_field
from ..protocols import RequestExecutorProtocol
from ...api.multipart import MultipartForm
from ...exceptions import UploadFailed
from .file_service import FileValidator, AsyncFileReader


class SimpleUploader:
    """
    Uploads a payload in one multipart request.

    Responsibilities:
    - Build the upload form (product field + file part)
    - Send it to the phone-number-scoped media path
    - Extract the media identifier
    """

    def __init__(
        self,
        executor: RequestExecutorProtocol,
        messaging_product: str = 'whatsapp'
    ):
        """
        Initialize simple uploader.

        Args:
            executor: Request executor
            messaging_product: Value of the ``messaging_product`` form field
        """
        self._executor = executor
        self._messaging_product = messaging_product
        self._validator = FileValidator()
        self._reader = AsyncFileReader()
        self._logger = logging.getLogger('wapipy.media.simple')

    def build_form(
        self,
        data: bytes,
        filename: str,
        mime_type: str
    ) -> MultipartForm:
        """Build the upload form."""
        return (
            MultipartForm()
            .add_field('messaging_product', self._messaging_product)
            .add_file('file', data, filename, mime_type)
        )

    async def upload(
        self,
        phone_number_id: str,
        file: Union[bytes, BinaryIO],
        filename: str,
        mime_type: str
    ) -> str:
        """
        Upload a payload and return its media identifier.

        Args:
            phone_number_id: Phone number the media is scoped to
            file: Payload bytes or a binary file object
            filename: Filename (only the basename is sent)
            mime_type: Payload MIME type

        Returns:
            Media identifier

        Raises:
            TransportError: If the call fails
            DecodeError: If the response is not JSON
            UploadFailed: If the response carries no identifier
        """
        data = file if isinstance(file, (bytes, bytearray)) else file.read()
        form = self.build_form(bytes(data), filename, mime_type)

        self._logger.info(f"Uploading {filename} ({len(data)} bytes, {mime_type})")
        body = await self._executor.request_multipart(
            'POST', f"{phone_number_id}/media", form
        )

        payload = decode_json(body, what='media upload response')
        media_id = require_field(
            payload, 'id', body, UploadFailed, what='media upload response'
        )
        self._logger.info(f"Uploaded {filename}: media id {media_id}")
        return media_id

    async def upload_file(
        self,
        phone_number_id: str,
        file_path: Union[str, Path],
        mime_type: Optional[str] = None
    ) -> str:
        """
        Upload a local file.

        Args:
            phone_number_id: Phone number the media is scoped to
            file_path: Path to the file
            mime_type: MIME type, guessed from the extension when omitted

        Returns:
            Media identifier

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If path is not a file or the file is empty
        """
        path, size = self._validator.validate(file_path)
        self._validator.validate_size(size)
        mime_type = mime_type or self._validator.guess_mime_type(path)

        data = await self._reader.read_file(path)
        return await self.upload(phone_number_id, data, path.name, mime_type)
