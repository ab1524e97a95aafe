"""
Media metadata resolution and deletion.

Fetch URLs expire, so nothing here is cached: every ``resolve`` is a fresh
call.
"""
import logging

from ..codec import decode_json, require_field
from ..models import MediaMetadata
from ..protocols import RequestExecutorProtocol
from ...api.errors import GraphAPIError
from ...exceptions import TransportError, DecodeError, MediaNotFound, DeletionRejected


class MediaMetadataResolver:
    """Resolves media identifiers to fetch URLs and deletes media."""

    FIELDS = 'url,mime_type,sha256,file_size,id,messaging_product'

    def __init__(self, executor: RequestExecutorProtocol):
        self._executor = executor
        self._logger = logging.getLogger('wapipy.media.metadata')

    async def get_metadata(self, media_id: str) -> MediaMetadata:
        """
        Fetch metadata for a media object.

        Raises:
            TransportError: If the call fails
            DecodeError: If the response is not a JSON object or a field has
                the wrong type
        """
        body = await self._executor.request(media_id, 'GET', params={'fields': self.FIELDS})
        payload = decode_json(body, what='media metadata')
        try:
            return MediaMetadata.from_dict(payload)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"Malformed media metadata for {media_id}: {e}", body=body) from e

    async def resolve(self, media_id: str) -> str:
        """
        Resolve a media identifier to its transient fetch URL.

        Not retried when the URL is missing: it may be withheld by policy
        rather than absent transiently.

        Returns:
            Fetch URL (never empty)

        Raises:
            MediaNotFound: If the metadata carries no URL
            TransportError: If the call fails
            DecodeError: If the response is not a JSON object
        """
        body = await self._executor.request(media_id, 'GET', params={'fields': self.FIELDS})
        payload = decode_json(body, what='media metadata')
        url = require_field(
            payload, 'url', body, MediaNotFound, what='media metadata', media_id=media_id
        )
        self._logger.debug(f"Resolved media {media_id}")
        return url

    async def delete(self, media_id: str) -> None:
        """
        Delete a media object.

        Raises:
            DeletionRejected: If the remote answered ``success`` false
            MediaNotFound: If the media does not exist (e.g. already deleted)
            TransportError: If the call fails otherwise
            DecodeError: If the response is not a JSON object
        """
        try:
            body = await self._executor.request(f"media/{media_id}", 'DELETE')
        except TransportError as e:
            not_found = e.status == 404 or (isinstance(e, GraphAPIError) and e.is_not_found)
            if not_found:
                raise MediaNotFound(
                    f"Media {media_id} not found: {e}",
                    media_id=media_id,
                    status=e.status,
                    body=e.body
                ) from e
            raise

        payload = decode_json(body, what='delete response')
        if payload.get('success') is not True:
            text = body.decode('utf-8', errors='replace')
            raise DeletionRejected(
                f"Media deletion failed or returned success=false: {text[:500]}",
                media_id=media_id,
                body=body
            )
        self._logger.info(f"Deleted media {media_id}")
