"""
Structured asset upload (flow definition documents).

The document goes up as a three-field multipart form to
``{flow_id}/assets``. The remote may answer 2xx with ``success`` false and a
list of validation errors, so the result must be inspected.
"""
from typing import Any, Dict, List, Union
import json
import logging

from ..codec import decode_json
from ...exceptions import DecodeError
from ..models import AssetUploadResult
from ..protocols import RequestExecutorProtocol
from ...api.multipart import MultipartForm


class AssetUploader:
    """
    Pushes and fetches structured assets.

    Class attributes fix the asset name and type tag the remote expects
    for flow definitions.
    """

    ASSET_NAME = 'flow.json'
    ASSET_TYPE = 'FLOW_JSON'
    CONTENT_TYPE = 'application/json'

    def __init__(self, executor: RequestExecutorProtocol):
        self._executor = executor
        self._logger = logging.getLogger('wapipy.media.asset')

    def build_form(self, document: Union[str, bytes]) -> MultipartForm:
        """Build the asset form."""
        return (
            MultipartForm()
            .add_field('name', self.ASSET_NAME)
            .add_field('asset_type', self.ASSET_TYPE)
            .add_file('file', document, self.ASSET_NAME, self.CONTENT_TYPE)
        )

    async def push_asset(
        self,
        flow_id: str,
        document: Union[str, bytes, Dict[str, Any], List[Any]]
    ) -> AssetUploadResult:
        """
        Upload a document as the resource's asset.

        Args:
            flow_id: Target resource identifier
            document: Document text; a dict or list is JSON-serialized first

        Returns:
            AssetUploadResult, also when the remote rejected the document

        Raises:
            TransportError: If the call fails
            DecodeError: If the response is not a JSON object
        """
        if isinstance(document, (dict, list)):
            document = json.dumps(document)

        form = self.build_form(document)
        self._logger.info(f"Uploading asset {self.ASSET_NAME} to {flow_id} ({form.size} bytes)")

        body = await self._executor.request_multipart('POST', f"{flow_id}/assets", form)
        result = AssetUploadResult.from_dict(
            decode_json(body, what='asset upload response')
        )

        if result.success:
            self._logger.info(f"Asset accepted for {flow_id}")
        else:
            self._logger.warning(
                f"Asset rejected for {flow_id}: {len(result.validation_errors)} validation errors"
            )
        return result

    async def fetch_asset_bytes(self, flow_id: str) -> bytes:
        """
        Fetch the resource's current asset as raw bytes.

        A ``bytes`` document pushed with ``push_asset`` comes back unchanged.

        Raises:
            TransportError: If the call fails
        """
        return await self._executor.request(f"{flow_id}/assets", 'GET')

    async def fetch_asset(self, flow_id: str) -> str:
        """
        Fetch the resource's current asset.

        Returns:
            Raw response text, unparsed

        Raises:
            TransportError: If the call fails
            DecodeError: If the body is not valid UTF-8
        """
        body = await self.fetch_asset_bytes(flow_id)
        try:
            return body.decode('utf-8')
        except UnicodeDecodeError as e:
            raise DecodeError(f"Asset of {flow_id} is not valid UTF-8: {e}", body=body) from e
