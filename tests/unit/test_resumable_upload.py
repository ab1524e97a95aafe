"""Tests for resumable upload."""
import json
import pytest

from wapipy.core.api import GraphAPIError
from wapipy.core.exceptions import TransportError, DecodeError, UploadFailed
from wapipy.core.media.models import UploadSession, UploadState
from wapipy.core.media.services import ResumableUploader


PUSH_URL = "https://graph.facebook.com/v21.0/sess_123"


class TestCreateSession:
    """Test suite for session creation."""

    @pytest.fixture
    def uploader(self, executor, api_config):
        return ResumableUploader(executor, api_config)

    @pytest.mark.asyncio
    async def test_create_session(self, uploader, executor):
        """Test session creation posts length and type."""
        executor.queue('POST', 'A1/uploads', {'id': 'sess_123'})

        session = await uploader.create_session("A1", 1024, "image/png")

        assert session.session_id == "sess_123"
        assert session.file_length == 1024
        assert session.file_type == "image/png"
        assert session.state is UploadState.CREATED
        assert executor.calls[0]['body'] == {'file_length': 1024, 'file_type': 'image/png'}

    @pytest.mark.asyncio
    async def test_create_session_empty_id(self, uploader, executor):
        """Test empty session id fails the attempt."""
        executor.queue('POST', 'A1/uploads', {'id': ''})

        with pytest.raises(UploadFailed) as exc_info:
            await uploader.create_session("A1", 1024, "image/png")

        assert exc_info.value.field == 'id'

    @pytest.mark.asyncio
    async def test_create_session_invalid_json(self, uploader, executor):
        """Test malformed body raises DecodeError."""
        executor.queue('POST', 'A1/uploads', b'<html>')

        with pytest.raises(DecodeError):
            await uploader.create_session("A1", 1024, "image/png")

    @pytest.mark.asyncio
    async def test_create_session_rejects_zero_length(self, uploader, executor):
        """Test zero length is refused before any call."""
        with pytest.raises(ValueError, match="positive"):
            await uploader.create_session("A1", 0, "image/png")

        assert executor.calls == []


class TestPushData:
    """Test suite for data push."""

    @pytest.fixture
    def uploader(self, executor, api_config):
        return ResumableUploader(executor, api_config)

    @pytest.mark.asyncio
    async def test_push_sends_raw_body_and_custom_headers(self, uploader, executor, png_payload):
        """Test push bypasses default headers."""
        executor.queue('POST', PUSH_URL, {'h': '4::abc'})

        handle = await uploader.push_data("sess_123", png_payload, 0)

        assert handle == "4::abc"
        call = executor.calls[0]
        assert call['kind'] == 'send'
        assert call['url'] == PUSH_URL
        assert call['data'] == png_payload
        assert call['authenticate'] is False
        assert call['headers'] == {
            'Authorization': 'OAuth TEST_TOKEN',
            'file_offset': '0',
        }

    @pytest.mark.asyncio
    async def test_push_offset_header_is_decimal(self, uploader, executor):
        """Test offset header value."""
        executor.queue('POST', PUSH_URL, {'h': '4::abc'})

        await uploader.push_data("sess_123", b"data", 2048)

        assert executor.calls[0]['headers']['file_offset'] == '2048'

    @pytest.mark.asyncio
    async def test_push_non_2xx_keeps_body(self, uploader, executor):
        """Test non-2xx status raises with body captured."""
        executor.queue('POST', PUSH_URL, b'upstream exploded', status=502)

        with pytest.raises(TransportError) as exc_info:
            await uploader.push_data("sess_123", b"data")

        assert exc_info.value.status == 502
        assert exc_info.value.body == b'upstream exploded'

    @pytest.mark.asyncio
    async def test_push_graph_error(self, uploader, executor):
        """Test Graph error envelope is decoded."""
        envelope = {'error': {'message': 'Invalid OAuth access token', 'type': 'OAuthException',
                              'code': 190, 'fbtrace_id': 'Abc'}}
        executor.queue('POST', PUSH_URL, envelope, status=401)

        with pytest.raises(GraphAPIError) as exc_info:
            await uploader.push_data("sess_123", b"data")

        assert exc_info.value.code == 190
        assert exc_info.value.fbtrace_id == 'Abc'

    @pytest.mark.asyncio
    async def test_push_without_handle(self, uploader, executor):
        """Test 2xx without handle is a failure."""
        executor.queue('POST', PUSH_URL, {'id': 'something-else'})

        with pytest.raises(UploadFailed) as exc_info:
            await uploader.push_data("sess_123", b"data")

        assert exc_info.value.field == 'h'
        assert exc_info.value.status == 200

    @pytest.mark.asyncio
    async def test_push_negative_offset(self, uploader, executor):
        """Test negative offset is refused."""
        with pytest.raises(ValueError, match="non-negative"):
            await uploader.push_data("sess_123", b"data", -1)

    @pytest.mark.asyncio
    async def test_session_completed_after_push(self, uploader, executor):
        """Test session state moves to COMPLETED."""
        executor.queue('POST', PUSH_URL, {'h': '4::abc'})
        session = UploadSession("sess_123", 4, "text/plain")

        await uploader.push_data(session, b"data")

        assert session.state is UploadState.COMPLETED
        assert session.handle == "4::abc"

    @pytest.mark.asyncio
    async def test_session_failed_after_error(self, uploader, executor):
        """Test session state moves to FAILED."""
        executor.queue('POST', PUSH_URL, b'{}', status=500)
        session = UploadSession("sess_123", 4, "text/plain")

        with pytest.raises(TransportError):
            await uploader.push_data(session, b"data")

        assert session.state is UploadState.FAILED

    @pytest.mark.asyncio
    async def test_session_single_use(self, uploader, executor):
        """Test a used session refuses another push."""
        executor.queue('POST', PUSH_URL, {'h': '4::abc'})
        session = UploadSession("sess_123", 4, "text/plain")
        await uploader.push_data(session, b"data")

        with pytest.raises(ValueError, match="single push"):
            await uploader.push_data(session, b"data")

        assert len(executor.calls) == 1

    @pytest.mark.asyncio
    async def test_short_push_refused(self, uploader, executor):
        """Test a push that stops before the declared length is refused."""
        session = UploadSession("sess_123", 1024, "image/png")

        with pytest.raises(ValueError, match="declared 1024 bytes"):
            await uploader.push_data(session, b"0123456789")

        assert executor.calls == []
        assert session.state is UploadState.CREATED

    @pytest.mark.asyncio
    async def test_overflowing_push_refused(self, uploader, executor):
        """Test a push past the declared length is refused."""
        session = UploadSession("sess_123", 4, "text/plain")

        with pytest.raises(ValueError, match="ends at byte 6"):
            await uploader.push_data(session, b"data", 2)

        assert executor.calls == []

    @pytest.mark.asyncio
    async def test_push_at_offset_filling_session(self, uploader, executor):
        executor.queue('POST', PUSH_URL, {'h': '4::abc'})
        session = UploadSession("sess_123", 6, "text/plain")

        assert await uploader.push_data(session, b"data", 2) == "4::abc"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("handle", [{}, [], False, True, 1.5, ''])
    async def test_push_unusable_handle(self, uploader, executor, handle):
        """Test a handle of the wrong type is not stringified into success."""
        executor.queue('POST', PUSH_URL, {'h': handle})
        session = UploadSession("sess_123", 4, "text/plain")

        with pytest.raises(UploadFailed) as exc_info:
            await uploader.push_data(session, b"data")

        assert exc_info.value.field == 'h'
        assert session.state is UploadState.FAILED
        assert session.handle is None


class TestResumableUpload:
    """Test suite for the composed upload."""

    @pytest.fixture
    def uploader(self, executor, api_config):
        return ResumableUploader(executor, api_config)

    @pytest.mark.asyncio
    async def test_scenario_manual_and_composed_agree(self, executor, api_config, png_payload):
        """Test create+push and upload() yield the same handle."""
        for _ in range(2):
            executor.queue('POST', 'A1/uploads', {'id': 'sess_123'})
            executor.queue('POST', PUSH_URL, {'h': '4::abc'})
        uploader = ResumableUploader(executor, api_config)

        session = await uploader.create_session("A1", 1024, "image/png")
        manual = await uploader.push_data(session.session_id, png_payload, 0)
        composed = await uploader.upload("A1", png_payload, "image/png")

        assert session.session_id == "sess_123"
        assert manual == "4::abc"
        assert composed == manual

    @pytest.mark.asyncio
    async def test_upload_uses_payload_length_and_offset_zero(self, uploader, executor, png_payload):
        """Test composed call declares len(data) and pushes at 0."""
        executor.queue('POST', 'A1/uploads', {'id': 'sess_123'})
        executor.queue('POST', PUSH_URL, {'h': '4::abc'})

        await uploader.upload("A1", png_payload, "image/png")

        assert executor.calls[0]['body']['file_length'] == len(png_payload)
        assert executor.calls[1]['headers']['file_offset'] == '0'

    @pytest.mark.asyncio
    async def test_upload_stops_at_session_failure(self, uploader, executor):
        """Test no push happens when session creation fails."""
        executor.queue('POST', 'A1/uploads', json.dumps({}).encode())

        with pytest.raises(UploadFailed):
            await uploader.upload("A1", b"data", "image/png")

        assert len(executor.calls) == 1

    @pytest.mark.asyncio
    async def test_upload_file(self, uploader, executor, tmp_path):
        """Test file shortcut guesses the MIME type."""
        path = tmp_path / "header.png"
        path.write_bytes(b"x" * 10)
        executor.queue('POST', 'A1/uploads', {'id': 'sess_123'})
        executor.queue('POST', PUSH_URL, {'h': '4::abc'})

        handle = await uploader.upload_file("A1", path)

        assert handle == "4::abc"
        assert executor.calls[0]['body'] == {'file_length': 10, 'file_type': 'image/png'}

    def test_push_url_follows_config(self, executor):
        """Test push URL is built from the injected config."""
        from wapipy.core.api import APIConfig
        config = APIConfig(access_token='T', protocol='http', base_url='localhost:8080', api_version='v1.0')
        uploader = ResumableUploader(executor, config)

        assert uploader.build_push_headers(5) == {'Authorization': 'OAuth T', 'file_offset': '5'}
        assert config.build_url("sess") == "http://localhost:8080/v1.0/sess"
