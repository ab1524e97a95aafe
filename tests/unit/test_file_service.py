"""Tests for file services."""
import pytest
from pathlib import Path
import tempfile
import os

from wapipy.core.media.services import FileValidator, AsyncFileReader


class TestFileValidator:
    """Test suite for FileValidator."""

    @pytest.fixture
    def validator(self):
        """Create validator instance."""
        return FileValidator()

    @pytest.fixture
    def temp_file(self):
        """Create temporary file for testing."""
        fd, path = tempfile.mkstemp(suffix=".jpg")
        os.write(fd, b"test content")
        os.close(fd)
        yield Path(path)
        os.unlink(path)

    def test_validate_existing_file(self, validator, temp_file):
        """Test validating existing file."""
        path, size = validator.validate(temp_file)

        assert path == temp_file
        assert size == 12  # "test content"

    def test_validate_string_path(self, validator, temp_file):
        """Test validating string path."""
        path, size = validator.validate(str(temp_file))

        assert path == temp_file

    def test_validate_nonexistent_file(self, validator):
        """Test validating non-existent file."""
        with pytest.raises(FileNotFoundError):
            validator.validate(Path("/nonexistent/file.txt"))

    def test_validate_directory(self, validator):
        """Test validating directory raises error."""
        with pytest.raises(ValueError):
            validator.validate(Path(tempfile.gettempdir()))

    def test_validate_size_empty(self, validator):
        """Test empty file raises error."""
        with pytest.raises(ValueError, match="empty"):
            validator.validate_size(0)

    def test_validate_size_exceeds_max(self, validator):
        """Test exceeding max size raises error."""
        with pytest.raises(ValueError, match="exceeds"):
            validator.validate_size(2000, max_size=1000)

    @pytest.mark.parametrize("name,expected", [
        ("photo.jpg", "image/jpeg"),
        ("clip.mp4", "video/mp4"),
        ("doc.pdf", "application/pdf"),
        ("blob.unknownext", "application/octet-stream"),
    ])
    def test_guess_mime_type(self, validator, name, expected):
        """Test MIME type guessing."""
        assert validator.guess_mime_type(Path(name)) == expected


class TestAsyncFileReader:
    """Test suite for AsyncFileReader."""

    @pytest.mark.asyncio
    async def test_read_entire_file(self, tmp_path):
        """Test reading entire file."""
        path = tmp_path / "data.bin"
        path.write_bytes(b"0123456789ABCDEFGHIJ")

        data = await AsyncFileReader().read_file(path)

        assert data == b"0123456789ABCDEFGHIJ"

    @pytest.mark.asyncio
    async def test_read_nonexistent_file(self):
        """Test reading non-existent file raises."""
        with pytest.raises(OSError):
            await AsyncFileReader().read_file(Path("/nonexistent/file.txt"))
