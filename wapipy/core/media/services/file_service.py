"""
File validation and reading services.

Used by the path-based upload shortcuts; the protocols themselves
only deal in bytes.
"""
from pathlib import Path
from typing import Tuple, Optional, Union
import logging
import mimetypes
import aiofiles


class FileValidator:
    """
    Validates files before upload.

    Responsibilities:
    - Check file existence
    - Verify file is not a directory
    - Get file size
    """

    def validate(self, file_path: Union[str, Path]) -> Tuple[Path, int]:
        """
        Validate a file for upload.

        Args:
            file_path: Path to the file

        Returns:
            Tuple of (validated Path, file size in bytes)

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If path is not a regular file
        """
        path = Path(file_path) if isinstance(file_path, str) else file_path

        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        if not path.is_file():
            raise ValueError(f"Path is not a file: {path}")

        return path, path.stat().st_size

    def validate_size(self, file_size: int, max_size: Optional[int] = None) -> None:
        """
        Validate file size.

        Raises:
            ValueError: If file is empty or exceeds max size
        """
        if file_size == 0:
            raise ValueError("Cannot upload empty file")

        if max_size and file_size > max_size:
            raise ValueError(f"File size {file_size} exceeds maximum {max_size}")

    def guess_mime_type(self, path: Path, default: str = 'application/octet-stream') -> str:
        """MIME type from the file extension."""
        mime_type, _ = mimetypes.guess_type(path.name)
        return mime_type or default


class AsyncFileReader:
    """Reads whole files without blocking the event loop (aiofiles)."""

    def __init__(self):
        self._logger = logging.getLogger('wapipy.media.file')

    async def read_file(self, file_path: Path) -> bytes:
        """
        Read entire file.

        Raises:
            OSError: If the file cannot be read
        """
        async with aiofiles.open(file_path, 'rb') as f:
            data = await f.read()
        self._logger.debug(f"Read {file_path.name} ({len(data)} bytes)")
        return data
