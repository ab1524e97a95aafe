"""
Data models for media transfer.

Uses dataclasses for immutable, type-safe data structures.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, Optional, Tuple


@dataclass(frozen=True)
class MediaMetadata:
    """
    Metadata of an uploaded media object.

    Attributes:
        id: Media identifier
        url: Transient fetch URL (expires; re-resolve for every use)
        mime_type: MIME type of the payload
        sha256: Content hash
        file_size: Size in bytes
        messaging_product: Product the media belongs to
    """
    id: str
    url: str = ''
    mime_type: str = ''
    sha256: str = ''
    file_size: int = 0
    messaging_product: str = ''

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MediaMetadata':
        """Create from a metadata response."""
        return cls(
            id=str(data.get('id') or ''),
            url=data.get('url') or '',
            mime_type=data.get('mime_type') or '',
            sha256=data.get('sha256') or '',
            file_size=int(data.get('file_size') or 0),
            messaging_product=data.get('messaging_product') or ''
        )


class UploadState(str, Enum):
    """Lifecycle of a resumable upload session."""
    CREATED = 'created'
    COMPLETED = 'completed'
    FAILED = 'failed'


@dataclass
class UploadSession:
    """
    Server-side context for one resumable data push.

    Single use: a session leaves CREATED after its first push,
    whether that push succeeded or not.

    Attributes:
        session_id: Opaque token issued by the remote (``upload:...``)
        file_length: Declared total payload length in bytes
        file_type: Declared MIME type
        state: Current lifecycle state
        handle: Media handle once COMPLETED
    """
    session_id: str
    file_length: int
    file_type: str
    state: UploadState = UploadState.CREATED
    handle: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.state is UploadState.CREATED


@dataclass(frozen=True)
class SourceSpan:
    """Line/column range inside an asset document."""
    line_start: int
    line_end: int
    column_start: int
    column_end: int

    def __str__(self) -> str:
        return f"{self.line_start}:{self.column_start}-{self.line_end}:{self.column_end}"


@dataclass(frozen=True)
class AssetValidationError:
    """
    One structural problem reported for an uploaded asset.

    Attributes:
        error: Error code (e.g. ``INVALID_PROPERTY_VALUE``)
        error_type: Error category
        message: Human readable description
        line_start, line_end, column_start, column_end: Optional location
    """
    error: str
    error_type: str = ''
    message: str = ''
    line_start: Optional[int] = None
    line_end: Optional[int] = None
    column_start: Optional[int] = None
    column_end: Optional[int] = None

    @property
    def span(self) -> Optional[SourceSpan]:
        """Source location, or None when the remote reported none."""
        if self.line_start is None:
            return None
        return SourceSpan(
            line_start=self.line_start,
            line_end=self.line_end if self.line_end is not None else self.line_start,
            column_start=self.column_start or 0,
            column_end=self.column_end or 0
        )

    def __str__(self) -> str:
        location = f" at {self.span}" if self.span else ''
        return f"{self.error}{location}: {self.message}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AssetValidationError':
        """Create from one ``validation_errors`` entry."""
        return cls(
            error=data.get('error') or '',
            error_type=data.get('error_type') or '',
            message=data.get('message') or '',
            line_start=data.get('line_start'),
            line_end=data.get('line_end'),
            column_start=data.get('column_start'),
            column_end=data.get('column_end')
        )


@dataclass(frozen=True)
class AssetUploadResult:
    """
    Outcome of an asset push.

    A 2xx transport status does not mean the asset was accepted:
    check ``success`` (or call ``raise_for_errors``).

    Attributes:
        success: Remote accepted the document
        validation_errors: Ordered validation errors
        response: Raw decoded response
    """
    success: bool
    validation_errors: Tuple[AssetValidationError, ...] = ()
    response: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AssetUploadResult':
        """Create from an asset-form response."""
        errors = data.get('validation_errors') or []
        return cls(
            success=data.get('success') is True,
            validation_errors=tuple(
                AssetValidationError.from_dict(e) for e in errors if isinstance(e, dict)
            ),
            response=data
        )

    def raise_for_errors(self) -> 'AssetUploadResult':
        """
        Raise AssetRejected unless the remote reported success.

        Returns:
            self, for chaining
        """
        if not self.success:
            from ...exceptions import AssetRejected
            details = '; '.join(str(e) for e in self.validation_errors) or 'no details'
            raise AssetRejected(
                f"Asset rejected: {details}",
                validation_errors=self.validation_errors
            )
        return self
