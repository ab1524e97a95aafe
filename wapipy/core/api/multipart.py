"""
Multipart form description.

Forms are built as plain data first and only turned into an
``aiohttp.FormData`` by the transport, so uploaders can be tested
without serializing a request.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Union
import os

import aiohttp


@dataclass(frozen=True)
class FormPart:
    """
    Single multipart part.

    Attributes:
        name: Form field name (Content-Disposition ``name``)
        value: Text value or binary payload
        filename: Filename for file parts, None for plain fields
        content_type: Part Content-Type, None for plain fields
    """
    name: str
    value: Union[str, bytes]
    filename: Optional[str] = None
    content_type: Optional[str] = None

    @property
    def is_file(self) -> bool:
        return self.filename is not None


@dataclass
class MultipartForm:
    """Ordered multipart/form-data body."""
    parts: List[FormPart] = field(default_factory=list)

    def add_field(self, name: str, value: str) -> 'MultipartForm':
        """Append a plain text field."""
        self.parts.append(FormPart(name=name, value=value))
        return self

    def add_file(
        self,
        name: str,
        data: Union[str, bytes],
        filename: str,
        content_type: str = 'application/octet-stream'
    ) -> 'MultipartForm':
        """
        Append a file part.

        The filename is reduced to its basename; directories of the
        caller's machine never go on the wire.
        """
        basename = os.path.basename(filename.replace('\\', '/'))
        if isinstance(data, str):
            data = data.encode('utf-8')
        self.parts.append(FormPart(
            name=name,
            value=data,
            filename=basename,
            content_type=content_type
        ))
        return self

    def get(self, name: str) -> Optional[FormPart]:
        """First part with the given name."""
        for part in self.parts:
            if part.name == name:
                return part
        return None

    @property
    def size(self) -> int:
        """Approximate payload size in bytes (part values only)."""
        return sum(
            len(p.value) if isinstance(p.value, bytes) else len(p.value.encode('utf-8'))
            for p in self.parts
        )

    def to_form_data(self) -> aiohttp.FormData:
        """Convert to aiohttp FormData for sending."""
        form = aiohttp.FormData()
        for part in self.parts:
            if part.is_file:
                form.add_field(
                    part.name,
                    part.value,
                    filename=part.filename,
                    content_type=part.content_type
                )
            else:
                form.add_field(part.name, part.value)
        return form
