"""Images referenced by textures."""

from __future__ import annotations

from typing import Any, Optional

from .constants import MimeType
from .element import MainElement


class Image(MainElement):
    """An image given by URI or by a buffer view with a MIME type."""

    def __init__(self, index: int, name: str = "") -> None:
        super().__init__(index, name)
        self.uri = ""
        self.buffer_view: Optional[MainElement] = None
        self.mime_type = MimeType.IMAGE_JPEG

    def set_uri(self, uri: str) -> None:
        self.uri = uri
        self.buffer_view = None
        self.mime_type = MimeType.IMAGE_JPEG

    def set_buffer_view(self, buffer_view: MainElement, mime_type: MimeType) -> None:
        self.uri = ""
        self.buffer_view = buffer_view
        self.mime_type = MimeType(mime_type)

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        if self.buffer_view is not None:
            result["bufferView"] = self.buffer_view.index
            result["mimeType"] = self.mime_type.mime()
        else:
            result["uri"] = self.uri
        return result