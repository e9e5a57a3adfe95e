"""Binary buffers and the views that address regions of them."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable, Optional, Union

from .bits import ceil4
from .constants import BufferViewTarget
from .element import MainElement


class BufferView(MainElement):
    """A contiguous region of a buffer."""

    def __init__(self, index: int, name: str = "") -> None:
        super().__init__(index, name)
        self.buffer: Optional[Buffer] = None
        self.byte_offset = 0
        self.byte_length = 0
        self.byte_stride = 0
        self.target = BufferViewTarget.UNDEFINED

    def data(self) -> Optional[memoryview]:
        """Return a writable view of the region, or None if not attached.

        Release the returned memoryview (for example with a ``with`` block)
        before more data is added to the buffer.
        """
        if self.buffer is None:
            return None
        return self.buffer._region(self.byte_offset, self.byte_length)

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        if self.buffer is None:
            raise ValueError("BufferView: buffer not set")
        if self.byte_length == 0:
            raise ValueError("BufferView: byteLength not set")
        result["buffer"] = self.buffer.index
        result["byteLength"] = self.byte_length
        if self.byte_offset > 0:
            result["byteOffset"] = self.byte_offset
        if self.byte_stride > 0:
            result["byteStride"] = self.byte_stride
        if self.target != BufferViewTarget.UNDEFINED:
            result["target"] = int(self.target)
        return result


class Buffer(MainElement):
    """A growing block of binary data that hands out buffer views."""

    def __init__(
        self,
        index: int,
        name: str = "",
        create_view: Optional[Callable[[], BufferView]] = None,
    ) -> None:
        super().__init__(index, name)
        self.uri = ""
        self.views: list[BufferView] = []
        self._data = bytearray()
        self._create_view = create_view

    def _region(self, offset: int, length: int) -> memoryview:
        return memoryview(self._data)[offset : offset + length]

    def _new_view(self) -> BufferView:
        if self._create_view is not None:
            return self._create_view()
        return BufferView(len(self.views))

    def allocate(self, byte_length: int, align: bool = True) -> BufferView:
        """Append zeroed space and return a view on it.

        With align set, the view starts on a 4-byte boundary.
        """
        if byte_length < 0:
            raise ValueError("byte_length must not be negative")
        size = len(self._data)
        start = ceil4(size) if align else size
        self._data.extend(bytes(start + byte_length - size))

        view = self._new_view()
        view.buffer = self
        view.byte_offset = start
        view.byte_length = byte_length
        view.byte_stride = 0
        self.views.append(view)
        return view

    def add_data(self, data: Union[bytes, bytearray, memoryview], align: bool = True) -> BufferView:
        """Append a copy of data and return a view on it."""
        raw = memoryview(data).tobytes()
        view = self.allocate(len(raw), align)
        start = view.byte_offset
        self._data[start : start + len(raw)] = raw
        return view

    def add_image(self, image_file_path: Union[str, os.PathLike]) -> BufferView:
        """Append the contents of an image file, unaligned, and return its view."""
        return self.add_data(Path(image_file_path).read_bytes(), align=False)

    def save(self, buffer_file_path: Union[str, os.PathLike]) -> None:
        """Write the raw buffer contents to a file."""
        Path(buffer_file_path).write_bytes(bytes(self._data))

    def data(self) -> bytes:
        """Return a copy of the buffer contents."""
        return bytes(self._data)

    def byte_length(self) -> int:
        return len(self._data)

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        result["byteLength"] = len(self._data)
        if self.uri:
            result["uri"] = self.uri
        return result