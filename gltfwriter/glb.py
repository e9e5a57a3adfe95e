"""Binary glTF (GLB) container output."""

from __future__ import annotations

import os
import struct
from pathlib import Path
from typing import Union

from .bits import ceil4
from .element import dump_json

GLB_MAGIC = 0x46546C67
GLB_VERSION = 2
CHUNK_TYPE_JSON = 0x4E4F534A
CHUNK_TYPE_BIN = 0x004E4942

_HEADER = struct.Struct("<III")
_CHUNK_HEADER = struct.Struct("<II")


class GLBContainer:
    """Packs an asset's JSON and its first buffer into a GLB file."""

    def __init__(self, asset) -> None:
        self.asset = asset

    def to_bytes(self) -> bytes:
        """Return the complete GLB file contents."""
        buffers = self.asset.buffers()
        if not buffers:
            raise ValueError("asset has no buffer to embed")
        binary = buffers[0].data()

        json_bytes = dump_json(self.asset.to_json(), -1).encode("utf-8")
        json_padded = ceil4(len(json_bytes))
        bin_padded = ceil4(len(binary))

        total = (
            _HEADER.size
            + _CHUNK_HEADER.size
            + json_padded
            + _CHUNK_HEADER.size
            + bin_padded
        )

        parts = [
            _HEADER.pack(GLB_MAGIC, GLB_VERSION, total),
            _CHUNK_HEADER.pack(json_padded, CHUNK_TYPE_JSON),
            json_bytes,
            b" " * (json_padded - len(json_bytes)),
            _CHUNK_HEADER.pack(bin_padded, CHUNK_TYPE_BIN),
            binary,
            b"\x00" * (bin_padded - len(binary)),
        ]
        return b"".join(parts)

    def save(self, file_path: Union[str, os.PathLike]) -> None:
        """Write the GLB file to the given path."""
        Path(file_path).write_bytes(self.to_bytes())