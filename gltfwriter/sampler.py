"""Texture samplers."""

from __future__ import annotations

from typing import Any

from .constants import MagFilter, MinFilter, WrapMode
from .element import MainElement


class Sampler(MainElement):
    """Filtering and wrapping settings for a texture."""

    def __init__(self, index: int, name: str = "") -> None:
        super().__init__(index, name)
        self.mag_filter = MagFilter.LINEAR
        self.min_filter = MinFilter.LINEAR
        self.wrap_s = WrapMode.REPEAT
        self.wrap_t = WrapMode.REPEAT

    def set_filter(self, mag_filter: MagFilter, min_filter: MinFilter) -> None:
        self.mag_filter = MagFilter(mag_filter)
        self.min_filter = MinFilter(min_filter)

    def set_wrap_mode(self, wrap_s: WrapMode, wrap_t: WrapMode) -> None:
        self.wrap_s = WrapMode(wrap_s)
        self.wrap_t = WrapMode(wrap_t)

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        result["magFilter"] = int(self.mag_filter)
        result["minFilter"] = int(self.min_filter)
        result["wrapS"] = int(self.wrap_s)
        result["wrapT"] = int(self.wrap_t)
        return result