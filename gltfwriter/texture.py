"""Textures combining an image source with a sampler."""

from __future__ import annotations

from typing import Any, Optional

from .element import MainElement


class Texture(MainElement):
    """A texture referring to an image and an optional sampler."""

    def __init__(self, index: int, name: str = "") -> None:
        super().__init__(index, name)
        self.image: Optional[MainElement] = None
        self.sampler: Optional[MainElement] = None

    def set_source(self, image: Optional[MainElement], sampler: Optional[MainElement] = None) -> None:
        self.image = image
        self.sampler = sampler

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        if self.image is not None:
            result["source"] = self.image.index
        if self.sampler is not None:
            result["sampler"] = self.sampler.index
        return result