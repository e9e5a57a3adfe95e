"""References from materials to textures."""

from __future__ import annotations

from typing import Any, Optional

from .element import Element, MainElement


class TextureInfo(Element):
    """A texture reference with a texture coordinate set."""

    def __init__(self, texture: Optional[MainElement] = None, tex_coord: int = 0) -> None:
        super().__init__()
        self.texture = texture
        self.tex_coord = tex_coord

    def set(self, texture: Optional[MainElement], tex_coord: int = 0) -> None:
        self.texture = texture
        self.tex_coord = tex_coord

    def to_json(self) -> dict[str, Any]:
        if self.texture is None:
            raise ValueError("TextureInfo: texture not set")
        result = super().to_json()
        result["index"] = self.texture.index
        if self.tex_coord != 0:
            result["texCoord"] = self.tex_coord
        return result


class NormalTextureInfo(TextureInfo):
    """A normal map reference with a scale."""

    def __init__(
        self, texture: Optional[MainElement] = None, tex_coord: int = 0, scale: float = 1.0
    ) -> None:
        super().__init__(texture, tex_coord)
        self.scale = scale

    def set(self, texture: Optional[MainElement], tex_coord: int = 0, scale: float = 1.0) -> None:
        super().set(texture, tex_coord)
        self.scale = scale

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        if self.scale != 1.0:
            result["scale"] = self.scale
        return result


class OcclusionTextureInfo(TextureInfo):
    """An occlusion map reference with a strength."""

    def __init__(
        self, texture: Optional[MainElement] = None, tex_coord: int = 0, strength: float = 1.0
    ) -> None:
        super().__init__(texture, tex_coord)
        self.strength = strength

    def set(
        self, texture: Optional[MainElement], tex_coord: int = 0, strength: float = 1.0
    ) -> None:
        super().set(texture, tex_coord)
        self.strength = strength

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        if self.strength != 1.0:
            result["strength"] = self.strength
        return result