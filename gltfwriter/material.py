"""Materials using the metallic-roughness model."""

from __future__ import annotations

import copy
from typing import Any, Optional, Sequence

from .constants import AlphaMode
from .element import Element, MainElement
from .texture_info import NormalTextureInfo, OcclusionTextureInfo, TextureInfo

_DEFAULT_BASE_COLOR_FACTOR = (1.0, 1.0, 1.0, 1.0)
_DEFAULT_EMISSIVE_FACTOR = (0.0, 0.0, 0.0)
_DEFAULT_ALPHA_CUTOFF = 0.5


class PBRMetallicRoughness(Element):
    """Base color, metalness and roughness of a material."""

    def __init__(self) -> None:
        super().__init__()
        self.base_color_factor: Sequence[float] = _DEFAULT_BASE_COLOR_FACTOR
        self.base_color_texture = TextureInfo()
        self.metallic_factor = 1.0
        self.roughness_factor = 1.0
        self.metallic_roughness_texture = TextureInfo()

    def set_base_color_texture(self, texture: Optional[MainElement], tex_coord: int = 0) -> None:
        self.base_color_texture.set(texture, tex_coord)

    def set_metallic_roughness_texture(
        self, texture: Optional[MainElement], tex_coord: int = 0
    ) -> None:
        self.metallic_roughness_texture.set(texture, tex_coord)

    def _clone(self) -> "PBRMetallicRoughness":
        clone = copy.copy(self)
        clone.extensions = list(self.extensions)
        clone.base_color_factor = tuple(self.base_color_factor)
        clone.base_color_texture = copy.copy(self.base_color_texture)
        clone.metallic_roughness_texture = copy.copy(self.metallic_roughness_texture)
        return clone

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        if tuple(self.base_color_factor) != _DEFAULT_BASE_COLOR_FACTOR:
            result["baseColorFactor"] = list(self.base_color_factor)
        if self.base_color_texture.texture is not None:
            result["baseColorTexture"] = self.base_color_texture.to_json()
        if self.metallic_factor != 1.0:
            result["metallicFactor"] = self.metallic_factor
        if self.roughness_factor != 1.0:
            result["roughnessFactor"] = self.roughness_factor
        if self.metallic_roughness_texture.texture is not None:
            result["metallicRoughnessTexture"] = self.metallic_roughness_texture.to_json()
        return result


class Material(MainElement):
    """Surface appearance of a mesh primitive."""

    def __init__(self, index: int, name: str = "") -> None:
        super().__init__(index, name)
        self.pbr: Optional[PBRMetallicRoughness] = None
        self.normal_texture = NormalTextureInfo()
        self.occlusion_texture = OcclusionTextureInfo()
        self.emissive_texture = TextureInfo()
        self.emissive_factor: Sequence[float] = _DEFAULT_EMISSIVE_FACTOR
        self.alpha_mode = AlphaMode.OPAQUE
        self.alpha_cutoff = _DEFAULT_ALPHA_CUTOFF
        self.double_sided = False

    def set_pbr_metallic_roughness(self, pbr: PBRMetallicRoughness) -> None:
        """Store a copy of the given metallic-roughness settings."""
        self.pbr = pbr._clone()

    def set_normal_texture(
        self, texture: Optional[MainElement], tex_coord: int = 0, scale: float = 1.0
    ) -> None:
        self.normal_texture.set(texture, tex_coord, scale)

    def set_occlusion_texture(
        self, texture: Optional[MainElement], tex_coord: int = 0, strength: float = 1.0
    ) -> None:
        self.occlusion_texture.set(texture, tex_coord, strength)

    def set_emissive_texture(self, texture: Optional[MainElement], tex_coord: int = 0) -> None:
        self.emissive_texture.set(texture, tex_coord)

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        if self.pbr is not None:
            result["pbrMetallicRoughness"] = self.pbr.to_json()
        if self.normal_texture.texture is not None:
            result["normalTexture"] = self.normal_texture.to_json()
        if self.occlusion_texture.texture is not None:
            result["occlusionTexture"] = self.occlusion_texture.to_json()
        if self.emissive_texture.texture is not None:
            result["emissiveTexture"] = self.emissive_texture.to_json()
        if tuple(self.emissive_factor) != _DEFAULT_EMISSIVE_FACTOR:
            result["emissiveFactor"] = list(self.emissive_factor)
        mode = AlphaMode(self.alpha_mode)
        if mode != AlphaMode.OPAQUE:
            result["alphaMode"] = mode.name
        if self.alpha_cutoff != _DEFAULT_ALPHA_CUTOFF:
            result["alphaCutoff"] = self.alpha_cutoff
        if self.double_sided:
            result["doubleSided"] = True
        return result