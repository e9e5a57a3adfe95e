"""The asset information block of a glTF file."""

from __future__ import annotations

from typing import Any

from .constants import GLTFVersion
from .element import Element

_VERSION_TEXT = {
    GLTFVersion.UNDEFINED: "2.0",
    GLTFVersion.GLTF_1_0: "1.0",
    GLTFVersion.GLTF_2_0: "2.0",
}


class AssetInfo(Element):
    """Version, generator and copyright of an asset."""

    def __init__(self, version: GLTFVersion = GLTFVersion.GLTF_2_0) -> None:
        super().__init__()
        self.version = version
        self.min_version = GLTFVersion.UNDEFINED
        self.copyright = ""
        self.generator = ""

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        result["version"] = _VERSION_TEXT.get(self.version, "2.0")
        if self.copyright:
            result["copyright"] = self.copyright
        if self.generator:
            result["generator"] = self.generator
        if self.min_version != GLTFVersion.UNDEFINED:
            result["minVersion"] = _VERSION_TEXT.get(self.min_version, "2.0")
        return result