"""The KHR_draco_mesh_compression primitive extension."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .constants import AttributeType
from .element import Extension, MainElement


@dataclass(frozen=True)
class DracoAttribute:
    """Maps a glTF attribute to its index in the Draco stream."""

    type: AttributeType
    index: int


class DracoExtension(Extension):
    """Describes Draco-compressed primitive data."""

    def __init__(self) -> None:
        self.buffer_view: Optional[MainElement] = None
        self.attributes: list[DracoAttribute] = []

    def set_encoded_buffer_view(self, buffer_view: MainElement) -> None:
        self.buffer_view = buffer_view

    def add_attribute(self, attribute_type: AttributeType, draco_index: int) -> None:
        self.attributes.append(DracoAttribute(AttributeType(attribute_type), draco_index))

    def name(self) -> str:
        return "KHR_draco_mesh_compression"

    def to_json(self) -> dict[str, Any]:
        if self.buffer_view is None:
            raise ValueError("DracoExtension: encoded buffer view not set")
        result: dict[str, Any] = {"bufferView": self.buffer_view.index}
        if self.attributes:
            result["attributes"] = {attr.type.name: attr.index for attr in self.attributes}
        return result