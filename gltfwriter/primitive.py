"""Mesh primitives: geometry with attributes, indices and a material."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Optional

from .constants import AttributeType, PrimitiveMode
from .element import Element, MainElement


@dataclass(frozen=True)
class Attribute:
    """A vertex attribute bound to an accessor."""

    type: AttributeType
    accessor: MainElement


class Primitive(Element):
    """Geometry to be rendered with a given material."""

    def __init__(
        self,
        mode: PrimitiveMode = PrimitiveMode.TRIANGLES,
        material: Optional[MainElement] = None,
    ) -> None:
        super().__init__()
        self.mode = PrimitiveMode(mode)
        self.material = material
        self.indices: Optional[MainElement] = None
        self.attributes: list[Attribute] = []
        self.targets: list[list[Attribute]] = []

    def set_indices(self, accessor: Optional[MainElement]) -> None:
        self.indices = accessor

    def add_attribute(self, attribute_type: AttributeType, accessor: MainElement) -> None:
        self.attributes.append(Attribute(AttributeType(attribute_type), accessor))

    def add_target_attribute(
        self, index: int, attribute_type: AttributeType, accessor: MainElement
    ) -> None:
        """Add an attribute to the morph target at index, creating targets as needed."""
        if index < 0:
            raise IndexError("target index must not be negative")
        while len(self.targets) <= index:
            self.targets.append([])
        self.targets[index].append(Attribute(AttributeType(attribute_type), accessor))

    def add_positions(self, accessor: MainElement) -> None:
        self.add_attribute(AttributeType.POSITION, accessor)

    def add_normals(self, accessor: MainElement) -> None:
        self.add_attribute(AttributeType.NORMAL, accessor)

    def add_tex_coords(self, accessor: MainElement) -> None:
        self.add_attribute(AttributeType.TEXCOORD_0, accessor)

    def attribute_accessor(self, attribute_type: AttributeType) -> Optional[MainElement]:
        """Return the accessor of the first attribute of the given type."""
        return next(
            (attr.accessor for attr in self.attributes if attr.type == attribute_type), None
        )

    def _clone(self) -> "Primitive":
        clone = copy.copy(self)
        clone.extensions = list(self.extensions)
        clone.attributes = list(self.attributes)
        clone.targets = [list(target) for target in self.targets]
        return clone

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        result["mode"] = int(self.mode)
        if self.attributes:
            result["attributes"] = {
                attr.type.name: attr.accessor.index for attr in self.attributes
            }
        if self.indices is not None:
            result["indices"] = self.indices.index
        if self.material is not None:
            result["material"] = self.material.index
        if self.targets:
            # Targets that were skipped over stay empty and are written as null.
            result["targets"] = [
                {attr.type.name: attr.accessor.index for attr in target} if target else None
                for target in self.targets
            ]
        return result