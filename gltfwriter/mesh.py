"""Meshes made of primitives."""

from __future__ import annotations

from typing import Any, Optional

from .constants import PrimitiveMode
from .element import MainElement
from .primitive import Primitive


class Mesh(MainElement):
    """A set of primitives with optional morph target weights."""

    def __init__(self, index: int, name: str = "") -> None:
        super().__init__(index, name)
        self.primitives: list[Primitive] = []
        self.weights: list[float] = []

    def add_primitive(self, primitive: Primitive) -> None:
        """Add a copy of the given primitive to the mesh."""
        self.primitives.append(primitive._clone())

    def create_primitive(
        self,
        mode: PrimitiveMode = PrimitiveMode.TRIANGLES,
        material: Optional[MainElement] = None,
    ) -> Primitive:
        """Create a primitive in this mesh and return it."""
        primitive = Primitive(mode, material)
        self.primitives.append(primitive)
        return primitive

    def add_weight(self, weight: float) -> None:
        self.weights.append(weight)

    def set_material(self, material: Optional[MainElement]) -> None:
        """Use the given material for all primitives of the mesh."""
        for primitive in self.primitives:
            primitive.material = material

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        result["primitives"] = [primitive.to_json() for primitive in self.primitives]
        if self.weights:
            result["weights"] = list(self.weights)
        return result