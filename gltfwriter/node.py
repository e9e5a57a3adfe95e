"""Scene graph nodes and their mesh, camera and skin variants."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from .element import MainElement


def _vector(values: Sequence[float], size: int, what: str) -> tuple[float, ...]:
    result = tuple(values)
    if len(result) != size:
        raise ValueError(f"{what} needs {size} values, got {len(result)}")
    return result


class Node(MainElement):
    """A node with children and a transform given as matrix or TRS."""

    def __init__(self, index: int, name: str = "") -> None:
        super().__init__(index, name)
        self.children: list[MainElement] = []
        self.matrix: Optional[tuple[float, ...]] = None
        self.translation: Optional[tuple[float, ...]] = None
        self.rotation: Optional[tuple[float, ...]] = None
        self.scale: Optional[tuple[float, ...]] = None

    def add_child(self, node: MainElement) -> None:
        self.children.append(node)

    def set_matrix(self, matrix: Sequence[float]) -> None:
        """Set a 16-value transform matrix, replacing any TRS values."""
        self.matrix = _vector(matrix, 16, "matrix")
        self.translation = None
        self.rotation = None
        self.scale = None

    def set_translation(self, translation: Sequence[float]) -> None:
        self.matrix = None
        self.translation = _vector(translation, 3, "translation")

    def set_rotation(self, rotation: Sequence[float]) -> None:
        """Set a rotation quaternion given as x, y, z, w."""
        self.matrix = None
        self.rotation = _vector(rotation, 4, "rotation")

    def set_scale(self, scale: Sequence[float]) -> None:
        self.matrix = None
        self.scale = _vector(scale, 3, "scale")

    def set_trs(
        self,
        translation: Sequence[float],
        rotation: Sequence[float],
        scale: Sequence[float],
    ) -> None:
        translation = _vector(translation, 3, "translation")
        rotation = _vector(rotation, 4, "rotation")
        scale = _vector(scale, 3, "scale")
        self.matrix = None
        self.translation = translation
        self.rotation = rotation
        self.scale = scale

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        if self.children:
            result["children"] = [child.index for child in self.children]
        if self.matrix is not None:
            result["matrix"] = list(self.matrix)
        else:
            if self.translation is not None:
                result["translation"] = list(self.translation)
            if self.rotation is not None:
                result["rotation"] = list(self.rotation)
            if self.scale is not None:
                result["scale"] = list(self.scale)
        return result


class MeshNode(Node):
    """A node that instantiates a mesh."""

    def __init__(self, index: int, mesh: MainElement, name: str = "") -> None:
        super().__init__(index, name)
        self.mesh = mesh

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        result["mesh"] = self.mesh.index
        return result


class CameraNode(Node):
    """A node that places a camera."""

    def __init__(self, index: int, camera: MainElement, name: str = "") -> None:
        super().__init__(index, name)
        self.camera = camera

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        result["camera"] = self.camera.index
        return result


class SkinNode(Node):
    """A node that refers to a skin."""

    def __init__(self, index: int, skin: MainElement, name: str = "") -> None:
        super().__init__(index, name)
        self.skin = skin

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        result["skin"] = self.skin.index
        return result