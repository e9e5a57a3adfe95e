"""Scenes listing their root nodes."""

from __future__ import annotations

from typing import Any

from .element import MainElement


class Scene(MainElement):
    """A set of root nodes to render."""

    def __init__(self, index: int, name: str = "") -> None:
        super().__init__(index, name)
        self.nodes: list[MainElement] = []

    def add_node(self, node: MainElement) -> None:
        self.nodes.append(node)

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        if self.nodes:
            result["nodes"] = [node.index for node in self.nodes]
        return result