"""Base classes shared by all glTF elements and extensions."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any


def is_empty_json(value: Any) -> bool:
    """Return True for null and for empty arrays or objects."""
    if value is None:
        return True
    return isinstance(value, (dict, list, tuple)) and not value


def dump_json(data: Any, indent: int = -1) -> str:
    """Serialize data; a negative indent gives the compact form."""
    if indent < 0:
        return json.dumps(data, separators=(",", ":"), sort_keys=True)
    return json.dumps(data, indent=indent, sort_keys=True)


class Extension(ABC):
    """An extension that can be attached to an element."""

    @abstractmethod
    def name(self) -> str:
        """Return the registered name of the extension."""

    @abstractmethod
    def to_json(self) -> dict[str, Any]:
        """Return the extension's JSON representation."""


class Element:
    """A glTF object that may carry extensions and extras."""

    def __init__(self) -> None:
        self.extensions: list[Extension] = []
        self.extras: Any = None

    def add_extension(self, extension: Extension) -> None:
        self.extensions.append(extension)

    def set_extras(self, extras: Any) -> None:
        self.extras = extras

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.extensions:
            result["extensions"] = {ext.name(): ext.to_json() for ext in self.extensions}
        if not is_empty_json(self.extras):
            result["extras"] = self.extras
        return result

    def to_string(self, indent: int = -1) -> str:
        """Return the JSON text of this element."""
        return dump_json(self.to_json(), indent)


class MainElement(Element):
    """A top-level glTF object addressed by its index in the asset."""

    def __init__(self, index: int, name: str = "") -> None:
        super().__init__()
        self.index = index
        self.name = name

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        if self.name:
            result["name"] = self.name
        return result