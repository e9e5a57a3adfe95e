"""Animations."""

from __future__ import annotations

from typing import Any

from .element import MainElement


class Animation(MainElement):
    """An animation; carries only its name, extensions and extras."""

    def to_json(self) -> dict[str, Any]:
        return super().to_json()