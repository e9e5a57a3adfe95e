"""Perspective and orthographic cameras."""

from __future__ import annotations

from typing import Any

from .element import MainElement, is_empty_json

_DEFAULT_ZFAR = 1000.0
_DEFAULT_ZNEAR = 0.1


class Camera(MainElement):
    """Common clipping range of all camera kinds."""

    def __init__(self, index: int, name: str = "") -> None:
        super().__init__(index, name)
        self.zfar = _DEFAULT_ZFAR
        self.znear = _DEFAULT_ZNEAR

    def set_z_range(self, zfar: float, znear: float) -> None:
        self.zfar = zfar
        self.znear = znear


class PerspectiveCamera(Camera):
    """A camera with a perspective projection."""

    def __init__(self, index: int, name: str = "") -> None:
        super().__init__(index, name)
        self.aspect = 1.0
        self.yfov = 1.0
        self.perspective_extensions: dict[str, Any] = {}
        self.perspective_extras: Any = None

    def set_perspective(self, aspect: float, yfov: float) -> None:
        self.aspect = aspect
        self.yfov = yfov

    def add_perspective_extension(self, prop: str, data: Any) -> None:
        self.perspective_extensions[prop] = data

    def set_perspective_extras(self, data: Any) -> None:
        self.perspective_extras = data

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        result["type"] = "perspective"
        perspective: dict[str, Any] = {
            "aspect": self.aspect,
            "yfov": self.yfov,
            "zfar": self.zfar,
            "znear": self.znear,
        }
        if self.perspective_extensions:
            perspective["extensions"] = dict(self.perspective_extensions)
        if not is_empty_json(self.perspective_extras):
            perspective["extras"] = self.perspective_extras
        result["perspective"] = perspective
        return result


class OrthographicCamera(Camera):
    """A camera with an orthographic projection."""

    def __init__(self, index: int, name: str = "") -> None:
        super().__init__(index, name)
        self.xmag = 1.0
        self.ymag = 1.0
        self.orthographic_extensions: dict[str, Any] = {}
        self.orthographic_extras: Any = None

    def set_orthographic(self, xmag: float, ymag: float) -> None:
        self.xmag = xmag
        self.ymag = ymag

    def add_orthographic_extension(self, prop: str, data: Any) -> None:
        self.orthographic_extensions[prop] = data

    def set_orthographic_extras(self, data: Any) -> None:
        self.orthographic_extras = data

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        result["type"] = "orthographic"
        orthographic: dict[str, Any] = {
            "xmag": self.xmag,
            "ymag": self.ymag,
            "zfar": self.zfar,
            "znear": self.znear,
        }
        if self.orthographic_extensions:
            orthographic["extensions"] = dict(self.orthographic_extensions)
        if not is_empty_json(self.orthographic_extras):
            orthographic["extras"] = self.orthographic_extras
        result["orthographic"] = orthographic
        return result