"""Enumerations for glTF 2.0 properties."""

from __future__ import annotations

from enum import IntEnum

_FLOAT32_MAX = 3.4028234663852886e38


class GLTFVersion(IntEnum):
    UNDEFINED = 0
    GLTF_1_0 = 1
    GLTF_2_0 = 2

    def label(self) -> str:
        """Return the version text as written in the asset."""
        return _VERSION_LABELS[self]


_VERSION_LABELS = {
    GLTFVersion.UNDEFINED: "UNDEFINED",
    GLTFVersion.GLTF_1_0: "1.0",
    GLTFVersion.GLTF_2_0: "2.0",
}


class BufferViewTarget(IntEnum):
    UNDEFINED = 0x0000
    ARRAY_BUFFER = 0x8892
    ELEMENT_ARRAY_BUFFER = 0x8893


class AccessorType(IntEnum):
    SCALAR = 0
    VEC2 = 1
    VEC3 = 2
    VEC4 = 3
    MAT2 = 4
    MAT3 = 5
    MAT4 = 6

    def component_count(self) -> int:
        """Number of components in one element of this type."""
        return _COMPONENT_COUNTS[self]


_COMPONENT_COUNTS = {
    AccessorType.SCALAR: 1,
    AccessorType.VEC2: 2,
    AccessorType.VEC3: 3,
    AccessorType.VEC4: 4,
    AccessorType.MAT2: 4,
    AccessorType.MAT3: 9,
    AccessorType.MAT4: 16,
}


class AccessorComponent(IntEnum):
    BYTE = 0x1400
    UNSIGNED_BYTE = 0x1401
    SHORT = 0x1402
    UNSIGNED_SHORT = 0x1403
    INT = 0x1404
    UNSIGNED_INT = 0x1405
    FLOAT = 0x1406

    def byte_size(self) -> int:
        """Size of one component in bytes."""
        return _COMPONENT_INFO[self][1]

    def struct_format(self) -> str:
        """Format character for the struct module."""
        return _COMPONENT_INFO[self][0]

    def lowest(self) -> float | int:
        """Lowest finite value of the component type."""
        return _COMPONENT_INFO[self][2]

    def highest(self) -> float | int:
        """Highest finite value of the component type."""
        return _COMPONENT_INFO[self][3]


_COMPONENT_INFO = {
    AccessorComponent.BYTE: ("b", 1, -(2**7), 2**7 - 1),
    AccessorComponent.UNSIGNED_BYTE: ("B", 1, 0, 2**8 - 1),
    AccessorComponent.SHORT: ("h", 2, -(2**15), 2**15 - 1),
    AccessorComponent.UNSIGNED_SHORT: ("H", 2, 0, 2**16 - 1),
    AccessorComponent.INT: ("i", 4, -(2**31), 2**31 - 1),
    AccessorComponent.UNSIGNED_INT: ("I", 4, 0, 2**32 - 1),
    AccessorComponent.FLOAT: ("f", 4, -_FLOAT32_MAX, _FLOAT32_MAX),
}


class AttributeType(IntEnum):
    POSITION = 0
    NORMAL = 1
    TANGENT = 2
    TEXCOORD_0 = 3
    TEXCOORD_1 = 4
    COLOR_0 = 5
    JOINTS_0 = 6
    WEIGHTS_0 = 7


class PrimitiveMode(IntEnum):
    POINTS = 0
    LINES = 1
    LINE_LOOP = 2
    LINE_STRIP = 3
    TRIANGLES = 4
    TRIANGLE_STRIP = 5
    TRIANGLE_FAN = 6


class MagFilter(IntEnum):
    NEAREST = 9728
    LINEAR = 9729


class MinFilter(IntEnum):
    NEAREST = 9728
    LINEAR = 9729
    NEAREST_MIPMAP_NEAREST = 9984
    LINEAR_MIPMAP_NEAREST = 9985
    NEAREST_MIPMAP_LINEAR = 9986
    LINEAR_MIPMAP_LINEAR = 9987


class WrapMode(IntEnum):
    REPEAT = 10497
    CLAMP_TO_EDGE = 33071
    MIRRORED_REPEAT = 33648


class MimeType(IntEnum):
    IMAGE_JPEG = 0
    IMAGE_PNG = 1

    def mime(self) -> str:
        """Return the MIME type string."""
        return "image/png" if self is MimeType.IMAGE_PNG else "image/jpeg"


class AlphaMode(IntEnum):
    OPAQUE = 0
    MASK = 1
    BLEND = 2