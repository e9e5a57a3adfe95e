"""Accessors describing typed element data stored in buffer views."""

from __future__ import annotations

import struct
from typing import Any, Iterable, Optional, Sequence, Union

from .buffer import Buffer, BufferView
from .constants import AccessorComponent, AccessorType, BufferViewTarget
from .element import MainElement

Number = Union[int, float]


class Accessor(MainElement):
    """Typed view on buffer data, with element type and component type."""

    def __init__(
        self,
        index: int,
        accessor_type: AccessorType,
        component: AccessorComponent,
        name: str = "",
    ) -> None:
        super().__init__(index, name)
        self.type = AccessorType(accessor_type)
        self.component = AccessorComponent(component)
        self.buffer_view: Optional[BufferView] = None
        self.normalized = False
        self.count = 0
        self.byte_offset = 0
        self.byte_stride = 0
        self.min: list[Number] = []
        self.max: list[Number] = []

    def set_interleaved(self, byte_offset: int, byte_stride: int) -> None:
        """Set offset and stride; an offset requires a stride."""
        if byte_stride == 0 and byte_offset != 0:
            raise ValueError("byte_offset requires a non-zero byte_stride")
        self.byte_offset = byte_offset
        self.byte_stride = byte_stride

    def add_data(
        self, buffer: Buffer, data: Union[bytes, bytearray, memoryview], target: BufferViewTarget
    ) -> None:
        """Copy raw bytes into the buffer and attach the new view."""
        self.buffer_view = buffer.add_data(data)
        self.buffer_view.target = BufferViewTarget(target)

    def allocate_data(
        self, buffer: Buffer, byte_length: int, target: BufferViewTarget
    ) -> memoryview:
        """Reserve space in the buffer and return a writable view on it."""
        self.buffer_view = buffer.allocate(byte_length)
        self.buffer_view.target = BufferViewTarget(target)
        return self.buffer_view.data()

    def _pack(self, values: Iterable[Number]) -> tuple[int, bytes]:
        flat = list(values)
        components = self.type.component_count()
        if len(flat) % components:
            raise ValueError(
                f"{len(flat)} values do not form whole {self.type.name} elements"
            )
        try:
            packed = struct.pack(f"<{len(flat)}{self.component.struct_format()}", *flat)
        except struct.error as exc:
            raise ValueError(f"values do not fit {self.component.name}: {exc}") from exc
        return len(flat) // components, packed

    def add_vertex_data(self, buffer: Buffer, values: Iterable[Number]) -> None:
        """Store flat vertex component values in the buffer."""
        self.count, packed = self._pack(values)
        self.add_data(buffer, packed, BufferViewTarget.ARRAY_BUFFER)

    def add_index_data(self, buffer: Buffer, values: Iterable[Number]) -> None:
        """Store flat index values in the buffer."""
        self.count, packed = self._pack(values)
        self.add_data(buffer, packed, BufferViewTarget.ELEMENT_ARRAY_BUFFER)

    def _byte_length_for(self, element_count: int) -> int:
        return element_count * self.element_byte_size()

    def allocate_vertex_data(self, buffer: Buffer, element_count: int) -> memoryview:
        """Reserve space for vertex elements and return a writable byte view."""
        self.count = element_count
        return self.allocate_data(
            buffer, self._byte_length_for(element_count), BufferViewTarget.ARRAY_BUFFER
        )

    def allocate_index_data(self, buffer: Buffer, element_count: int) -> memoryview:
        """Reserve space for index elements and return a writable byte view."""
        self.count = element_count
        return self.allocate_data(
            buffer, self._byte_length_for(element_count), BufferViewTarget.ELEMENT_ARRAY_BUFFER
        )

    def values(self) -> list[Number]:
        """Decode the stored elements as a flat list of component values."""
        if self.buffer_view is None:
            raise ValueError("accessor has no data")
        total = self.count * self.type.component_count()
        fmt = f"<{total}{self.component.struct_format()}"
        with self.buffer_view.data() as region:
            return list(struct.unpack_from(fmt, region))

    def update_bounds(self, values: Optional[Sequence[Number]] = None) -> None:
        """Compute per-component min and max over the accessor's elements."""
        if values is None:
            if self.buffer_view is None:
                raise ValueError("no data source specified")
            values = self.values()
        flat = list(values)
        components = self.type.component_count()
        needed = self.count * components
        if len(flat) < needed:
            raise ValueError(f"expected at least {needed} values, got {len(flat)}")
        lowest, highest = self.component.lowest(), self.component.highest()
        columns = [flat[j:needed:components] for j in range(components)]
        self.max = [max(column, default=lowest) for column in columns]
        self.min = [min(column, default=highest) for column in columns]

    def data(self) -> Optional[memoryview]:
        """Return the attached view's data, or None without a view."""
        if self.buffer_view is None:
            return None
        return self.buffer_view.data()

    def element_byte_size(self) -> int:
        return self.component.byte_size() * self.type.component_count()

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        result["type"] = self.type.name
        result["count"] = self.count
        if self.buffer_view is not None:
            result["bufferView"] = self.buffer_view.index
        if self.byte_offset > 0:
            result["byteOffset"] = self.byte_offset
        if self.byte_stride > 0:
            result["byteStride"] = self.byte_stride
        if self.normalized:
            result["normalized"] = True
        result["componentType"] = int(self.component)
        if self.min:
            result["min"] = list(self.min)
        if self.max:
            result["max"] = list(self.max)
        return result