"""Shader data types and the vertex buffer layouts built from them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from enum import IntEnum


class ShaderDataType(IntEnum):
    """Types a vertex attribute can have."""

    NONE = 0
    FLOAT = 1
    FLOAT2 = 2
    FLOAT3 = 3
    FLOAT4 = 4
    MAT3 = 5
    MAT4 = 6
    INT = 7
    INT2 = 8
    INT3 = 9
    INT4 = 10
    BOOL = 11


_SIZES = {
    ShaderDataType.FLOAT: 4,
    ShaderDataType.FLOAT2: 4 * 2,
    ShaderDataType.FLOAT3: 4 * 3,
    ShaderDataType.FLOAT4: 4 * 4,
    ShaderDataType.MAT3: 4 * 3 * 3,
    ShaderDataType.MAT4: 4 * 4 * 4,
    ShaderDataType.INT: 4,
    ShaderDataType.INT2: 4 * 2,
    ShaderDataType.INT3: 4 * 3,
    ShaderDataType.INT4: 4 * 4,
    ShaderDataType.BOOL: 1,
}

_COMPONENT_COUNTS = {
    ShaderDataType.FLOAT: 1,
    ShaderDataType.FLOAT2: 2,
    ShaderDataType.FLOAT3: 3,
    ShaderDataType.FLOAT4: 4,
    ShaderDataType.MAT3: 3,  # 3 * float3
    ShaderDataType.MAT4: 4,  # 4 * float4
    ShaderDataType.INT: 1,
    ShaderDataType.INT2: 2,
    ShaderDataType.INT3: 3,
    ShaderDataType.INT4: 4,
    ShaderDataType.BOOL: 1,
}


def shader_data_type_size(data_type: ShaderDataType) -> int:
    """Size in bytes of one value of ``data_type``."""
    try:
        return _SIZES[ShaderDataType(data_type)]
    except (KeyError, ValueError):
        raise ValueError(f"unknown shader data type: {data_type!r}") from None


@dataclass
class BufferElement:
    """One named attribute in a vertex buffer layout."""

    data_type: ShaderDataType
    name: str
    normalized: bool = False
    size: int = field(init=False)
    offset: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.data_type = ShaderDataType(self.data_type)
        self.size = shader_data_type_size(self.data_type)

    @property
    def component_count(self) -> int:
        """Number of scalar components (matrices count their columns)."""
        try:
            return _COMPONENT_COUNTS[self.data_type]
        except KeyError:
            raise ValueError(f"unknown shader data type: {self.data_type!r}") from None


class BufferLayout:
    """An ordered list of elements with computed offsets and stride."""

    def __init__(self, elements: Iterable[BufferElement] = ()) -> None:
        self._elements: list[BufferElement] = []
        offset = 0
        for element in elements:
            placed = replace(element)
            placed.offset = offset
            offset += placed.size
            self._elements.append(placed)
        self._stride = offset

    @property
    def stride(self) -> int:
        """Total size in bytes of one vertex."""
        return self._stride

    @property
    def elements(self) -> list[BufferElement]:
        return list(self._elements)

    def __iter__(self) -> Iterator[BufferElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)