"""Batched 2D quad renderer that builds vertex batches on the CPU."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, replace
from itertools import count

import numpy as np

from hazelcore.transforms import rotation as _rotation_matrix
from hazelcore.transforms import scaling, translation

_renderer_ids = count(1)


class Texture:
    """A 2D texture identified by its renderer id."""

    def __init__(self, width: int, height: int, path: str | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"texture size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.path = path
        self.renderer_id = next(_renderer_ids)
        self.data: bytes | None = None

    def set_data(self, data: bytes) -> None:
        """Replace the RGBA pixel data; it must cover the whole texture."""
        expected = self.width * self.height * 4
        if len(data) != expected:
            raise ValueError(f"data must be {expected} bytes, got {len(data)}")
        self.data = bytes(data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Texture):
            return NotImplemented
        return self.renderer_id == other.renderer_id

    def __hash__(self) -> int:
        return hash(self.renderer_id)

    def __repr__(self) -> str:
        return f"Texture(id={self.renderer_id}, {self.width}x{self.height})"


@dataclass(frozen=True)
class QuadVertex:
    position: tuple[float, float, float]
    color: tuple[float, float, float, float]
    tex_coord: tuple[float, float]
    tex_index: float
    tiling_factor: float
    entity_id: int


@dataclass
class Statistics:
    draw_calls: int = 0
    quad_count: int = 0

    @property
    def total_vertex_count(self) -> int:
        return self.quad_count * 4

    @property
    def total_index_count(self) -> int:
        return self.quad_count * 6


@dataclass(frozen=True)
class Batch:
    """One draw call: the vertices, index count and bound textures."""

    vertices: tuple[QuadVertex, ...]
    index_count: int
    textures: tuple[Texture, ...]
    view_projection: np.ndarray


def quad_indices(quad_count: int) -> np.ndarray:
    """Index buffer for ``quad_count`` quads, two triangles each."""
    if quad_count < 0:
        raise ValueError("quad count must not be negative")
    pattern = np.array([0, 1, 2, 2, 3, 0], dtype=np.uint32)
    offsets = np.arange(quad_count, dtype=np.uint32).repeat(6) * 4
    return np.tile(pattern, quad_count) + offsets


_QUAD_POSITIONS = np.array(
    [
        [-0.5, -0.5, 0.0, 1.0],
        [0.5, -0.5, 0.0, 1.0],
        [0.5, 0.5, 0.0, 1.0],
        [-0.5, 0.5, 0.0, 1.0],
    ]
).T
_TEXTURE_COORDS = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))
_WHITE = (1.0, 1.0, 1.0, 1.0)


def _position3(position) -> np.ndarray:
    pos = np.asarray(position, dtype=float)
    if pos.shape == (2,):
        return np.array([pos[0], pos[1], 0.0])
    if pos.shape == (3,):
        return pos
    raise ValueError(f"position must have 2 or 3 components, got shape {pos.shape}")


def _size_scaling(size) -> np.ndarray:
    width, height = np.asarray(size, dtype=float)
    return scaling((width, height, 1.0))


def _rotated_transform(position, size, degrees: float) -> np.ndarray:
    return (
        translation(_position3(position))
        @ _rotation_matrix(math.radians(degrees), (0.0, 0.0, 1.0))
        @ _size_scaling(size)
    )


class Renderer2D:
    """Collects quads into batches and flushes each batch as one draw call."""

    MAX_QUADS = 20000
    MAX_TEXTURE_SLOTS = 32

    def __init__(
        self,
        max_quads: int = MAX_QUADS,
        max_texture_slots: int = MAX_TEXTURE_SLOTS,
        on_flush: Callable[[Batch], None] | None = None,
    ) -> None:
        if max_quads < 1:
            raise ValueError("max_quads must be at least 1")
        if max_texture_slots < 2:
            raise ValueError("max_texture_slots must be at least 2")
        self.max_quads = int(max_quads)
        self.max_vertices = self.max_quads * 4
        self.max_indices = self.max_quads * 6
        self.max_texture_slots = int(max_texture_slots)
        self.on_flush = on_flush

        self.white_texture = Texture(1, 1)
        self.white_texture.set_data(b"\xff\xff\xff\xff")

        self._view_projection = np.eye(4)
        self._vertices: list[QuadVertex] = []
        self._index_count = 0
        self._texture_slots: list[Texture] = [self.white_texture]
        self._stats = Statistics()

    @property
    def view_projection(self) -> np.ndarray:
        return self._view_projection

    def begin_scene(self, view_projection) -> None:
        matrix = np.array(view_projection, dtype=float)
        if matrix.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {matrix.shape}")
        self._view_projection = matrix
        self._start_batch()

    def end_scene(self) -> Batch | None:
        return self.flush()

    def _start_batch(self) -> None:
        self._vertices = []
        self._index_count = 0
        self._texture_slots = [self.white_texture]

    def flush(self) -> Batch | None:
        """Emit the current batch as a draw call; None when it is empty."""
        if self._index_count == 0:
            return None
        batch = Batch(
            vertices=tuple(self._vertices),
            index_count=self._index_count,
            textures=tuple(self._texture_slots),
            view_projection=self._view_projection.copy(),
        )
        self._stats.draw_calls += 1
        if self.on_flush is not None:
            self.on_flush(batch)
        return batch

    def _next_batch(self) -> None:
        self.flush()
        self._start_batch()

    def _emit_quad(self, transform, color, tex_index: float, tiling_factor: float, entity_id: int) -> None:
        corners = np.asarray(transform, dtype=float) @ _QUAD_POSITIONS
        rgba = tuple(float(c) for c in color)
        if len(rgba) != 4:
            raise ValueError("color must have four components")
        for corner, tex_coord in zip(corners.T, _TEXTURE_COORDS):
            self._vertices.append(
                QuadVertex(
                    position=(float(corner[0]), float(corner[1]), float(corner[2])),
                    color=rgba,
                    tex_coord=tex_coord,
                    tex_index=tex_index,
                    tiling_factor=float(tiling_factor),
                    entity_id=int(entity_id),
                )
            )
        self._index_count += 6
        self._stats.quad_count += 1

    def draw_quad(self, transform, color, entity_id: int = -1) -> None:
        """Draw a flat-coloured unit quad placed by ``transform``."""
        if self._index_count >= self.max_indices:
            self._next_batch()
        self._emit_quad(transform, color, 0.0, 1.0, entity_id)

    def draw_textured_quad(
        self,
        transform,
        texture: Texture,
        tiling_factor: float = 1.0,
        tint_color=_WHITE,
        entity_id: int = -1,
    ) -> None:
        """Draw a textured unit quad placed by ``transform``."""
        if self._index_count >= self.max_indices:
            self._next_batch()

        tex_index = 0.0
        for slot, bound in enumerate(self._texture_slots[1:], start=1):
            if bound == texture:
                tex_index = float(slot)
                break

        if tex_index == 0.0:
            if len(self._texture_slots) >= self.max_texture_slots:
                self._next_batch()
            tex_index = float(len(self._texture_slots))
            self._texture_slots.append(texture)

        self._emit_quad(transform, tint_color, tex_index, tiling_factor, entity_id)

    def draw_quad_at(self, position, size, color) -> None:
        """Draw a quad centred at ``position`` with the given width and height."""
        transform = translation(_position3(position)) @ _size_scaling(size)
        self.draw_quad(transform, color)

    def draw_textured_quad_at(self, position, size, texture: Texture, tiling_factor: float = 1.0, tint_color=_WHITE) -> None:
        transform = translation(_position3(position)) @ _size_scaling(size)
        self.draw_textured_quad(transform, texture, tiling_factor, tint_color)

    def draw_rotated_quad(self, position, size, rotation: float, color) -> None:
        """Draw a quad rotated by ``rotation`` degrees around the Z axis."""
        self.draw_quad(_rotated_transform(position, size, rotation), color)

    def draw_rotated_textured_quad(
        self,
        position,
        size,
        rotation: float,
        texture: Texture,
        tiling_factor: float = 1.0,
        tint_color=_WHITE,
    ) -> None:
        """Draw a textured quad rotated by ``rotation`` degrees around the Z axis."""
        self.draw_textured_quad(
            _rotated_transform(position, size, rotation), texture, tiling_factor, tint_color
        )

    def draw_sprite(self, transform, sprite, entity_id: int) -> None:
        """Draw a sprite component (anything with a ``color``)."""
        self.draw_quad(transform, sprite.color, entity_id)

    def reset_stats(self) -> None:
        self._stats = Statistics()

    @property
    def stats(self) -> Statistics:
        return replace(self._stats)