"""Base camera and a 2D orthographic camera."""

from __future__ import annotations

import math

import numpy as np

from hazelcore.transforms import ortho, rotation, translation


class Camera:
    """A camera that only holds a projection matrix."""

    def __init__(self, projection=None) -> None:
        self._projection = np.eye(4) if projection is None else np.array(projection, dtype=float)

    @property
    def projection(self) -> np.ndarray:
        return self._projection


class OrthographicCamera:
    """2D camera with a position and a rotation (degrees) around the Z axis."""

    def __init__(self, left: float, right: float, bottom: float, top: float) -> None:
        self._projection_matrix = ortho(left, right, bottom, top, -1.0, 1.0)
        self._view_matrix = np.eye(4)
        self._position = np.zeros(3)
        self._rotation = 0.0
        self._view_projection_matrix = self._projection_matrix @ self._view_matrix

    def set_projection(self, left: float, right: float, bottom: float, top: float) -> None:
        self._projection_matrix = ortho(left, right, bottom, top, -1.0, 1.0)
        self._view_projection_matrix = self._projection_matrix @ self._view_matrix

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value) -> None:
        self._position = np.array(value, dtype=float)
        self._recalculate_view_matrix()

    @property
    def rotation(self) -> float:
        """Rotation in degrees, anti-clockwise."""
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation = float(value)
        self._recalculate_view_matrix()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection_matrix

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view_matrix

    @property
    def view_projection_matrix(self) -> np.ndarray:
        return self._view_projection_matrix

    def _recalculate_view_matrix(self) -> None:
        transform = translation(self._position) @ rotation(
            math.radians(self._rotation), (0.0, 0.0, 1.0)
        )
        self._view_matrix = np.linalg.inv(transform)
        self._view_projection_matrix = self._projection_matrix @ self._view_matrix