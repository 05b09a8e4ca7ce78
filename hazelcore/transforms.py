"""4x4 transform helpers and transform decomposition.

Matrices are numpy arrays indexed ``[row, column]`` acting on column vectors,
so a point ``p`` is transformed as ``matrix @ p``. Quaternions are arrays
ordered ``(w, x, y, z)``.
"""

from __future__ import annotations

import math

import numpy as np

_EPSILON = float(np.finfo(np.float32).eps)


def _vec3(value) -> np.ndarray:
    vec = np.asarray(value, dtype=float)
    if vec.shape != (3,):
        raise ValueError(f"expected three components, got shape {vec.shape}")
    return vec


def _quat(value) -> np.ndarray:
    q = np.asarray(value, dtype=float)
    if q.shape != (4,):
        raise ValueError(f"expected a quaternion (w, x, y, z), got shape {q.shape}")
    return q


def identity() -> np.ndarray:
    return np.eye(4)


def translation(offset) -> np.ndarray:
    matrix = np.eye(4)
    matrix[:3, 3] = _vec3(offset)
    return matrix


def rotation(angle: float, axis) -> np.ndarray:
    """Rotation of ``angle`` radians around ``axis`` (normalised here)."""
    direction = _vec3(axis)
    length = np.linalg.norm(direction)
    if length == 0:
        raise ValueError("rotation axis must be non-zero")
    x, y, z = direction / length
    c, s = math.cos(angle), math.sin(angle)
    cross = np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])
    unit = np.array([x, y, z])
    matrix = np.eye(4)
    matrix[:3, :3] = c * np.eye(3) + (1.0 - c) * np.outer(unit, unit) + s * cross
    return matrix


def scaling(factors) -> np.ndarray:
    return np.diag([*_vec3(factors), 1.0])


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection with clip depth in [-1, 1]."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[3, 2] = -1.0
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    return matrix


def ortho(left: float, right: float, bottom: float, top: float, near: float, far: float) -> np.ndarray:
    """Right-handed orthographic projection with clip depth in [-1, 1]."""
    if left == right or bottom == top or near == far:
        raise ValueError("orthographic bounds must not be degenerate")
    matrix = np.eye(4)
    matrix[0, 0] = 2.0 / (right - left)
    matrix[1, 1] = 2.0 / (top - bottom)
    matrix[2, 2] = -2.0 / (far - near)
    matrix[0, 3] = -(right + left) / (right - left)
    matrix[1, 3] = -(top + bottom) / (top - bottom)
    matrix[2, 3] = -(far + near) / (far - near)
    return matrix


def quat_from_euler(angles) -> np.ndarray:
    """Quaternion for Euler angles (pitch, yaw, roll) in radians, applied X then Y then Z."""
    half = _vec3(angles) * 0.5
    cx, cy, cz = np.cos(half)
    sx, sy, sz = np.sin(half)
    return np.array([
        cx * cy * cz + sx * sy * sz,
        sx * cy * cz - cx * sy * sz,
        cx * sy * cz + sx * cy * sz,
        cx * cy * sz - sx * sy * cz,
    ])


def quat_to_mat4(q) -> np.ndarray:
    w, x, y, z = _quat(q)
    matrix = np.eye(4)
    matrix[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ]
    return matrix


def quat_rotate(q, v) -> np.ndarray:
    """Rotate vector ``v`` by quaternion ``q``."""
    w, *xyz = _quat(q)
    axis = np.array(xyz)
    vec = _vec3(v)
    uv = np.cross(axis, vec)
    uuv = np.cross(axis, uv)
    return vec + 2.0 * (w * uv + uuv)


def decompose_transform(transform) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Split a transform into (translation, euler rotation, scale).

    Any perspective part is discarded. Raises ValueError when the
    homogeneous scale (bottom-right element) is zero.
    """
    local = np.array(transform, dtype=float)
    if local.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {local.shape}")

    if abs(local[3, 3]) < _EPSILON:
        raise ValueError("cannot decompose a transform whose homogeneous scale is zero")

    if np.any(np.abs(local[3, :3]) >= _EPSILON):
        local[3, :3] = 0.0
        local[3, 3] = 1.0

    offset = local[:3, 3].copy()
    local[:3, 3] = 0.0

    axes = [local[:3, column].copy() for column in range(3)]
    scale = np.array([np.linalg.norm(axis) for axis in axes])
    with np.errstate(divide="ignore", invalid="ignore"):
        axes = [axis / length for axis, length in zip(axes, scale)]

    ry = math.asin(float(np.clip(-axes[0][2], -1.0, 1.0)))
    if math.cos(ry) != 0:
        rx = math.atan2(axes[1][2], axes[2][2])
        rz = math.atan2(axes[0][1], axes[0][0])
    else:
        rx = math.atan2(-axes[2][0], axes[1][1])
        rz = 0.0

    return offset, np.array([rx, ry, rz]), scale