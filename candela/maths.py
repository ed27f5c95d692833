"""Transform decomposition and hemisphere sampling helpers.

Matrices are 4x4 numpy arrays acting on column vectors (``m @ v``).
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

PHI = 0.5 * (math.sqrt(5.0) + 1.0)
PI = 3.141592653


def _vec(values: Sequence[float]) -> np.ndarray:
    return np.asarray(values, dtype=float)


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def get_rotation_matrix(transform: np.ndarray) -> np.ndarray:
    """Return the rotation part of ``transform`` with scale and translation removed."""
    matrix = np.asarray(transform, dtype=float)
    scale = np.linalg.norm(matrix[:3, :3], axis=0)
    result = np.zeros((4, 4))
    result[:3, :3] = matrix[:3, :3] / scale
    result[3, 3] = matrix[3, 3]
    return result


def _rotated_axis(transform: np.ndarray, axis: Sequence[float]) -> np.ndarray:
    row = np.array([*axis, 1.0])
    return (row @ np.linalg.inv(get_rotation_matrix(transform)))[:3]


def get_forward_vector(transform: np.ndarray) -> np.ndarray:
    """Return the direction the transform maps -Z to."""
    return _rotated_axis(transform, (0.0, 0.0, -1.0))


def get_right_vector(transform: np.ndarray) -> np.ndarray:
    """Return the direction the transform maps +X to."""
    return _rotated_axis(transform, (1.0, 0.0, 0.0))


def get_up_vector(transform: np.ndarray) -> np.ndarray:
    """Return the direction the transform maps +Y to."""
    return _rotated_axis(transform, (0.0, 1.0, 0.0))


def get_position(transform: np.ndarray) -> np.ndarray:
    """Return the translation of ``transform``, weighted by its w component."""
    matrix = np.asarray(transform, dtype=float)
    return matrix[:3, 3] * matrix[3, 3]


def set_position(transform: np.ndarray, position: Sequence[float]) -> np.ndarray:
    """Return a copy of ``transform`` whose translation is ``position``."""
    result = np.array(transform, dtype=float)
    result[:3, 3] = _vec(position) / result[3, 3]
    return result


def fibonacci_lattice(iteration: int, n: int) -> tuple[float, float]:
    """Return point ``iteration`` of an ``n``-point Fibonacci lattice in [0, 1)^2."""
    i = float(iteration)
    return ((i + 0.5) / float(n), (i / PHI) % 1.0)


def _basis(normal: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    bitangent = _normalize(np.cross(normal, np.array([0.0, 1.0, 1.0])))
    tangent = np.cross(bitangent, normal)
    return bitangent, tangent


def sample_hemisphere(normal: Sequence[float], hash_value: Sequence[float]) -> np.ndarray:
    """Map a point of [0, 1)^2 to a unit direction in the hemisphere around ``normal``."""
    n = _vec(normal)
    u, v = float(hash_value[0]), float(hash_value[1])
    r = math.sqrt(1.0 - u * u)
    phi = 2.0 * PI * v
    bitangent, tangent = _basis(n)
    return _normalize(r * math.sin(phi) * bitangent + u * n + r * math.cos(phi) * tangent)


def cosine_hemisphere(normal: Sequence[float], hash_value: Sequence[float]) -> np.ndarray:
    """Map a point of [0, 1)^2 to a cosine-weighted direction around ``normal``."""
    n = _vec(normal)
    u, v = float(hash_value[0]), float(hash_value[1])
    r = math.sqrt(u)
    theta = 2.0 * PI * v
    bitangent, tangent = _basis(n)
    return _normalize(
        r * math.sin(theta) * bitangent
        + math.sqrt(1.0 - u) * n
        + r * math.cos(theta) * tangent
    )