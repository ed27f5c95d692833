"""A first-person camera with view and projection matrices.

Matrices are 4x4 numpy arrays acting on column vectors (``m @ v``), using a
right-handed view space and a [-1, 1] clip depth range.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

DRAG = 0.90
MIN_SPEED = 0.001
PITCH_LIMIT = 89.0
_ROTATION_AXIS = (1.0, 0.5, 0.5)


def _vec3(values: Sequence[float]) -> np.ndarray:
    return np.asarray(values, dtype=float).reshape(3).copy()


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def look_at(eye: Sequence[float], center: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """Return a view matrix at ``eye`` looking towards ``center``."""
    eye_v = _vec3(eye)
    f = _normalize(_vec3(center) - eye_v)
    s = _normalize(np.cross(f, _vec3(up)))
    u = np.cross(s, f)
    result = np.identity(4)
    result[0, :3] = s
    result[1, :3] = u
    result[2, :3] = -f
    result[0, 3] = -np.dot(s, eye_v)
    result[1, 3] = -np.dot(u, eye_v)
    result[2, 3] = np.dot(f, eye_v)
    return result


def perspective(fov_radians: float, aspect: float, z_near: float, z_far: float) -> np.ndarray:
    """Return a perspective projection matrix."""
    if aspect == 0.0:
        raise ValueError("aspect must not be zero")
    if z_near == z_far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fov_radians / 2.0)
    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = -(z_far + z_near) / (z_far - z_near)
    result[3, 2] = -1.0
    result[2, 3] = -(2.0 * z_far * z_near) / (z_far - z_near)
    return result


def rotate(matrix: np.ndarray, angle_radians: float, axis: Sequence[float]) -> np.ndarray:
    """Return ``matrix`` followed by a rotation of ``angle_radians`` about ``axis``."""
    a = _normalize(_vec3(axis))
    c = math.cos(angle_radians)
    s = math.sin(angle_radians)
    cross = np.array([[0.0, -a[2], a[1]], [a[2], 0.0, -a[0]], [-a[1], a[0], 0.0]])
    rotation = np.identity(4)
    rotation[:3, :3] = c * np.identity(3) + (1.0 - c) * np.outer(a, a) + s * cross
    return np.asarray(matrix, dtype=float) @ rotation


class FPSCamera:
    """A camera steered by mouse movement, with simple velocity and drag."""

    def __init__(
        self,
        fov: float = 90.0,
        aspect: float = 1.0,
        z_near: float = 0.1,
        z_far: float = 1000.0,
        sensitivity: float = 0.25,
    ) -> None:
        self._fov = float(fov)
        self._aspect = float(aspect)
        self._z_near = float(z_near)
        self._z_far = float(z_far)
        self._rotation = 0.0
        self._position = np.zeros(3)
        self._front = np.array([0.0, 0.0, 1.0])
        self._up = np.array([0.0, 1.0, 0.0])
        self._acceleration = np.zeros(3)
        self._velocity = np.zeros(3)
        self.sensitivity = float(sensitivity)
        self.timestamp = 0.0
        self._first_move = False
        self._prev_mx = 0.0
        self._prev_my = 0.0
        self._yaw = 0.0
        self._pitch = 0.0

        self._view = look_at(self._position, self._front + self._position, self._up)
        self._projection = perspective(math.radians(fov), aspect, z_near, z_far)
        self._view_projection = self._projection @ self._view

    # Read-only state

    @property
    def yaw(self) -> float:
        return self._yaw

    @property
    def pitch(self) -> float:
        return self._pitch

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @property
    def front(self) -> np.ndarray:
        return self._front.copy()

    @property
    def up(self) -> np.ndarray:
        return self._up.copy()

    @property
    def velocity(self) -> np.ndarray:
        return self._velocity.copy()

    @property
    def acceleration(self) -> np.ndarray:
        return self._acceleration.copy()

    @property
    def fov(self) -> float:
        return self._fov

    @property
    def aspect(self) -> float:
        return self._aspect

    @property
    def near_plane(self) -> float:
        return self._z_near

    @property
    def far_plane(self) -> float:
        return self._z_far

    @property
    def rotation(self) -> float:
        return self._rotation

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view.copy()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection.copy()

    @property
    def view_projection(self) -> np.ndarray:
        return self._view_projection.copy()

    @property
    def prev_mouse_coords(self) -> tuple[float, float]:
        return (self._prev_mx, self._prev_my)

    @prev_mouse_coords.setter
    def prev_mouse_coords(self, coords: Sequence[float]) -> None:
        self._prev_mx, self._prev_my = float(coords[0]), float(coords[1])

    # Steering

    def update_on_mouse_movement(self, xpos: float, ypos: float) -> None:
        """Turn the camera by the cursor movement since the previous call."""
        ypos = -ypos
        x_diff = xpos - self._prev_mx
        y_diff = ypos - self._prev_my

        if not self._first_move:
            self._first_move = True
            self._prev_mx = xpos
            self._prev_my = ypos

        x_diff *= self.sensitivity
        y_diff *= self.sensitivity
        self._prev_mx = xpos
        self._prev_my = ypos

        self._yaw += x_diff
        self._pitch = min(PITCH_LIMIT, max(-PITCH_LIMIT, self._pitch + y_diff))

        pitch = math.radians(self._pitch)
        yaw = math.radians(self._yaw)
        self.set_front(
            (math.cos(pitch) * math.cos(yaw), math.sin(pitch), math.cos(pitch) * math.sin(yaw))
        )

    def set_position(self, position: Sequence[float]) -> None:
        self._position = _vec3(position)
        self._recalculate_view()

    def change_position(self, increment: Sequence[float]) -> None:
        self._position = self._position + _vec3(increment)
        self._recalculate_view()

    def set_front(self, front: Sequence[float]) -> None:
        self._front = _vec3(front)
        self._recalculate_view()

    def set_rotation(self, angle: float) -> None:
        """Set the roll angle in degrees."""
        self._rotation = float(angle)
        self._recalculate_view()

    def set_fov(self, fov: float) -> None:
        self._fov = float(fov)
        self._recalculate_projection()

    def set_aspect(self, aspect: float) -> None:
        self._aspect = float(aspect)
        self._recalculate_projection()

    def set_near_and_far_plane(self, z_near: float, z_far: float) -> None:
        self._z_near = float(z_near)
        self._z_far = float(z_far)
        self._recalculate_projection()

    def set_perspective_matrix(
        self, fov: float, aspect: float, z_near: float, z_far: float
    ) -> None:
        self._fov = float(fov)
        self._aspect = float(aspect)
        self._z_near = float(z_near)
        self._z_far = float(z_far)
        self._recalculate_projection()

    def right(self) -> np.ndarray:
        """Return the unit vector to the camera's right."""
        return _normalize(np.cross(self._front, self._up))

    def reset_acceleration(self) -> None:
        self._acceleration = np.zeros(3)

    def reset_velocity(self) -> None:
        self._velocity = np.zeros(3)

    def apply_acceleration(self, acceleration: Sequence[float]) -> None:
        self._acceleration = self._acceleration + _vec3(acceleration)

    def refresh(self) -> None:
        """Recompute the projection and view matrices."""
        self._recalculate_projection()
        self._recalculate_view()

    def on_update(self) -> None:
        """Advance one step: accelerate, apply drag and move."""
        self._velocity = (self._velocity + self._acceleration) * DRAG
        if np.linalg.norm(self._velocity) < MIN_SPEED:
            self._velocity = np.zeros(3)
        self._position = self._position + self._velocity
        self._recalculate_view()

    def _recalculate_view(self) -> None:
        view = look_at(self._position, self._front + self._position, self._up)
        self._view = rotate(view, math.radians(self._rotation), _ROTATION_AXIS)
        self._view_projection = self._projection @ self._view

    def _recalculate_projection(self) -> None:
        self._projection = perspective(
            math.radians(self._fov), self._aspect, self._z_near, self._z_far
        )
        self._view_projection = self._projection @ self._view