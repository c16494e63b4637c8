"""Fly-through perspective camera."""

from __future__ import annotations

import math

import numpy as np


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def perspective(fov_y: float, aspect: float, near_clip: float, far_clip: float) -> np.ndarray:
    """Right-handed perspective projection to a -1..1 depth range; fov_y in radians."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must be non-zero")
    if near_clip == far_clip:
        raise ValueError("near and far clip planes must differ")
    tan_half = math.tan(fov_y / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far_clip + near_clip) / (far_clip - near_clip)
    m[3, 2] = -1.0
    m[2, 3] = -(2.0 * far_clip * near_clip) / (far_clip - near_clip)
    return m


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = np.asarray(eye, dtype=float)
    center = np.asarray(center, dtype=float)
    up = np.asarray(up, dtype=float)
    f = _normalize(center - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    m = np.eye(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -np.dot(s, eye)
    m[1, 3] = -np.dot(u, eye)
    m[2, 3] = np.dot(f, eye)
    return m


class Camera:
    """Camera steered by yaw and pitch in degrees, moved along its own axes."""

    def __init__(self, fov_y: float, aspect: float, near_clip: float, far_clip: float) -> None:
        self.yaw = -90.0
        self.pitch = 0.0
        self.movement_speed = 5.0  # units per second
        self.mouse_sensitivity = 0.1  # degrees per pixel
        self.position = np.array([0.0, 0.0, 3.0])
        self.front = np.array([0.0, 0.0, -1.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.right = np.array([1.0, 0.0, 0.0])
        self.world_up = np.array([0.0, 1.0, 0.0])
        self._projection = perspective(math.radians(fov_y), aspect, near_clip, far_clip)
        self._update_vectors()

    def set_perspective(self, fov_y: float, aspect: float, near_clip: float, far_clip: float) -> None:
        """Replace the projection; fov_y is in radians here."""
        self._projection = perspective(fov_y, aspect, near_clip, far_clip)

    def process_keyboard(self, direction, delta_time: float) -> None:
        """Move along front (z), right (x) and up (y) by ``direction``."""
        dx, dy, dz = (float(c) for c in direction)
        velocity = self.movement_speed * delta_time
        self.position = np.asarray(self.position, dtype=float)
        self.position = (
            self.position
            + self.front * dz * velocity
            + self.right * dx * velocity
            + self.up * dy * velocity
        )

    def process_mouse_movement(
        self, delta_x: float, delta_y: float, constrain_pitch: bool = True
    ) -> None:
        """Turn by a mouse offset in pixels, keeping pitch within ±89° if asked."""
        self.yaw += delta_x * self.mouse_sensitivity
        self.pitch += delta_y * self.mouse_sensitivity
        if constrain_pitch:
            self.pitch = min(max(self.pitch, -89.0), 89.0)
        self._update_vectors()

    def view_matrix(self) -> np.ndarray:
        position = np.asarray(self.position, dtype=float)
        return look_at(position, position + self.front, self.up)

    def projection_matrix(self) -> np.ndarray:
        return self._projection.copy()

    def _update_vectors(self) -> None:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        front = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self.front = _normalize(front)
        self.right = _normalize(np.cross(self.front, self.world_up))
        self.up = _normalize(np.cross(self.right, self.front))