"""Position, rotation and scale of an object and the matrices built from them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np


def translation_matrix(offset) -> np.ndarray:
    """4x4 matrix that moves points by ``offset``."""
    m = np.eye(4)
    m[:3, 3] = np.asarray(offset, dtype=float)
    return m


def scale_matrix(factors) -> np.ndarray:
    """4x4 matrix that scales each axis by the matching factor."""
    m = np.eye(4)
    m[0, 0], m[1, 1], m[2, 2] = np.asarray(factors, dtype=float)
    return m


def euler_angle_yxz(yaw: float, pitch: float, roll: float) -> np.ndarray:
    """Rotation about Y, then X, then Z (angles in radians): Ry * Rx * Rz."""
    cy, sy = math.cos(yaw), math.sin(yaw)
    cx, sx = math.cos(pitch), math.sin(pitch)
    cz, sz = math.cos(roll), math.sin(roll)
    ry = np.array([[cy, 0, sy, 0], [0, 1, 0, 0], [-sy, 0, cy, 0], [0, 0, 0, 1]], float)
    rx = np.array([[1, 0, 0, 0], [0, cx, -sx, 0], [0, sx, cx, 0], [0, 0, 0, 1]], float)
    rz = np.array([[cz, -sz, 0, 0], [sz, cz, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]], float)
    return ry @ rx @ rz


def _vec3(value: float) -> np.ndarray:
    return np.full(3, value, dtype=float)


@dataclass
class Transform:
    """Placement of an object; rotation holds Euler angles in degrees."""

    position: np.ndarray = field(default_factory=lambda: _vec3(0.0))
    rotation: np.ndarray = field(default_factory=lambda: _vec3(0.0))
    scale: np.ndarray = field(default_factory=lambda: _vec3(1.0))

    def __post_init__(self) -> None:
        self.position = np.array(self.position, dtype=float)
        self.rotation = np.array(self.rotation, dtype=float)
        self.scale = np.array(self.scale, dtype=float)

    def matrix(self) -> np.ndarray:
        """Model matrix: translate * rotate * scale."""
        rx, ry, rz = (math.radians(a) for a in self.rotation)
        rotate = euler_angle_yxz(ry, rx, rz)
        return translation_matrix(self.position) @ rotate @ scale_matrix(self.scale)