"""Mouse picking: world-space rays through the cursor and hit tests against objects."""

from __future__ import annotations

import math
from typing import Iterable, NamedTuple, Optional

import numpy as np

from .intersection import ray_intersects_aabb


class Ray(NamedTuple):
    """A world-space ray; ``direction`` has unit length."""

    origin: np.ndarray
    direction: np.ndarray


def cast_ray(camera, mouse_x: float, mouse_y: float, width: int, height: int) -> Ray:
    """Ray from the camera through a cursor position given in top-left window pixels."""
    if width <= 0 or height <= 0:
        raise ValueError("viewport width and height must be positive")

    x = (2.0 * float(mouse_x)) / width - 1.0
    y = 1.0 - (2.0 * float(mouse_y)) / height
    ray_nds = np.array([x, y, -1.0, 1.0])

    ray_eye = np.linalg.inv(camera.projection_matrix()) @ ray_nds
    ray_eye[2] = -1.0
    ray_eye[3] = 0.0

    inv_view = np.linalg.inv(camera.view_matrix())
    ray_world = (inv_view @ ray_eye)[:3]
    direction = ray_world / np.linalg.norm(ray_world)
    origin = inv_view[:3, 3].copy()
    return Ray(origin, direction)


def cast_ray_from_mouse(camera, window) -> Ray:
    """Ray from the camera through the window's current cursor position."""
    mouse_x, mouse_y = window.cursor_pos()
    return cast_ray(camera, mouse_x, mouse_y, window.width, window.height)


def pick(origin, direction, transforms: Iterable) -> Optional[int]:
    """Index of the nearest transform whose unrotated bounding box the ray hits.

    Each box is centred on the transform's position with the transform's scale
    as its edge lengths. Returns None when nothing is hit.
    """
    closest = math.inf
    hit: Optional[int] = None
    for index, transform in enumerate(transforms):
        position = np.asarray(transform.position, dtype=float)
        half = np.asarray(transform.scale, dtype=float) * 0.5
        distance = ray_intersects_aabb(origin, direction, position - half, position + half)
        if distance is not None and distance < closest:
            closest = distance
            hit = index
    return hit