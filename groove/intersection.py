"""Ray against axis-aligned bounding box test."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np


def ray_intersects_aabb(origin, direction, box_min, box_max) -> Optional[float]:
    """Return the entry distance along the ray into the box, or None on a miss.

    A ray that starts inside the box hits at distance 0.
    """
    origin = np.asarray(origin, dtype=float)
    direction = np.asarray(direction, dtype=float)
    box_min = np.asarray(box_min, dtype=float)
    box_max = np.asarray(box_max, dtype=float)

    t_min = 0.0
    t_max = math.inf
    for o, d, lo, hi in zip(origin, direction, box_min, box_max):
        if d != 0.0:
            t1 = (lo - o) / d
            t2 = (hi - o) / d
            if t1 > t2:
                t1, t2 = t2, t1
            t_min = max(t_min, t1)
            t_max = min(t_max, t2)
            if t_min > t_max:
                return None
        elif o < lo or o > hi:
            return None
    return float(t_min)