import pytest

from groove.intersection import ray_intersects_aabb

BOX_MIN = (-1.0, -1.0, -1.0)
BOX_MAX = (1.0, 1.0, 1.0)


def test_hit_from_outside():
    t = ray_intersects_aabb((-5.0, 0.0, 0.0), (1.0, 0.0, 0.0), BOX_MIN, BOX_MAX)
    assert t == pytest.approx(4.0)


def test_hit_with_negative_direction():
    t = ray_intersects_aabb((0.0, 0.0, 5.0), (0.0, 0.0, -1.0), BOX_MIN, BOX_MAX)
    assert t == pytest.approx(4.0)


def test_origin_inside_hits_at_zero():
    assert ray_intersects_aabb((0.0, 0.0, 0.0), (0.0, 1.0, 0.0), BOX_MIN, BOX_MAX) == 0.0


def test_parallel_ray_outside_slab_misses():
    assert ray_intersects_aabb((-5.0, 3.0, 0.0), (1.0, 0.0, 0.0), BOX_MIN, BOX_MAX) is None


def test_box_behind_ray_misses():
    assert ray_intersects_aabb((5.0, 0.0, 0.0), (1.0, 0.0, 0.0), BOX_MIN, BOX_MAX) is None


def test_diagonal_ray_passing_beside_box_misses():
    assert ray_intersects_aabb((-5.0, 0.0, 0.0), (1.0, 1.0, 0.0), BOX_MIN, BOX_MAX) is None


def test_hit_point_lies_on_box_surface():
    origin = (-4.0, 0.3, -6.0)
    direction = (0.5, 0.0, 1.0)
    t = ray_intersects_aabb(origin, direction, BOX_MIN, BOX_MAX)
    point = [o + t * d for o, d in zip(origin, direction)]
    assert all(lo - 1e-9 <= p <= hi + 1e-9 for p, lo, hi in zip(point, BOX_MIN, BOX_MAX))
    assert any(abs(abs(p) - 1.0) < 1e-9 for p in point)