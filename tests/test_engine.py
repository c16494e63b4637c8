import numpy as np
import pytest

from groove.engine import (
    KEY_A,
    KEY_D,
    KEY_E,
    KEY_Q,
    KEY_S,
    KEY_W,
    Engine,
    default_transforms,
    movement_direction,
    vec3_to_string,
)


def test_vec3_to_string():
    assert vec3_to_string((1.0, 2.5, -3.0)) == "(1, 2.5, -3)"
    assert vec3_to_string(np.array([0.0, 0.0, 3.0])) == "(0, 0, 3)"


def test_movement_direction_keys():
    pressed = {KEY_W, KEY_D, KEY_E}
    np.testing.assert_array_equal(movement_direction(pressed.__contains__), [1.0, 1.0, 1.0])
    np.testing.assert_array_equal(movement_direction(lambda k: False), [0.0, 0.0, 0.0])


def test_movement_direction_negative_keys():
    pressed = {KEY_S, KEY_A, KEY_Q}
    np.testing.assert_array_equal(movement_direction(pressed.__contains__), [-1.0, -1.0, -1.0])


def test_opposite_keys_cancel():
    pressed = {KEY_W, KEY_S, KEY_E, KEY_Q}
    np.testing.assert_array_equal(movement_direction(pressed.__contains__), [0.0, 0.0, 0.0])


def test_keys_match_letters():
    np.testing.assert_array_equal(
        movement_direction(lambda k: k == ord("w")), [0.0, 0.0, 1.0]
    )
    np.testing.assert_array_equal(
        movement_direction(lambda k: k == ord("a")), [-1.0, 0.0, 0.0]
    )


def test_default_transforms():
    left, right = default_transforms()
    np.testing.assert_array_equal(left.position, [-1.5, 0.0, 0.0])
    np.testing.assert_array_equal(right.position, [1.5, 0.0, 0.0])
    np.testing.assert_array_equal(right.rotation, [0.0, 45.0, 0.0])
    np.testing.assert_array_equal(left.scale, [1.0, 1.0, 1.0])


def test_default_transforms_are_fresh_objects():
    first = default_transforms()
    second = default_transforms()
    first[0].position[0] = 10.0
    assert second[0].position[0] == pytest.approx(-1.5)


def test_run_before_init_fails():
    with pytest.raises(RuntimeError):
        Engine().run()