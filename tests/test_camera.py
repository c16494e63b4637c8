import math

import numpy as np
import pytest

from groove.camera import Camera, look_at, perspective


@pytest.fixture
def camera():
    return Camera(45.0, 1280.0 / 720.0, 0.1, 100.0)


def test_defaults(camera):
    assert np.allclose(camera.position, [0.0, 0.0, 3.0])
    assert camera.yaw == -90.0
    assert camera.pitch == 0.0
    assert np.allclose(camera.front, [0.0, 0.0, -1.0])


def test_axes_are_orthonormal(camera):
    camera.process_mouse_movement(123.0, -77.0)
    axes = np.stack([camera.front, camera.right, camera.up])
    assert np.allclose(axes @ axes.T, np.eye(3))


def test_keyboard_moves_along_front(camera):
    before = camera.position.copy()
    camera.process_keyboard([0.0, 0.0, 1.0], 0.5)
    expected = before + camera.front * camera.movement_speed * 0.5
    assert np.allclose(camera.position, expected)


def test_keyboard_strafe_and_rise(camera):
    before = camera.position.copy()
    camera.process_keyboard([-1.0, 1.0, 0.0], 2.0)
    step = camera.movement_speed * 2.0
    assert np.allclose(camera.position, before - camera.right * step + camera.up * step)


def test_pitch_is_clamped(camera):
    camera.process_mouse_movement(0.0, 10000.0)
    assert camera.pitch == 89.0
    camera.process_mouse_movement(0.0, -100000.0)
    assert camera.pitch == -89.0


def test_pitch_unconstrained(camera):
    camera.process_mouse_movement(0.0, 10000.0, constrain_pitch=False)
    assert camera.pitch == pytest.approx(10000.0 * camera.mouse_sensitivity)


def test_yaw_follows_mouse(camera):
    camera.process_mouse_movement(50.0, 0.0)
    assert camera.yaw == pytest.approx(-90.0 + 50.0 * camera.mouse_sensitivity)


def test_view_matrix_maps_position_to_origin(camera):
    camera.position = np.array([2.0, -1.0, 4.0])
    camera.process_mouse_movement(200.0, 100.0)
    eye = camera.view_matrix() @ np.append(camera.position, 1.0)
    assert np.allclose(eye, [0.0, 0.0, 0.0, 1.0])


def test_view_matrix_puts_front_on_negative_z(camera):
    camera.process_mouse_movement(-300.0, 50.0)
    target = np.append(camera.position + camera.front, 1.0)
    eye = camera.view_matrix() @ target
    assert np.allclose(eye[:3], [0.0, 0.0, -1.0])


@pytest.mark.parametrize("depth, ndc_z", [(0.1, -1.0), (100.0, 1.0)])
def test_perspective_maps_clip_planes(depth, ndc_z):
    proj = perspective(math.radians(45.0), 16 / 9, 0.1, 100.0)
    clip = proj @ [0.0, 0.0, -depth, 1.0]
    assert clip[2] / clip[3] == pytest.approx(ndc_z)


def test_perspective_rejects_zero_aspect():
    with pytest.raises(ValueError):
        perspective(1.0, 0.0, 0.1, 100.0)


def test_perspective_rejects_equal_planes():
    with pytest.raises(ValueError):
        perspective(1.0, 1.0, 5.0, 5.0)


def test_look_at_is_rigid():
    view = look_at([1.0, 2.0, 3.0], [4.0, 0.0, -1.0], [0.0, 1.0, 0.0])
    r = view[:3, :3]
    assert np.allclose(r @ r.T, np.eye(3))
    assert np.allclose(view @ [1.0, 2.0, 3.0, 1.0], [0.0, 0.0, 0.0, 1.0])


def test_constructor_uses_degrees_set_perspective_radians(camera):
    camera.set_perspective(math.radians(45.0), 1280.0 / 720.0, 0.1, 100.0)
    assert np.allclose(
        camera.projection_matrix(),
        Camera(45.0, 1280.0 / 720.0, 0.1, 100.0).projection_matrix(),
    )


def test_projection_matrix_is_a_copy(camera):
    proj = camera.projection_matrix()
    proj[0, 0] = 0.0
    assert camera.projection_matrix()[0, 0] != 0.0
    assert camera.projection_matrix()[3, 2] == -1.0