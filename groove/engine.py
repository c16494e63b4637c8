"""The engine: window, input, camera, two spinning cubes and mouse picking."""

from __future__ import annotations

import argparse
import time
from typing import Callable, List, Optional

import numpy as np

from .camera import Camera
from .input import Input
from .logger import logger
from .picker import cast_ray_from_mouse, pick
from .renderer import Renderer
from .transform import Transform
from .window import Overlay, Window

# Key and button codes as pyglet reports them.
KEY_A = ord("a")
KEY_D = ord("d")
KEY_E = ord("e")
KEY_Q = ord("q")
KEY_S = ord("s")
KEY_W = ord("w")
MOUSE_LEFT = 1
MOUSE_RIGHT = 4

WIDTH = 1280
HEIGHT = 720
TITLE = "Groove Engine"


def vec3_to_string(vec) -> str:
    """Format a 3-vector as ``(x, y, z)``."""
    x, y, z = (float(c) for c in vec)
    return f"({x:g}, {y:g}, {z:g})"


def movement_direction(is_pressed: Callable[[int], bool]) -> np.ndarray:
    """Camera-local movement from WASD plus E (up) and Q (down)."""
    direction = np.zeros(3)
    if is_pressed(KEY_W):
        direction[2] += 1.0
    if is_pressed(KEY_S):
        direction[2] -= 1.0
    if is_pressed(KEY_A):
        direction[0] -= 1.0
    if is_pressed(KEY_D):
        direction[0] += 1.0
    if is_pressed(KEY_E):
        direction[1] += 1.0
    if is_pressed(KEY_Q):
        direction[1] -= 1.0
    return direction


def default_transforms() -> List[Transform]:
    """The two cubes of the scene, left and right of the origin."""
    return [
        Transform(position=(-1.5, 0.0, 0.0), rotation=(0.0, 0.0, 0.0)),
        Transform(position=(1.5, 0.0, 0.0), rotation=(0.0, 45.0, 0.0)),
    ]


class Engine:
    """Owns the engine's subsystems and runs the frame loop.

    ``window``, ``renderer``, ``input`` and ``overlay`` may be assigned before
    ``init``, which creates whichever are still missing; ``clock`` and
    ``log_path`` may be changed likewise.
    """

    def __init__(self) -> None:
        self.window = None
        self.renderer = None
        self.input = None
        self.overlay = None
        self.camera: Optional[Camera] = None
        self.transforms: List[Transform] = []
        self.selected: Optional[int] = None
        self.clock: Callable[[], float] = time.perf_counter
        self.log_path: Optional[str] = "Groove.log"

    def init(self) -> None:
        logger.init(self.log_path or "")
        if self.window is None:
            self.window = Window(WIDTH, HEIGHT, TITLE)
        if self.input is None:
            self.input = Input(self.window.native)
        if self.renderer is None:
            self.renderer = Renderer()
        self.camera = Camera(45.0, WIDTH / HEIGHT, 0.1, 100.0)
        self.camera.position = np.array([0.0, 0.0, 3.0])
        if self.overlay is None:
            self.overlay = Overlay(TITLE, "Hello from Groove!")
            self.overlay.top = self.window.height - 10

    def run(self) -> None:
        """Run frames until the window is asked to close."""
        if self.camera is None or self.window is None:
            raise RuntimeError("Engine.init() must be called before run()")
        logger.info("Entering main loop...")

        last_time = self.clock()
        log_timer = last_time
        if not self.transforms:
            self.transforms = default_transforms()

        while not self.window.should_close():
            current_time = self.clock()
            delta_time = current_time - last_time
            last_time = current_time

            camera_active = self._update_camera(delta_time)
            if self.input.is_mouse_button_pressed(MOUSE_LEFT):
                self._pick()

            self.transforms[0].rotation[1] += delta_time * 50.0
            self.transforms[1].rotation[1] -= delta_time * 30.0
            for transform in self.transforms[:2]:
                self.renderer.draw_cube(transform, self.camera)
            self.overlay.draw()

            if current_time - log_timer >= 1.0:
                log_timer = current_time
                self._log_status(camera_active)

            self.window.on_update()

    def _update_camera(self, delta_time: float) -> bool:
        active = self.input.is_mouse_button_pressed(MOUSE_RIGHT)
        if active:
            self.camera.process_keyboard(
                movement_direction(self.input.is_key_pressed), delta_time
            )
            dx, dy = self.input.mouse_delta()
            self.camera.process_mouse_movement(dx, dy)
        else:
            # Consume the delta so the view does not jump when turning resumes.
            self.input.mouse_delta()
        return active

    def _pick(self) -> None:
        origin, direction = cast_ray_from_mouse(self.camera, self.window)
        hit = pick(origin, direction, self.transforms)
        if hit is not None:
            self.selected = hit
            logger.info(f"Clicked object #{hit}")

    def _log_status(self, camera_active: bool) -> None:
        view = self.camera.view_matrix()
        logger.info(
            f"Camera Position: {vec3_to_string(view[:3, 3])}"
            f" | Yaw: {self.camera.yaw:g}"
            f" | Pitch: {self.camera.pitch:g}"
            f" | Camera Active: {'Yes' if camera_active else 'No'}"
        )
        logger.info(f"Cube1 Rotation Y: {self.transforms[0].rotation[1]:g}")
        logger.info(f"Cube2 Rotation Y: {self.transforms[1].rotation[1]:g}")

    def shutdown(self) -> None:
        if self.overlay is not None:
            self.overlay.shutdown()
        if self.renderer is not None:
            self.renderer.shutdown()
        if self.window is not None:
            self.window.close()
        self.camera = None
        logger.info("Shutdown complete.")
        logger.shutdown()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="groove", description="Open the engine window with two spinning cubes."
    )
    parser.parse_args(argv)
    engine = Engine()
    engine.init()
    try:
        engine.run()
    finally:
        engine.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())