# groove

A small 3D engine built on OpenGL through pyglet. It opens a window with two
spinning cubes. You can fly a camera around them and click a cube to pick it.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

Running the engine needs a display and an OpenGL 4.5 capable driver. The
math modules work without either.

## Run the sandbox

```
groove
```

This opens a 1280×720 window called "Groove Engine". It takes no options
besides `--help`.

- Hold the **right mouse button** to control the camera. While it is held,
  **W/S** move forward and back, **A/D** move sideways, **E/Q** move up and
  down, and moving the mouse turns the camera. Pitch is kept within ±89°.
- Hold the **left mouse button** to pick a cube. The index of the nearest
  cube under the cursor is logged as `Clicked object #<index>`. The test uses
  each cube's unrotated bounding box.
- The top-left corner shows a text panel titled "Groove Engine".

Once a second the engine logs the camera position, yaw and pitch, and
whether the camera is active. It also logs the Y rotation of each cube. Log
lines go to the console and to `Groove.log` in the working directory. That
file is truncated at start-up.

## Using the pieces

The math parts need no window and no OpenGL context:

```python
import numpy as np
from groove.camera import Camera
from groove.transform import Transform
from groove.intersection import ray_intersects_aabb
from groove.picker import cast_ray, pick

camera = Camera(45.0, 1280 / 720, 0.1, 100.0)      # fov in degrees
camera.process_mouse_movement(100.0, 0.0, True)    # 10 degrees more yaw
camera.process_keyboard(np.array([0.0, 0.0, 1.0]), 0.5)  # forward for 0.5 s

cubes = [Transform(position=(-1.5, 0, 0)), Transform(position=(1.5, 0, 0))]
origin, direction = cast_ray(camera, 640, 360, 1280, 720)
hit = pick(origin, direction, cubes)               # index or None

distance = ray_intersects_aabb((0, 0, 5), (0, 0, -1), (-1, -1, -1), (1, 1, 1))
```

### `groove.transform`

- `Transform` holds `position`, `rotation` (Euler angles in degrees) and
  `scale`.
- `Transform.matrix()` returns the model matrix, computed as
  translate · rotate · scale.
- The helpers `translation_matrix`, `scale_matrix` and `euler_angle_yxz`
  build 4×4 numpy matrices. `euler_angle_yxz` takes its angles in radians.

### `groove.camera`

- `Camera` is a yaw/pitch fly camera. It starts at `(0, 0, 3)` looking
  down −Z.
- It has `process_keyboard`, `process_mouse_movement`, `set_perspective`,
  `view_matrix()` and `projection_matrix()`.
- `set_perspective` takes its field of view in radians. The constructor
  takes degrees.
- `perspective` and `look_at` build right-handed matrices. `perspective`
  raises `ValueError` for a zero aspect ratio or equal clip planes.

### `groove.intersection`

- `ray_intersects_aabb` returns the entry distance along a ray into an
  axis-aligned box, or `None` on a miss.
- A ray that starts inside the box gives `0.0`.

### `groove.picker`

- `cast_ray` turns a cursor position into a world-space `Ray`, a named tuple
  of `origin` and unit `direction`. The position is in pixels from the
  top-left corner.
- `cast_ray_from_mouse` does the same with the cursor of a `Window`.
- `pick` returns the index of the nearest transform hit.

### `groove.timestep`

- `TimeStep` wraps a frame time in seconds.
- It has `seconds` and `milliseconds` and converts with `float()`.

### `groove.logger`

- `Logger` writes `[INFO]`, `[WARNING]`, `[ERROR]` and `[DEBUG]` lines to a
  stream, coloured when the stream is a terminal.
- After `init(path)` it mirrors them to a file, and `shutdown()` closes that
  file.
- The module-level `logger` is shared by the engine.
- `log_matrices` logs a model, view and projection matrix.

### `groove.input`

- `Input` collects key, mouse button and cursor state from pyglet window
  events.
- It has `is_key_pressed`, `is_mouse_button_pressed`, `mouse_position()` and
  `mouse_delta()`.

### `groove.renderer`

- `Shader` compiles and links a vertex and fragment program and sets
  uniforms. Compile or link failures raise `ShaderError`.
- `Renderer` draws a solid cube for a transform and camera.
- `set_camera_perspective` gives a camera a 45° view.
- Both classes offer `with_backend` so their graphics calls can go through
  another object.

### `groove.window`

- `Window` wraps a pyglet window and tracks the cursor.
- `Overlay` draws a title and a line of text over the scene.

### `groove.engine`

- `Engine` runs the main loop: `init()`, `run()`, `shutdown()`.
- `main` is the `groove` command.

## What it does not do

- There is no scene file, asset loading or lighting. The scene is always the
  two cubes from `default_transforms()`, drawn in one solid colour.
- Picking only logs the index and stores it in `Engine.selected`. A picked
  cube is not highlighted or moved.
- The overlay is fixed text. It is not an interactive GUI panel.
- The window has a fixed size, and the projection is not updated on resize.