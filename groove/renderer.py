"""Shader programs and a renderer that draws unit cubes."""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

import numpy as np

from .logger import logger

CUBE_VERTICES: Tuple[float, ...] = (
    -0.5, -0.5, -0.5,   0.5, -0.5, -0.5,   0.5, 0.5, -0.5,  -0.5, 0.5, -0.5,
    -0.5, -0.5, 0.5,    0.5, -0.5, 0.5,    0.5, 0.5, 0.5,   -0.5, 0.5, 0.5,
)

CUBE_INDICES: Tuple[int, ...] = (
    0, 1, 2, 2, 3, 0,  # back
    4, 5, 6, 6, 7, 4,  # front
    4, 5, 1, 1, 0, 4,  # bottom
    6, 7, 3, 3, 2, 6,  # top
    4, 0, 3, 3, 7, 4,  # left
    1, 5, 6, 6, 2, 1,  # right
)

VERTEX_SOURCE = """#version 450 core
layout(location = 0) in vec3 aPos;

uniform mat4 u_Model;
uniform mat4 u_View;
uniform mat4 u_Proj;

void main()
{
    gl_Position = u_Proj * u_View * u_Model * vec4(aPos, 1.0);
}
"""

FRAGMENT_SOURCE = """#version 450 core
out vec4 FragColor;

void main()
{
    FragColor = vec4(0.9, 0.3, 0.4, 1.0);
}
"""


class ShaderError(RuntimeError):
    """A shader failed to compile or link."""


class PygletBackend:
    """Graphics calls made through pyglet's OpenGL bindings."""

    def enable_depth_test(self) -> None:
        from pyglet import gl

        gl.glEnable(gl.GL_DEPTH_TEST)

    def compile_program(self, vertex_source: str, fragment_source: str):
        from pyglet.graphics.shader import Shader as GLShader
        from pyglet.graphics.shader import ShaderException, ShaderProgram

        try:
            return ShaderProgram(
                GLShader(vertex_source, "vertex"), GLShader(fragment_source, "fragment")
            )
        except ShaderException as exc:
            raise ShaderError(f"Shader compilation failed:\n{exc}") from exc

    def use_program(self, program) -> None:
        program.use()

    def stop_program(self, program) -> None:
        program.stop()

    def set_uniform(self, program, name: str, value) -> bool:
        from pyglet.graphics.shader import ShaderException

        try:
            program[name] = value
        except (KeyError, ShaderException):
            return False
        return True

    def delete_program(self, program) -> None:
        program.delete()

    def create_mesh(self, program, vertices: Sequence[float], indices: Sequence[int]):
        from pyglet import gl

        return program.vertex_list_indexed(
            len(vertices) // 3, gl.GL_TRIANGLES, list(indices), aPos=("f", list(vertices))
        )

    def draw_mesh(self, mesh) -> None:
        from pyglet import gl

        mesh.draw(gl.GL_TRIANGLES)

    def delete_mesh(self, mesh) -> None:
        mesh.delete()


class Shader:
    """A linked vertex and fragment shader program."""

    def __init__(self, vertex_source: str, fragment_source: str) -> None:
        self._setup(PygletBackend(), vertex_source, fragment_source)

    @classmethod
    def with_backend(cls, backend, vertex_source: str, fragment_source: str) -> "Shader":
        """Build a shader whose graphics calls go through ``backend``."""
        shader = cls.__new__(cls)
        shader._setup(backend, vertex_source, fragment_source)
        return shader

    def _setup(self, backend, vertex_source: str, fragment_source: str) -> None:
        self._backend = backend
        self.program = self._backend.compile_program(vertex_source, fragment_source)

    def bind(self) -> None:
        self._backend.use_program(self.program)

    def unbind(self) -> None:
        self._backend.stop_program(self.program)

    def delete(self) -> None:
        if self.program is not None:
            self._backend.delete_program(self.program)
            self.program = None

    def __enter__(self) -> "Shader":
        self.bind()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.unbind()

    def _set(self, name: str, value) -> None:
        if not self._backend.set_uniform(self.program, name, value):
            logger.warning(f"[Shader] uniform '{name}' not found!")

    def set_uniform_1i(self, name: str, value: int) -> None:
        self._set(name, int(value))

    def set_uniform_1f(self, name: str, value: float) -> None:
        self._set(name, float(value))

    def set_uniform_mat4f(self, name: str, matrix) -> None:
        """Upload a 4x4 matrix, given row by row, in column-major order."""
        m = np.asarray(matrix, dtype=float)
        if m.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {m.shape}")
        self._set(name, tuple(float(v) for v in m.flatten(order="F")))


class Renderer:
    """Draws a solid cube for each transform with one shared shader."""

    def __init__(self) -> None:
        self._setup(PygletBackend())

    @classmethod
    def with_backend(cls, backend) -> "Renderer":
        """Build a renderer whose graphics calls go through ``backend``."""
        renderer = cls.__new__(cls)
        renderer._setup(backend)
        return renderer

    def _setup(self, backend) -> None:
        self._backend = backend
        logger.info("Renderer initializing...")
        self._backend.enable_depth_test()
        self._shader: Optional[Shader] = Shader.with_backend(
            self._backend, VERTEX_SOURCE, FRAGMENT_SOURCE
        )
        self._mesh = self._backend.create_mesh(
            self._shader.program, CUBE_VERTICES, CUBE_INDICES
        )
        self._shader.bind()
        logger.info("Renderer initialized.")

    def draw_cube(self, transform, camera) -> None:
        if self._shader is None:
            raise RuntimeError("renderer has been shut down")
        self._shader.bind()
        self._shader.set_uniform_mat4f("u_Model", transform.matrix())
        self._shader.set_uniform_mat4f("u_View", camera.view_matrix())
        self._shader.set_uniform_mat4f("u_Proj", camera.projection_matrix())
        self._backend.draw_mesh(self._mesh)

    def shutdown(self) -> None:
        if self._shader is None:
            return
        self._shader.delete()
        self._shader = None
        self._backend.delete_mesh(self._mesh)
        self._mesh = None
        logger.info("Renderer shutdown.")

    def __enter__(self) -> "Renderer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()


def set_camera_perspective(camera, aspect: float) -> None:
    """Give ``camera`` a 45° field of view with clip planes at 0.1 and 100."""
    camera.set_perspective(math.radians(45.0), aspect, 0.1, 100.0)