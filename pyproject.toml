[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "groove"
version = "0.1.0"
description = "A small 3D engine: a fly-through camera, spinning cubes and mouse picking on OpenGL"
requires-python = ">=3.10"
keywords = ["3d", "opengl", "engine", "camera", "picking", "rendering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
groove = "groove.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["groove"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
