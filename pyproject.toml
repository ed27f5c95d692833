[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "candela"
version = "0.1.0"
description = "CPU-side building blocks for a renderer: BVH split selection, an FPS camera, transform and sampling helpers, and shader source loading with include expansion."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["bvh", "sah", "rendering", "camera", "glsl", "shader", "include"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["candela"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
