[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enginemath"
version = "0.1.0"
description = "Vector, matrix, quaternion, interpolation and easing helpers for 3D game code"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "matrix", "quaternion", "interpolation", "slerp", "easing", "3d", "game"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["enginemath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
