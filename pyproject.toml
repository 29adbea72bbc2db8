[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uuengine"
version = "0.1.0"
description = "Scene model, project files and geometry core of a small 3D game engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "3d", "scene", "wavefront obj", "geometry", "quaternion"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["uuengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
