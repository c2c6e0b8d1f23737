[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "terra"
version = "0.1.0"
description = "Core of a small layered game engine: events, layers, timing, a headless window, input and render descriptors"
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "events", "layers", "game loop", "rendering"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
terra = "terra.application:main"

[tool.hatch.build.targets.wheel]
packages = ["terra"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
