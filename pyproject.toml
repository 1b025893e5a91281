[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enginecore"
version = "0.1.0"
description = "Engine core pieces for a small 3D editor: input state, events, timers, transforms, geometry helpers and editor logic"
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "events", "input", "transform", "editor", "timer"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["enginecore"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
