[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raikou"
version = "0.1.0"
description = "Retained-mode layout engine: geometry primitives, measure/arrange passes, panels and paint ordering"
requires-python = ">=3.10"
dependencies = []
keywords = ["layout", "ui", "gui", "measure", "arrange", "panels", "retained-mode"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["raikou"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
