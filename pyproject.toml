[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "procmux"
version = "0.1.0"
description = "Building blocks for a process multiplexer emulator: a ticking clock, activity vectors, process data sections, memory frames, a toy heap, instruction parsing and configuration."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "emulator",
    "scheduler",
    "process",
    "operating-systems",
    "instruction-parser",
    "paging",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["procmux"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
