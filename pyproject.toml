[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "firmkit"
version = "0.1.0"
description = "Small embedded-style building blocks: bit helpers, ring buffer, record queue, cooperative scheduler, state machines and numeric exercises"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "embedded",
    "bits",
    "ring-buffer",
    "queue",
    "scheduler",
    "state-machine",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
firmkit-bits = "firmkit.bits:main"
firmkit-ringbuffer = "firmkit.ringbuffer:main"
firmkit-arrays = "firmkit.arrays:main"
firmkit-packing = "firmkit.packing:main"
firmkit-scheduler = "firmkit.scheduler:main"
firmkit-doorlock = "firmkit.doorlock:main"
firmkit-gears = "firmkit.gears:main"
firmkit-algorithms = "firmkit.algorithms:main"
firmkit-basics = "firmkit.basics:main"
firmkit-flow = "firmkit.flow:main"

[tool.hatch.build.targets.wheel]
packages = ["firmkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
