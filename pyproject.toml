[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftpp"
version = "0.1.0"
description = "Reusable building blocks: byte buffers, object pools, design patterns, threading helpers, TCP messaging, timing and 2D/3D maths."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-buffer",
    "object-pool",
    "memento",
    "observer",
    "singleton",
    "state-machine",
    "thread-safe-queue",
    "worker-pool",
    "scheduler",
    "tcp",
    "perlin-noise",
    "vector",
]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ftpp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
