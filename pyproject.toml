[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memfix"
version = "0.1.0"
description = "Arena and pool allocators over a fixed bytearray buffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["allocator", "arena", "pool", "memory", "buffer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[project.scripts]
memfix = "memfix.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["memfix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
