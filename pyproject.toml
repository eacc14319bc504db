[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rcutil"
version = "0.1.0"
description = "Small utilities: per-thread error state, allocators, growable buffers, string helpers, filesystem checks, environment lookup and atomics"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "error-handling", "allocator", "filesystem", "strings", "atomics"]
classifiers = [
    "Development Status :: 4 - Beta",
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
packages = ["rcutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
