[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roarset"
version = "0.1.0"
description = "Containers for sets of 16-bit values (sorted arrays and fixed-size bitmaps), with key split helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["roaring", "bitmap", "bitset", "set", "integers", "containers"]
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
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["roarset"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
