[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sparsegrid"
version = "0.1.0"
description = "A sparse integer matrix stored as orthogonally linked row and column lists, with a small interactive terminal menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["sparse matrix", "linked list", "orthogonal list", "data structures", "ansi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sparsegrid = "sparsegrid.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sparsegrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
