[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsprimer"
version = "0.1.0"
description = "Small, readable implementations of classic data structures and sorting algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "stack",
    "queue",
    "linked list",
    "circular list",
    "binary tree",
    "binary search tree",
    "hash table",
    "sorting",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dsprimer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
