[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "splkit"
version = "0.1.0"
description = "String helpers, a string buffer, stack, vector and binary search tree, line input, a test reporter and file helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "strings",
    "string-buffer",
    "collections",
    "bst",
    "stack",
    "vector",
    "input",
    "teaching",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
packages = ["splkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
