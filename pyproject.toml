[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mystd"
version = "0.1.0"
description = "A small utility library: bit helpers, Z-function, argument parser, trie, file wrappers, a file logger and simple containers"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "trie", "argument-parser", "bits", "z-function", "logging", "files", "containers"]
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
packages = ["mystd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
