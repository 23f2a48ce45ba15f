[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tuarg"
version = "0.1.0"
description = "A small command-line argument parser built around commands, flags and options."
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "argument", "parser", "command-line", "flags", "options"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tuarg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
