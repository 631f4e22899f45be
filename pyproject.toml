[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nomadpack"
version = "0.1.0"
description = "Building blocks for a tool that manages packs of Nomad jobs: argument validation, help formatting, render output, deployment status tables and command reference pages."
requires-python = ">=3.10"
dependencies = []
keywords = ["nomad", "pack", "deployment", "cli", "templates", "help"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Distributed Computing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nomadpack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
