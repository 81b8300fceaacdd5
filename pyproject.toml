[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grillo"
version = "0.1.0"
description = "A small command-line task manager backed by SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["tasks", "todo", "cli", "sqlite", "productivity"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
grillo = "grillo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["grillo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
