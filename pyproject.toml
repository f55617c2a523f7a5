[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqview"
version = "0.1.4"
description = "Cell editor, row insert, command palette, filter dialog and toast state for a terminal SQLite viewer"
requires-python = ">=3.10"
dependencies = []
keywords = ["sqlite", "tui", "terminal", "database", "filter", "fuzzy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sqview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
