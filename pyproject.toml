[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "creaturetracker"
version = "1.0.0"
description = "Track creatures and per-type statistics with a binary search tree and a chained hash table."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "binary search tree",
    "hash table",
    "data structures",
    "creatures",
    "statistics",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
creaturetracker = "creaturetracker.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["creaturetracker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
