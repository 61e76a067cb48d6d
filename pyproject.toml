[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roundsolver"
version = "0.1.0"
description = "Solvers for short contest puzzles, usable as a library or from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "puzzles", "algorithms", "contest"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
roundsolver = "roundsolver.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["roundsolver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
