[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzlebox"
version = "0.1.0"
description = "Backtracking and logical solvers for classic and variant sudoku, plus Wordle starter-word tools"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sudoku",
    "variant sudoku",
    "killer sudoku",
    "thermometer",
    "kropki",
    "backtracking",
    "puzzle",
    "wordle",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
puzzlebox = "puzzlebox.runner:main"
puzzlebox-classic = "puzzlebox.classic:main"
puzzlebox-wordle = "puzzlebox.wordle:main"

[tool.hatch.build.targets.wheel]
packages = ["puzzlebox"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
