[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sudokupad"
version = "1.0.0"
description = "A playable Sudoku board with a unique-solution puzzle generator and difficulty levels"
requires-python = ">=3.10"
keywords = ["sudoku", "puzzle", "game", "generator", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sudokupad = "sudokupad.sudokuapp:main"

[tool.hatch.build.targets.wheel]
packages = ["sudokupad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
