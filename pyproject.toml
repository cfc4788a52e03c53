[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algocollection"
version = "0.1.0"
description = "Classic algorithms and data structures: searching, array utilities, number theory, bit tricks, dynamic programming, graphs, strings, linked lists and a sudoku board editor."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "searching",
    "graphs",
    "dynamic-programming",
    "number-theory",
    "sudoku",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algocollection-sudoku = "algocollection.sudoku:main"

[tool.hatch.build.targets.wheel]
packages = ["algocollection"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
