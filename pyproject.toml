[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocsolutions"
version = "0.1.0"
description = "Solutions to Advent of Code puzzles from 2015, 2016, 2019, 2020 and 2021"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aocsolutions"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
