[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventkit"
version = "0.1.0"
description = "Solvers for Advent of Code 2023 and 2024 puzzles, usable as a library or from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "algorithms", "grids", "pathfinding"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adventkit-2023-01 = "adventkit.y2023_day01:main"
adventkit-2023-02 = "adventkit.y2023_day02:main"
adventkit-2023-03 = "adventkit.y2023_day03:main"
adventkit-2023-04 = "adventkit.y2023_day04:main"
adventkit-2023-05 = "adventkit.y2023_day05:main"
adventkit-2024-01 = "adventkit.y2024_day01:main"
adventkit-2024-02 = "adventkit.y2024_day02:main"
adventkit-2024-03 = "adventkit.y2024_day03:main"
adventkit-2024-04 = "adventkit.y2024_day04:main"
adventkit-2024-05 = "adventkit.y2024_day05:main"
adventkit-2024-06 = "adventkit.y2024_day06:main"
adventkit-2024-07 = "adventkit.y2024_day07:main"
adventkit-2024-08 = "adventkit.y2024_day08:main"
adventkit-2024-09 = "adventkit.y2024_day09:main"
adventkit-2024-10 = "adventkit.y2024_day10:main"
adventkit-2024-11 = "adventkit.y2024_day11:main"
adventkit-2024-12 = "adventkit.y2024_day12:main"
adventkit-2024-13 = "adventkit.y2024_day13:main"
adventkit-2024-14 = "adventkit.y2024_day14:main"
adventkit-2024-15 = "adventkit.y2024_day15:main"
adventkit-2024-16 = "adventkit.y2024_day16:main"
adventkit-2024-17 = "adventkit.y2024_day17:main"
adventkit-2024-18 = "adventkit.y2024_day18:main"
adventkit-2024-19 = "adventkit.y2024_day19:main"

[tool.hatch.build.targets.wheel]
packages = ["adventkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
