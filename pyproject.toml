[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzlebox"
version = "1.0.0"
description = "Solvers for a collection of small daily programming puzzles: handheld boot code, ciphers, adapters, seating, navigation, calories and rock-paper-scissors."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solver", "simulation"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
puzzlebox-handheld = "puzzlebox.handheld:main"
puzzlebox-xmas = "puzzlebox.xmas:main"
puzzlebox-adapters = "puzzlebox.adapters:main"
puzzlebox-seating = "puzzlebox.seating:main"
puzzlebox-navigation = "puzzlebox.navigation:main"
puzzlebox-calories = "puzzlebox.calories:main"
puzzlebox-rps = "puzzlebox.rps:main"

[tool.hatch.build.targets.wheel]
packages = ["puzzlebox"]

[tool.hatch.build.targets.sdist]
include = ["puzzlebox", "tests"]

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
