[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contest800"
version = "0.1.0"
description = "Solvers for three short contest problems and a small number-theory toolkit"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "number-theory", "modular-arithmetic", "sieve", "totient"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
contest800-coins = "contest800.coins:main"
contest800-cover-in-water = "contest800.cover_in_water:main"
contest800-game-with-integers = "contest800.game_with_integers:main"

[tool.hatch.build.targets.wheel]
packages = ["contest800"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
