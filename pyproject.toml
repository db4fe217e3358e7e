[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arena_bots"
version = "0.1.0"
description = "Grid, game state, actions and a mini game for turn-based programming-contest arenas"
requires-python = ">=3.10"
keywords = ["bot", "game", "grid", "turn-based", "contest"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arena_bots"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
