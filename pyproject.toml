[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeoncore"
version = "0.1.0"
description = "Rules of a classic turn-based dungeon crawl: dice, game tables, timed effects, monster pursuit, combat, hunger and messages"
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "dungeon", "game", "rpg", "dice"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dungeoncore"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
