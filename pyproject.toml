[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "monoopoly"
version = "0.1.0"
description = "A terminal Monopoly game with property families, stations, facilities, cards, jail and trading"
requires-python = ">=3.10"
dependencies = []
keywords = ["monopoly", "board game", "terminal", "game", "hot seat"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
monoopoly = "monoopoly.launcher:main"

[tool.hatch.build.targets.wheel]
packages = ["monoopoly"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
