[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilecrawl"
version = "0.1.0"
description = "A small tile-based puzzle game: collect every coin on a walled map, then reach the exit."
requires-python = ">=3.10"
keywords = ["game", "puzzle", "tiles", "maze", "xpm", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
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
tilecrawl = "tilecrawl.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tilecrawl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
