[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fillerbot"
version = "0.1.0"
description = "A Filler game robot that picks piece placements, plus a live board visualizer"
requires-python = ">=3.10"
keywords = ["filler", "game", "bot", "board-game", "visualizer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
filler = "fillerbot.cli:main"
filler-visualizer = "fillerbot.visualizer:main"

[tool.hatch.build.targets.wheel]
packages = ["fillerbot"]

[tool.pytest.ini_options]
addopts = "-ra"
