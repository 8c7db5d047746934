[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcadekit"
version = "0.1.0"
description = "Small console games (number baseball, bingo, a character drawing board) and a minimal 2D actor and collision toolkit"
requires-python = ">=3.10"
dependencies = []
keywords = ["games", "bingo", "baseball", "console", "collision", "2d", "vector"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Korean",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arcadekit-baseball = "arcadekit.baseball:main"
arcadekit-draw = "arcadekit.drawboard:main"
arcadekit-bingo = "arcadekit.bingo:main"

[tool.hatch.build.targets.wheel]
packages = ["arcadekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
