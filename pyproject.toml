[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pockets"
version = "0.1.0"
description = "Small console programs: a greeter, a common-books finder, a levelled logger, a money decimal parser and a word-guessing game."
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "exercises", "word-game", "logging", "books", "decimal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pockets-hello = "pockets.hello:main"
pockets-bookworms = "pockets.bookworms:main"
pockets-logdemo = "pockets.logdemo:main"
pockets-gordle = "pockets.gordle.game:main"

[tool.hatch.build.targets.wheel]
packages = ["pockets"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
