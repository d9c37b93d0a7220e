[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "geebocasino"
version = "0.1.0"
description = "A small terminal casino: blackjack, ride the bus, slots and Russian roulette"
requires-python = ">=3.10"
dependencies = []
keywords = ["casino", "blackjack", "slots", "terminal", "curses", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
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
geebocasino = "geebocasino.games:main"
geebocasino-menu = "geebocasino.mainmenu:main"
geebocasino-map = "geebocasino.gamemap:main"

[tool.hatch.build.targets.wheel]
packages = ["geebocasino"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
