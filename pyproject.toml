[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "parchisgame"
version = "0.1.0"
description = "Game model for a two-player, four-colour Parchís with dice layers, walls, power bars and successor generation for search agents"
requires-python = ">=3.10"
dependencies = []
keywords = ["parchis", "parcheesi", "board game", "game tree", "search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["parchisgame*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
