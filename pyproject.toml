[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "munificence"
version = "0.1.0"
description = "Game model for a token-and-builder board game: colour sets, tokens, markets, a skill registry and payment search."
requires-python = ">=3.10"
dependencies = []
keywords = ["board game", "tokens", "market", "game model"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["munificence"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
