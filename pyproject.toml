[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "handmade"
version = "0.1.0"
description = "A small game-loop prototype: a scrolling colour gradient, a sine-wave tone and gamepad input"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "game-loop", "gradient", "sine", "audio", "gamepad", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
handmade = "handmade.platform:main"

[tool.hatch.build.targets.wheel]
packages = ["handmade"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
