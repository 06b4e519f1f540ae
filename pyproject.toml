[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelplay"
version = "0.1.0"
description = "Software-rendered pixel games and demos: a Space Invaders clone, Conway's Game of Life and bouncing-shape scenes drawn into RGBA frame buffers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "pixels",
    "framebuffer",
    "game",
    "invaders",
    "game-of-life",
    "cellular-automaton",
    "pcx",
    "sprites",
    "pcg32",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["pixelplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP", "SIM"]

[tool.mypy]
python_version = "3.10"
files = ["pixelplay"]
warn_unused_ignores = true
