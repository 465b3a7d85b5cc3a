[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixel_mario"
version = "0.1.0"
description = "A small side-scrolling platformer with lucky blocks, coins, pipes and walking mushrooms, drawn with pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "platformer", "side-scroller", "pygame", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixel-mario = "pixel_mario.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pixel_mario"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
