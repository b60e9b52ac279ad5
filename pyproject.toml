[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tileforge"
version = "0.1.0"
description = "A small component-based 2D game engine on pygame with Tiled maps, sprite animation, input mapping and quadtree collisions"
requires-python = ">=3.10"
keywords = ["game", "engine", "2d", "tilemap", "tmx", "quadtree", "animation", "pygame"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tileforge = "tileforge.game:main"

[tool.hatch.build.targets.wheel]
packages = ["tileforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
