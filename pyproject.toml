[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexascii"
version = "0.1.0"
description = "Draw, tile, erase and route through hexagons drawn in ASCII art"
requires-python = ">=3.10"
dependencies = []
keywords = ["hexagon", "ascii-art", "puzzle", "grid", "pathfinding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hexascii-outline = "hexascii.outline:main"
hexascii-tiling = "hexascii.tiling:main"
hexascii-echo = "hexascii.echo:main"
hexascii-erase = "hexascii.erase:main"
hexascii-route = "hexascii.route:main"

[tool.hatch.build.targets.wheel]
packages = ["hexascii"]

[tool.pytest.ini_options]
addopts = "-ra"
