[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mobagen"
version = "0.1.0"
description = "Small 2D game toolkit with terminal chess and catch-the-cat board games driven by simple AI players"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "chess", "hexagonal grid", "ai", "pathfinding", "board game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mobagen-chess = "mobagen.chess_game:main"
mobagen-catchthecat = "mobagen.catchthecat:main"

[tool.hatch.build.targets.wheel]
packages = ["mobagen"]

[tool.pytest.ini_options]
addopts = "-ra"
