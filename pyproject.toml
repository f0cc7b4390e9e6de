[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pvzgame"
version = "0.1.0"
description = "A Plants vs. Zombies style game skeleton on pygame: reanim animation reader, texture cache, frame-paced game loop and coloured logging."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "plants-vs-zombies", "pygame", "animation", "reanim"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pvzgame = "pvzgame.app:main"
pvzgame-animcheck = "pvzgame.animcheck:main"
pvzgame-spritedemo = "pvzgame.spritedemo:main"

[tool.hatch.build.targets.wheel]
packages = ["pvzgame"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
