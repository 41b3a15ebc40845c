[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sandfall"
version = "0.1.0"
description = "A falling-sand simulation on a grid of cells, drawn in a window"
requires-python = ">=3.10"
keywords = ["sand", "falling-sand", "cellular-automaton", "simulation", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sandfall = "sandfall.game:main"

[tool.hatch.build.targets.wheel]
packages = ["sandfall"]

[tool.pytest.ini_options]
addopts = "-ra"
