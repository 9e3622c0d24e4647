[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "thaumsolver"
version = "0.1.0"
description = "Find shortest aspect chains and shared aspects in a Thaumcraft aspect network"
requires-python = ">=3.10"
dependencies = []
keywords = ["thaumcraft", "aspects", "shortest-path", "graph", "solver"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
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
thaumsolver = "thaumsolver.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["thaumsolver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
