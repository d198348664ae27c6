[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gatesim"
version = "0.1.0"
description = "Event-driven logic circuit simulator driven by cell library, circuit and stimulus files"
requires-python = ">=3.10"
dependencies = []
keywords = ["logic", "circuit", "simulation", "digital", "gates", "event-driven"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gatesim = "gatesim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gatesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
