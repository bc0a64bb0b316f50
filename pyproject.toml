[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pandalogic"
version = "4.2.0"
description = "Logic-circuit simulation elements: gates, multiplexers, truth tables, latches and flip-flops"
requires-python = ">=3.10"
dependencies = []
keywords = ["logic", "circuit", "simulation", "gates", "flip-flop", "digital"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pandalogic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
