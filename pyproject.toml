[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adcs"
version = "0.1.0"
description = "Attitude determination and control building blocks for a small satellite: vector, matrix and quaternion math, TRIAD, B-dot and ramp control, and JPL ephemeris lookup."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "adcs",
    "attitude",
    "satellite",
    "triad",
    "bdot",
    "quaternion",
    "ephemeris",
    "chebyshev",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Topic :: Scientific/Engineering :: Astronomy",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["adcs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
