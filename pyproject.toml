[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "particlesim"
version = "0.1.0"
description = "A small 2D gravitational particle simulation in which colliding particles merge into clusters."
requires-python = ">=3.10"
keywords = ["physics", "gravity", "particles", "simulation", "n-body"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
particlesim = "particlesim.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["particlesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
