[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "ballistix"
version = "0.1.0"
description = "Projectile trajectory simulation with air drag and wind, parameter sweeps and plots"
requires-python = ">=3.10"
keywords = ["ballistics", "projectile", "trajectory", "runge-kutta", "simulation", "drag"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Education",
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ballistix = "ballistix.cli:main"

[tool.setuptools.packages.find]
include = ["ballistix*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
