[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bicubic2d"
version = "0.1.0"
description = "Bicubic Hermite and spline interpolation of functions of two variables, with an interactive 3D surface viewer"
requires-python = ">=3.10"
keywords = ["interpolation", "bicubic", "spline", "hermite", "surface", "numerical"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bicubic2d = "bicubic2d.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bicubic2d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
