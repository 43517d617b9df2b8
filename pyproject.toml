[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linesect"
version = "0.1.0"
description = "Small 2D/3D vector types and intersection of lines in parametric form"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "vector", "line", "intersection", "linear-algebra"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["linesect"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
