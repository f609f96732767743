[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxelmesh"
version = "0.1.0"
description = "3D vector and 4x4 matrix math, string helpers and a line-oriented text parser for geometry pipelines"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "matrix", "geometry", "parser", "tokenizer", "3d"]
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
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["voxelmesh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
