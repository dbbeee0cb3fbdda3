[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weightpick"
version = "0.1.0"
description = "Weighted index sampling: pick an index with probability proportional to its weight"
requires-python = ">=3.10"
dependencies = []
keywords = ["random", "sampling", "weighted", "distribution", "probability"]
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
packages = ["weightpick"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
