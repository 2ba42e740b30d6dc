[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bvgraph"
version = "0.1.0"
description = "Building blocks for compressed web graphs: integer codings, iterators over successor lists, properties files and hierarchical loggers"
requires-python = ">=3.10"
keywords = ["graph", "webgraph", "compression", "iterators", "successor lists"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Information Analysis",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bvgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
