[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "firgraph"
version = "0.1.0"
description = "Circuit graph model for FIRRTL designs: operation kinds, expression trees, nodes, super nodes and node ordering"
requires-python = ">=3.10"
dependencies = []
keywords = ["firrtl", "circuit", "graph", "expression-tree", "hardware", "eda"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.setuptools.packages.find]
include = ["firgraph*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
