[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wgraphs"
version = "0.1.0"
description = "Edge-weighted undirected and directed graphs with depth-first and breadth-first search"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "weighted graph", "digraph", "dfs", "bfs", "priority queue"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wgraphs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
