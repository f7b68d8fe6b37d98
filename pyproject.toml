[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codedrills"
version = "0.1.0"
description = "Classic algorithm drills: graphs, grids, searches, greedy strategies, combinatorics and a segment tree"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "graphs",
    "dijkstra",
    "kruskal",
    "bfs",
    "binary-search",
    "two-pointers",
    "segment-tree",
    "prefix-sum",
    "greedy",
]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
codedrills = "codedrills.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["codedrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
