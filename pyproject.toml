[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "frontier"
version = "0.1.0"
description = "Compressed graph storage, breadth-first search, PageRank and dense matrix multiplication in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "bfs", "breadth-first search", "pagerank", "gemm", "csr", "matrix multiplication"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["frontier"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
