"""Graph storage, breadth-first search, PageRank, scoring and dense matrix multiplication."""

__version__ = "0.1.0"
__all__ = ["graph", "bfs", "pagerank", "scoring", "gemm"]