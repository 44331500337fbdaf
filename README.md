# frontier

Graph algorithms and dense linear algebra in plain Python. The package needs
only the standard library.

## Modules

- `frontier.graph`: a directed graph held in compressed sparse row form, with
  both outgoing and incoming adjacency. `Graph.from_outgoing(starts, edges)`
  builds a graph and derives its incoming adjacency. `Graph.outgoing(v)`,
  `Graph.incoming(v)`, `Graph.outgoing_size(v)` and `Graph.incoming_size(v)`
  return a vertex's neighbours and degrees. `load_graph` reads the text
  `AdjacencyGraph` format. `load_graph_binary` and `store_graph_binary` read
  and write a compact binary format. `format_graph` returns a readable listing
  of a graph. Malformed input raises `GraphFormatError`.
- `frontier.bfs`: breadth-first search from vertex 0. `bfs_top_down` expands
  the frontier outwards. `bfs_bottom_up` has unvisited vertices look for a
  parent in the frontier. `bfs_hybrid` switches between the two as the
  frontier grows and shrinks. Each function returns a list of distances, with
  `-1` for vertices that cannot be reached. The single steps are also
  available as `top_down_step` and `bottom_up_step`.
- `frontier.pagerank`: `page_rank(graph, damping=0.3, convergence=1e-7)` runs
  PageRank until the total change between iterations falls below
  `convergence`. Rank held by vertices with no outgoing edges is spread evenly
  over the graph.
- `frontier.scoring`: `compute_score(correct, ref_time, stu_time, max_score)`
  turns a correctness flag and a pair of run times into a score.
  `format_bfs_scores` and `format_pagerank_scores` render score tables as text.
- `frontier.gemm`: products of the form `alpha * A x B + beta * C` on flat
  row-major lists. Each product returns a new list.
  - `gemm_naive`, `gemm_block` and `gemm_block_transposed` apply both `alpha`
    and `beta`.
  - `gemm_three_level` computes `C + alpha * A x B` and ignores `beta`.
  - `gemm_block_ijk` computes `C + A x B` for square matrices only, ignoring
    both `alpha` and `beta`.
  - `gemm` is `gemm_block_ijk`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from frontier.graph import Graph
from frontier.bfs import bfs_hybrid
from frontier.pagerank import page_rank

# 0 -> 1, 0 -> 2, 1 -> 2, 2 -> 0
g = Graph.from_outgoing([0, 2, 3], [1, 2, 2, 0])

print(bfs_hybrid(g))              # [0, 1, 1]
print(page_rank(g, 0.3, 1e-7))    # one score per vertex
```

## What the package does not do

- It has no command-line program. To convert or inspect graph files, call
  `load_graph`, `load_graph_binary`, `store_graph_binary` and `format_graph`
  from Python.
- It has no helpers for comparing two result arrays. Compare the lists
  directly.
- It does not time runs. `frontier.scoring` only turns times you supply into
  scores and tables.