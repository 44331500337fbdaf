"""Directed graphs stored as compressed outgoing and incoming adjacency lists."""

from __future__ import annotations

import re
import struct
from dataclasses import dataclass
from itertools import accumulate
from os import PathLike
from pathlib import Path
from typing import Iterable, Union

PathArg = Union[str, "PathLike[str]"]

GRAPH_HEADER_MAGIC = -559038737  # 0xDEADBEEF read as a signed 32-bit integer
TEXT_MAGIC = "AdjacencyGraph"

_HEADER = struct.Struct("<3i")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class GraphFormatError(ValueError):
    """Raised when a graph file or adjacency description is malformed."""


def _span_end(starts: tuple[int, ...], total: int, v: int) -> int:
    return total if v == len(starts) - 1 else starts[v + 1]


def _validate(starts: tuple[int, ...], edges: tuple[int, ...]) -> None:
    num_nodes = len(starts)
    if num_nodes == 0:
        if edges:
            raise GraphFormatError("a graph without nodes cannot have edges")
        return
    if starts[0] != 0:
        raise GraphFormatError("the first outgoing start must be 0")
    for previous, current in zip(starts, starts[1:]):
        if current < previous:
            raise GraphFormatError("outgoing starts must be non-decreasing")
    if starts[-1] > len(edges):
        raise GraphFormatError("outgoing starts point past the edge list")
    for target in edges:
        if not 0 <= target < num_nodes:
            raise GraphFormatError(f"edge target {target} is not a node")


@dataclass(frozen=True)
class Graph:
    """A directed graph with both outgoing and incoming adjacency arrays."""

    outgoing_starts: tuple[int, ...]
    outgoing_edges: tuple[int, ...]
    incoming_starts: tuple[int, ...]
    incoming_edges: tuple[int, ...]

    @property
    def num_nodes(self) -> int:
        return len(self.outgoing_starts)

    @property
    def num_edges(self) -> int:
        return len(self.outgoing_edges)

    @classmethod
    def from_outgoing(cls, outgoing_starts: Iterable[int], outgoing_edges: Iterable[int]) -> "Graph":
        """Build a graph from its outgoing adjacency, deriving the incoming one."""
        starts = tuple(int(s) for s in outgoing_starts)
        edges = tuple(int(e) for e in outgoing_edges)
        _validate(starts, edges)

        num_nodes = len(starts)
        counts = [0] * num_nodes
        for target in edges:
            counts[target] += 1
        incoming_starts = list(accumulate([0] + counts[:-1])) if num_nodes else []

        fill = list(incoming_starts)
        incoming = [0] * len(edges)
        for source, start in enumerate(starts):
            for target in edges[start:_span_end(starts, len(edges), source)]:
                incoming[fill[target]] = source
                fill[target] += 1

        return cls(starts, edges, tuple(incoming_starts), tuple(incoming))

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self.num_nodes:
            raise IndexError(f"vertex {v} out of range for {self.num_nodes} nodes")

    def outgoing(self, v: int) -> tuple[int, ...]:
        """Targets of the edges leaving ``v``."""
        self._check_vertex(v)
        start = self.outgoing_starts[v]
        return self.outgoing_edges[start:_span_end(self.outgoing_starts, self.num_edges, v)]

    def incoming(self, v: int) -> tuple[int, ...]:
        """Sources of the edges entering ``v``."""
        self._check_vertex(v)
        start = self.incoming_starts[v]
        return self.incoming_edges[start:_span_end(self.incoming_starts, self.num_edges, v)]

    def outgoing_size(self, v: int) -> int:
        self._check_vertex(v)
        return _span_end(self.outgoing_starts, self.num_edges, v) - self.outgoing_starts[v]

    def incoming_size(self, v: int) -> int:
        self._check_vertex(v)
        return _span_end(self.incoming_starts, self.num_edges, v) - self.incoming_starts[v]


def _parse_count(line: str, what: str) -> int:
    match = _LEADING_INT.match(line)
    if match is None:
        raise GraphFormatError(f"could not read {what} from {line!r}")
    value = int(match.group(1))
    if value < 0:
        raise GraphFormatError(f"{what} must not be negative")
    return value


def _line_ints(line: str) -> Iterable[int]:
    for piece in line.split():
        match = re.fullmatch(r"[+-]?\d+", piece)
        if match is None:
            leading = _LEADING_INT.match(piece)
            if leading is not None:
                yield int(leading.group(1))
            return
        yield int(piece)


def load_graph(path: PathArg) -> Graph:
    """Load a graph from the text ``AdjacencyGraph`` format."""
    with open(path, encoding="utf-8") as handle:
        lines = iter(handle.read().splitlines())

    first = next(lines, None)
    if first is None or first.rstrip("\r") != TEXT_MAGIC:
        raise GraphFormatError(f"Invalid input file {first!r}")

    def next_meaningful(what: str) -> str:
        for line in lines:
            if line and not line.startswith("#"):
                return line
        raise GraphFormatError(f"missing {what}")

    num_nodes = _parse_count(next_meaningful("node count"), "node count")
    num_edges = _parse_count(next_meaningful("edge count"), "edge count")

    values: list[int] = []
    for line in lines:
        if line.startswith("#"):
            continue
        values.extend(_line_ints(line))

    needed = num_nodes + num_edges
    if len(values) < needed:
        raise GraphFormatError(f"expected {needed} integers, found {len(values)}")
    return Graph.from_outgoing(values[:num_nodes], values[num_nodes:needed])


def load_graph_binary(path: PathArg) -> Graph:
    """Load a graph from the binary format written by :func:`store_graph_binary`."""
    data = Path(path).read_bytes()
    if len(data) < _HEADER.size:
        raise GraphFormatError("Error reading header.")
    magic, num_nodes, num_edges = _HEADER.unpack_from(data, 0)
    if magic != GRAPH_HEADER_MAGIC:
        raise GraphFormatError("Invalid graph file header. File may be corrupt.")
    if num_nodes < 0 or num_edges < 0:
        raise GraphFormatError("Invalid graph file header. File may be corrupt.")

    offset = _HEADER.size
    if len(data) < offset + 4 * num_nodes:
        raise GraphFormatError("Error reading nodes.")
    starts = struct.unpack_from(f"<{num_nodes}i", data, offset)
    offset += 4 * num_nodes
    if len(data) < offset + 4 * num_edges:
        raise GraphFormatError("Error reading edges.")
    edges = struct.unpack_from(f"<{num_edges}i", data, offset)
    return Graph.from_outgoing(starts, edges)


def store_graph_binary(path: PathArg, graph: Graph) -> None:
    """Write the outgoing adjacency of ``graph`` in binary form."""
    with open(path, "wb") as handle:
        handle.write(_HEADER.pack(GRAPH_HEADER_MAGIC, graph.num_nodes, graph.num_edges))
        handle.write(struct.pack(f"<{graph.num_nodes}i", *graph.outgoing_starts))
        handle.write(struct.pack(f"<{graph.num_edges}i", *graph.outgoing_edges))


def format_graph(graph: Graph) -> str:
    """Render the graph's adjacency in a human-readable listing."""
    parts = [
        "Graph pretty print:\n",
        f"num_nodes={graph.num_nodes}\n",
        f"num_edges={graph.num_edges}\n",
    ]
    for v in range(graph.num_nodes):
        out = graph.outgoing(v)
        parts.append(f"node {v:02d}: out={len(out)}: ")
        parts.append("".join(f"{t} " for t in out))
        parts.append("\n")
        inc = graph.incoming(v)
        parts.append(f"         in={len(inc)}: ")
        parts.append("".join(f"{s} " for s in inc))
        parts.append("\n")
    return "".join(parts)