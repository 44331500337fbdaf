import struct

import pytest

from frontier.graph import (
    Graph,
    GraphFormatError,
    format_graph,
    load_graph,
    load_graph_binary,
    store_graph_binary,
)

TEXT = """AdjacencyGraph
# a comment

3
# another
3
0
2
3
1 2
2
"""


@pytest.fixture
def small():
    return Graph.from_outgoing([0, 2, 3], [1, 2, 2])


def test_outgoing_spans(small):
    assert small.outgoing(0) == (1, 2)
    assert small.outgoing(1) == (2,)
    assert small.outgoing(2) == ()
    assert [small.outgoing_size(v) for v in range(3)] == [2, 1, 0]


def test_incoming_matches_outgoing(small):
    for u in range(small.num_nodes):
        for v in small.outgoing(u):
            assert u in small.incoming(v)
    total = sum(small.incoming_size(v) for v in range(small.num_nodes))
    assert total == small.num_edges
    assert small.incoming(0) == ()


def test_incoming_sorted_by_source():
    g = Graph.from_outgoing([0, 1, 2, 3], [3, 3, 3, 0])
    assert g.incoming(3) == (0, 1, 2)
    assert g.incoming(0) == (3,)


def test_vertex_out_of_range(small):
    with pytest.raises(IndexError):
        small.outgoing(3)
    with pytest.raises(IndexError):
        small.incoming_size(-1)


def test_invalid_adjacency_rejected():
    with pytest.raises(GraphFormatError):
        Graph.from_outgoing([0, 1], [5])
    with pytest.raises(GraphFormatError):
        Graph.from_outgoing([0, 2, 1], [0, 1])


def test_load_text(tmp_path, small):
    path = tmp_path / "g.txt"
    path.write_text(TEXT)
    g = load_graph(path)
    assert g == small


def test_load_text_bad_magic(tmp_path):
    path = tmp_path / "g.txt"
    path.write_text("NotAGraph\n1\n0\n0\n")
    with pytest.raises(GraphFormatError):
        load_graph(path)


def test_load_text_too_few_values(tmp_path):
    path = tmp_path / "g.txt"
    path.write_text("AdjacencyGraph\n2\n2\n0\n1\n")
    with pytest.raises(GraphFormatError):
        load_graph(path)


def test_binary_round_trip(tmp_path, small):
    path = tmp_path / "g.bin"
    store_graph_binary(path, small)
    assert load_graph_binary(path) == small


def test_binary_header_token(tmp_path, small):
    path = tmp_path / "g.bin"
    store_graph_binary(path, small)
    data = path.read_bytes()
    assert data[:4] == b"\xef\xbe\xad\xde"
    assert struct.unpack_from("<2i", data, 4) == (small.num_nodes, small.num_edges)


def test_binary_bad_token(tmp_path):
    path = tmp_path / "g.bin"
    path.write_bytes(struct.pack("<3i", 1, 0, 0))
    with pytest.raises(GraphFormatError):
        load_graph_binary(path)


def test_binary_truncated(tmp_path, small):
    path = tmp_path / "g.bin"
    store_graph_binary(path, small)
    path.write_bytes(path.read_bytes()[:-4])
    with pytest.raises(GraphFormatError):
        load_graph_binary(path)
    path.write_bytes(b"\x00")
    with pytest.raises(GraphFormatError):
        load_graph_binary(path)


def test_format_graph(small):
    text = format_graph(small)
    lines = text.splitlines()
    assert lines[0] == "Graph pretty print:"
    assert lines[1] == "num_nodes=3"
    assert lines[2] == "num_edges=3"
    assert lines[3] == "node 00: out=2: 1 2 "
    assert len(lines) == 3 + 2 * small.num_nodes