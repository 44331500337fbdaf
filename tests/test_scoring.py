import pytest

from frontier.scoring import (
    compute_score,
    format_bfs_scores,
    format_pagerank_scores,
)


def test_incorrect_scores_zero():
    assert compute_score(False, 1.0, 1.0) == 0.0
    assert compute_score(False, 10.0, 0.1, max_score=4) == 0.0


@pytest.mark.parametrize("max_score", [1.0, 4.0])
def test_fast_run_gets_full_score(max_score):
    assert compute_score(True, 1.0, 1.0, max_score) == pytest.approx(max_score)
    assert compute_score(True, 2.0, 1.0, max_score) == pytest.approx(max_score)


@pytest.mark.parametrize("max_score", [1.0, 4.0])
def test_slow_run_gets_correctness_only(max_score):
    assert compute_score(True, 0.3, 1.0, max_score) == pytest.approx(0.2 * max_score)
    assert compute_score(True, 0.1, 1.0, max_score) == pytest.approx(0.2 * max_score)


def test_score_monotone_and_bounded():
    ratios = [0.1, 0.3, 0.4, 0.5, 0.6, 0.7, 0.9]
    values = [compute_score(True, r, 1.0) for r in ratios]
    assert values == sorted(values)
    assert all(0.2 - 1e-12 <= v <= 1.0 + 1e-12 for v in values)


def test_midpoint_is_halfway():
    low = compute_score(True, 0.3, 1.0)
    high = compute_score(True, 0.7, 1.0)
    mid = compute_score(True, 0.5, 1.0)
    assert mid == pytest.approx((low + high) / 2)


def test_zero_student_time_is_full_score():
    assert compute_score(True, 1.0, 0.0) == pytest.approx(1.0)


def test_bfs_table_layout():
    text = format_bfs_scores(["grid1000x1000.graph"], [[0.0, 0.0, 0.0]])
    lines = text.split("\n")
    assert lines[0] == "" and lines[1] == ""
    assert lines[2] == "-" * 74
    assert lines[3] == "SCORES :" + " " * 20 + "|   Top-Down    |   Bott-Up    |    Hybrid    |"
    assert lines[5].startswith("grid1000x1000.graph" + " " * 9 + "| ")
    assert "0.00 / 2 |" in lines[5]
    assert lines[7] == "TOTAL" + " " * 54 + "|  0.00 / 70 |"


def test_bfs_table_uses_small_and_large_maxima():
    text = format_bfs_scores(
        ["com-orkut_117m.graph", "rmat_200m.graph"], [[1.0, 1.0, 1.0], [1.0, 1.0, 1.0]]
    )
    lines = text.split("\n")
    assert "2.00 / 2 |" in lines[5]
    assert "3.00 / 3 |" in lines[5]
    assert "7.00 / 7 |" in lines[7]
    assert "8.00 / 8 |" in lines[7]


def test_bfs_mismatched_lengths():
    with pytest.raises(ValueError):
        format_bfs_scores(["a", "b"], [[0.0, 0.0, 0.0]])
    with pytest.raises(ValueError):
        format_bfs_scores(["a"], [[0.0, 0.0]])


def test_pagerank_table_layout():
    text = format_pagerank_scores(["rmat_200m.graph", "random_500m.graph"], [0.0, 4.0])
    lines = text.split("\n")
    assert lines[2] == "-" * 43
    assert lines[3] == "SCORES :"
    assert lines[5] == "rmat_200m.graph" + " " * 13 + "|   0.00000 / 4 |"
    assert lines[7] == "random_500m.graph" + " " * 11 + "|   4.00000 / 4 |"
    assert lines[9] == "TOTAL" + " " * 23 + "|   4.00000 / 16 |"


def test_pagerank_mismatched_lengths():
    with pytest.raises(ValueError):
        format_pagerank_scores(["a"], [])