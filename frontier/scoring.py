"""Grading scores derived from reference and measured run times."""

from __future__ import annotations

import math
from typing import List, Sequence

BFS_GRADE_GRAPHS = (
    "grid1000x1000.graph",
    "soc-livejournal1_68m.graph",
    "com-orkut_117m.graph",
    "random_500m.graph",
    "rmat_200m.graph",
)

PAGERANK_GRADE_GRAPHS = (
    "soc-livejournal1_68m.graph",
    "com-orkut_117m.graph",
    "rmat_200m.graph",
    "random_500m.graph",
)

SMALL_BFS_GRAPHS = frozenset(
    {"grid1000x1000.graph", "soc-livejournal1_68m.graph", "com-orkut_117m.graph"}
)

BFS_MAX_SCORES_SMALL = (2, 3, 3)
BFS_MAX_SCORES_LARGE = (7, 8, 8)
BFS_TOTAL = 70

PAGERANK_MAX_SCORE = 4
PAGERANK_TOTAL = 16

_NAME_WIDTH = 28
_BFS_SEPARATOR = "-" * 74 + "\n"
_PAGERANK_SEPARATOR = "-" * 43 + "\n"


def compute_score(correct: bool, ref_time: float, stu_time: float, max_score: float = 1.0) -> float:
    """Score one run: a fifth for correctness, the rest scaled by the speed ratio.

    The performance part is zero at or below 0.3 of the reference speed and
    full at or above 0.7 of it, linear in between.
    """
    if not correct:
        return 0.0
    max_perf_score = 0.8 * max_score
    correctness_score = 0.2 * max_score

    ratio = math.inf if stu_time == 0 else ref_time / stu_time
    slope = max_perf_score / (0.7 - 0.3)
    offset = 0.3 * slope

    perf_score = ratio * slope - offset
    perf_score = min(max(perf_score, 0.0), max_perf_score)
    return correctness_score + perf_score


def _pad_name(name: str) -> str:
    return name + " " * max(0, _NAME_WIDTH - len(name))


def _check_lengths(graph_names: Sequence[str], scores: Sequence) -> None:
    if len(graph_names) != len(scores):
        raise ValueError(
            f"{len(graph_names)} graph names but {len(scores)} score entries"
        )


def format_bfs_scores(graph_names: Sequence[str], scores: Sequence[Sequence[float]]) -> str:
    """Render the BFS score table.

    Each entry of ``scores`` holds the top-down, bottom-up and hybrid scores
    for one graph as fractions of that graph's maximum.
    """
    _check_lengths(graph_names, scores)
    parts: List[str] = ["\n\n", _BFS_SEPARATOR]
    parts.append("SCORES :" + " " * (_NAME_WIDTH - 8))
    parts.append("|   Top-Down    |   Bott-Up    |    Hybrid    |\n")
    parts.append(_BFS_SEPARATOR)

    total = 0.0
    for name, row in zip(graph_names, scores):
        if len(row) != 3:
            raise ValueError(f"expected 3 scores for {name}, got {len(row)}")
        maxima = BFS_MAX_SCORES_SMALL if name in SMALL_BFS_GRAPHS else BFS_MAX_SCORES_LARGE
        weighted = [score * limit for score, limit in zip(row, maxima)]
        total += sum(weighted)

        parts.append(_pad_name(name))
        parts.append("| ")
        parts.extend(
            f"     {value:.2f} / {limit} |" for value, limit in zip(weighted, maxima)
        )
        parts.append("\n")
        parts.append(_BFS_SEPARATOR)

    parts.append("TOTAL" + " " * (59 - 5))
    parts.append(f"|  {total:.2f} / {BFS_TOTAL} |\n")
    parts.append(_BFS_SEPARATOR)
    return "".join(parts)


def format_pagerank_scores(graph_names: Sequence[str], scores: Sequence[float]) -> str:
    """Render the PageRank score table with one score per graph."""
    _check_lengths(graph_names, scores)
    parts: List[str] = ["\n\n", _PAGERANK_SEPARATOR, "SCORES :\n", _PAGERANK_SEPARATOR]

    total = 0.0
    for name, score in zip(graph_names, scores):
        total += score
        parts.append(_pad_name(name))
        parts.append(f"|   {score:.5f} / {PAGERANK_MAX_SCORE} |\n")
        parts.append(_PAGERANK_SEPARATOR)

    parts.append("TOTAL" + " " * (_NAME_WIDTH - 5))
    parts.append(f"|   {total:.5f} / {PAGERANK_TOTAL} |\n")
    parts.append(_PAGERANK_SEPARATOR)
    return "".join(parts)