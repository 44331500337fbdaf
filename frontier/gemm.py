"""Dense double-precision matrix products of the form ``alpha * A x B + beta * C``.

Matrices are flat row-major sequences: ``A`` is ``m x k``, ``B`` is ``k x n``
and ``C`` is ``m x n``. Every function returns a new list for the result and
leaves its inputs untouched.
"""

from __future__ import annotations

from operator import mul
from typing import Iterator, List, Sequence, Tuple

BLOCK_SIZE = 8

# Cache-level tiling of the three-level product.
PANEL_N = 4096
PANEL_K = 256
PANEL_M = 96
MICRO_N = 4
MICRO_M = 8


def _checked(
    m: int, n: int, k: int, a: Sequence[float], b: Sequence[float], c: Sequence[float]
) -> Tuple[List[float], List[float], List[float]]:
    if m < 0 or n < 0 or k < 0:
        raise ValueError("matrix dimensions must not be negative")
    for name, matrix, expected in (("A", a, m * k), ("B", b, k * n), ("C", c, m * n)):
        if len(matrix) != expected:
            raise ValueError(f"matrix {name} has {len(matrix)} entries, expected {expected}")
    return [float(x) for x in a], [float(x) for x in b], [float(x) for x in c]


def _blocks(total: int, size: int) -> Iterator[Tuple[int, int]]:
    """Start and length of each tile covering ``range(total)``."""
    for start in range(0, total, size):
        yield start, min(size, total - start)


def gemm_naive(m, n, k, a, b, c, alpha, beta) -> List[float]:
    """Row-by-column product with one dot product per entry of ``C``."""
    a, b, c = _checked(m, n, k, a, b, c)
    columns = [b[j::n] for j in range(n)] if n else []
    result: List[float] = []
    for i in range(m):
        row = a[i * k:(i + 1) * k]
        for j, column in enumerate(columns):
            inner = sum(map(mul, row, column), 0.0)
            result.append(alpha * inner + beta * c[i * n + j])
    return result


def gemm_block(m, n, k, a, b, c, alpha, beta) -> List[float]:
    """Product computed over square tiles; each ``C`` tile is scaled by ``beta`` first."""
    a, b, out = _checked(m, n, k, a, b, c)
    for i0, m_block in _blocks(m, BLOCK_SIZE):
        for j0, n_block in _blocks(n, BLOCK_SIZE):
            for i in range(i0, i0 + m_block):
                for j in range(j0, j0 + n_block):
                    out[i * n + j] *= beta
            for k0, k_block in _blocks(k, BLOCK_SIZE):
                for i in range(i0, i0 + m_block):
                    row = a[i * k + k0:i * k + k0 + k_block]
                    for j in range(j0, j0 + n_block):
                        column = b[k0 * n + j:(k0 + k_block) * n + j:n]
                        out[i * n + j] += alpha * sum(map(mul, row, column), 0.0)
    return out


def gemm_block_ijk(m, n, k, a, b, c, alpha, beta) -> List[float]:
    """Tiled accumulation of ``C + A x B`` for square matrices.

    This variant applies neither ``alpha`` nor ``beta``; both are accepted so
    that it can stand in for the other products. Non-square shapes raise
    :class:`ValueError`.
    """
    a, b, out = _checked(m, n, k, a, b, c)
    if not m == n == k:
        raise ValueError("the blocked ijk product needs square matrices")
    size = m
    for k0, k_block in _blocks(size, BLOCK_SIZE):
        for j0, j_block in _blocks(size, BLOCK_SIZE):
            for i in range(size):
                row = a[i * size + k0:i * size + k0 + k_block]
                for j in range(j0, j0 + j_block):
                    total = out[i * size + j]
                    column = b[k0 * size + j:(k0 + k_block) * size + j:size]
                    for x, y in zip(row, column):
                        total += x * y
                    out[i * size + j] = total
    return out


def gemm_block_transposed(m, n, k, a, b, c, alpha, beta) -> List[float]:
    """Tiled product that first stores ``B`` column by column."""
    a, b, out = _checked(m, n, k, a, b, c)
    b_t = [b[p * n + j] for j in range(n) for p in range(k)]
    for i0, m_block in _blocks(m, BLOCK_SIZE):
        for j0, n_block in _blocks(n, BLOCK_SIZE):
            for i in range(i0, i0 + m_block):
                for j in range(j0, j0 + n_block):
                    out[i * n + j] *= beta
            for k0, k_block in _blocks(k, BLOCK_SIZE):
                for i in range(i0, i0 + m_block):
                    row = a[i * k + k0:i * k + k0 + k_block]
                    for j in range(j0, j0 + n_block):
                        column = b_t[j * k + k0:j * k + k0 + k_block]
                        out[i * n + j] += alpha * sum(map(mul, row, column), 0.0)
    return out


def gemm_three_level(m, n, k, a, b, c, alpha, beta) -> List[float]:
    """Panel-packed product with register-sized micro tiles, computing ``C + alpha * A x B``.

    ``beta`` is accepted but not applied.
    """
    a, b, out = _checked(m, n, k, a, b, c)
    for j0, n_block in _blocks(n, PANEL_N):
        for k0, k_block in _blocks(k, PANEL_K):
            packed_b = [
                [b[(k0 + p) * n + j0 + jj] for p in range(k_block)]
                for jj in range(n_block)
            ]
            for i0, m_block in _blocks(m, PANEL_M):
                packed_a = [
                    a[(i0 + ii) * k + k0:(i0 + ii) * k + k0 + k_block]
                    for ii in range(m_block)
                ]
                for jr, r_n in _blocks(n_block, MICRO_N):
                    for ir, r_m in _blocks(m_block, MICRO_M):
                        for p in range(k_block):
                            for ii in range(ir, ir + r_m):
                                a_value = packed_a[ii][p]
                                base = (i0 + ii) * n + j0
                                for jj in range(jr, jr + r_n):
                                    out[base + jj] += alpha * (a_value * packed_b[jj][p])
    return out


def gemm(m, n, k, a, b, c, alpha, beta) -> List[float]:
    """The default product, the blocked ijk variant."""
    return gemm_block_ijk(m, n, k, a, b, c, alpha, beta)