"""Gram-Schmidt QR decomposition of the columns of a matrix."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from polykernels.common import Dataset, build_parser, emit, format_values, parse_dataset, timed


class GramSchmidtSizes(NamedTuple):
    ni: int
    nj: int


class GramSchmidtResult(NamedTuple):
    a: np.ndarray
    r: np.ndarray
    q: np.ndarray


_SIZES = {
    Dataset.MINI: GramSchmidtSizes(32, 32),
    Dataset.SMALL: GramSchmidtSizes(128, 128),
    Dataset.STANDARD: GramSchmidtSizes(512, 512),
    Dataset.LARGE: GramSchmidtSizes(2000, 2000),
    Dataset.EXTRALARGE: GramSchmidtSizes(4000, 4000),
}

_TOLERANCE = 10e-2


def sizes(dataset: str | Dataset) -> GramSchmidtSizes:
    """Problem sizes for a dataset preset."""
    return _SIZES[parse_dataset(dataset)]


def _grid(rows: int, cols: int, shift: int, divisor: int) -> np.ndarray:
    i = np.arange(rows, dtype=np.float64)[:, None]
    j = np.arange(cols, dtype=np.float64)[None, :] + shift
    with np.errstate(divide="ignore", invalid="ignore"):
        return (i * j) / np.float64(divisor)


def init_array(ni: int, nj: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return A (ni x nj), R (nj x nj) and Q (ni x nj)."""
    a = _grid(ni, nj, 0, ni)
    q = _grid(ni, nj, 1, nj)
    r = _grid(nj, nj, 2, nj)
    return a, r, q


def _block(array: np.ndarray, rows: int, cols: int, name: str) -> np.ndarray:
    array = np.asarray(array, dtype=np.float64)
    if array.ndim != 2 or array.shape[0] < rows or array.shape[1] < cols:
        raise ValueError(f"{name} must be at least {rows}x{cols}, got shape {array.shape}")
    return array[:rows, :cols].copy()


def kernel_gramschmidt(
    ni: int, nj: int, a: np.ndarray, r: np.ndarray, q: np.ndarray
) -> GramSchmidtResult:
    """Orthonormalise the columns of A so that A = Q R.

    Returns the worked A, R with its upper triangle filled (the strict lower
    triangle keeps its input values) and Q. Columns of zero norm give nan.
    The inputs are left untouched.
    """
    work = _block(a, ni, nj, "a")
    r_out = _block(r, nj, nj, "r")
    q_out = _block(q, ni, nj, "q")
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for k in range(nj):
            column = work[:, k]
            r_out[k, k] = np.sqrt(column @ column)
            q_out[:, k] = column / r_out[k, k]
            r_out[k, k + 1 :] = q_out[:, k] @ work[:, k + 1 :]
            work[:, k + 1 :] -= np.outer(q_out[:, k], r_out[k, k + 1 :])
    return GramSchmidtResult(work, r_out, q_out)


def _by_row(matrix: np.ndarray) -> str:
    matrix = np.asarray(matrix)
    if matrix.ndim != 2:
        raise ValueError(f"expected a two-dimensional array, got shape {matrix.shape}")
    cols = matrix.shape[1]
    return format_values(matrix.ravel(), lambda k: (k // cols) % 20 == 0, "%0.2f ") + "\n"


def format_output(a: np.ndarray, r: np.ndarray, q: np.ndarray) -> str:
    """Render A, R and Q the way the benchmark dumps them."""
    return _by_row(a) + _by_row(r) + _by_row(q)


def _section(title: str, matrix: np.ndarray) -> str:
    matrix = np.asarray(matrix)
    if matrix.ndim != 2:
        raise ValueError(f"{title} must be two-dimensional, got shape {matrix.shape}")
    rows = "".join(format_values(row, None, "%0.2f ") + "\n" for row in matrix)
    return f"{title}\n{rows}"


def format_sections(a: np.ndarray, r: np.ndarray, q: np.ndarray) -> str:
    """Render A, Q and R as titled sections, one matrix row per line."""
    return _section("A", a) + _section("Q", q) + _section("R", r)


def compare_results(x: np.ndarray, x_cmp: np.ndarray) -> float:
    """Check two matrices agree within 0.1 and return the largest difference.

    Raises ``ValueError`` naming the first position that differs by more.
    """
    x = np.asarray(x, dtype=np.float64)
    x_cmp = np.asarray(x_cmp, dtype=np.float64)
    if x.shape != x_cmp.shape:
        raise ValueError(f"shapes differ: {x.shape} and {x_cmp.shape}")
    diff = np.abs(x - x_cmp)
    bad = np.argwhere(~(diff <= _TOLERANCE))
    if bad.size:
        i, j = (int(v) for v in bad[0])
        raise ValueError(
            f"Different value at ({i}, {j}): {x[i, j]:.5f} {x_cmp[i, j]:.5f}"
        )
    return float(diff.max()) if diff.size else 0.0


def main(argv: list[str] | None = None) -> int:
    """Run the Gram-Schmidt kernel from the command line."""
    args = build_parser("gramschmidt", "Gram-Schmidt decomposition kernel.").parse_args(argv)
    size = sizes(args.dataset)
    a, r, q = init_array(size.ni, size.nj)
    result, elapsed = timed(kernel_gramschmidt, size.ni, size.nj, a, r, q)
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        emit(format_output(result.a, result.r, result.q))
    return 0