"""Symmetric matrix multiply: C := alpha*A*B + beta*C with A symmetric."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from polykernels.common import Dataset, build_parser, emit, format_values, parse_dataset, timed


class SymmSizes(NamedTuple):
    ni: int
    nj: int


_SIZES = {
    Dataset.MINI: SymmSizes(32, 32),
    Dataset.SMALL: SymmSizes(128, 128),
    Dataset.STANDARD: SymmSizes(1024, 1024),
    Dataset.LARGE: SymmSizes(2000, 2000),
    Dataset.EXTRALARGE: SymmSizes(4000, 4000),
}


def sizes(dataset: str | Dataset) -> SymmSizes:
    """Problem sizes for a dataset preset."""
    return _SIZES[parse_dataset(dataset)]


def _grid(rows: int, cols: int, divisor: int) -> np.ndarray:
    i = np.arange(rows, dtype=np.float64)[:, None]
    j = np.arange(cols, dtype=np.float64)[None, :]
    with np.errstate(divide="ignore", invalid="ignore"):
        return (i * j) / np.float64(divisor)


def init_array(
    ni: int, nj: int
) -> tuple[float, float, np.ndarray, np.ndarray, np.ndarray]:
    """Return ``alpha``, ``beta`` and the matrices C (ni x nj), A (nj x nj) and B (ni x nj)."""
    c = _grid(ni, nj, ni)
    a = _grid(nj, nj, ni)
    b = _grid(ni, nj, ni)
    return 32412.0, 2123.0, c, a, b


def _block(array: np.ndarray, rows: int, cols: int, name: str) -> np.ndarray:
    array = np.asarray(array, dtype=np.float64)
    if array.ndim != 2 or array.shape[0] < rows or array.shape[1] < cols:
        raise ValueError(f"{name} must be at least {rows}x{cols}, got shape {array.shape}")
    return array[:rows, :cols]


def kernel_symm(
    ni: int,
    nj: int,
    alpha: float,
    beta: float,
    c: np.ndarray,
    a: np.ndarray,
    b: np.ndarray,
) -> np.ndarray:
    """Return the updated C; the inputs are left untouched.

    Rows ``k < j - 1`` of column ``j`` are touched for every ``i``, so C, A and B
    need ``max(ni, nj - 1)`` rows; the returned block has that many rows.
    """
    rows = max(ni, nj - 1, 0)
    work = _block(c, rows, nj, "c").copy()
    a_blk = _block(a, rows, ni, "a")
    b_blk = _block(b, rows, nj, "b")
    mask = np.arange(rows)[:, None] < (np.arange(nj)[None, :] - 1)
    for i in range(ni):
        col = np.where(mask, a_blk[:, i][:, None], 0.0)
        work += alpha * col * b_blk[i][None, :]
        acc = (col * b_blk).sum(axis=0)
        work[i] = beta * work[i] + alpha * a_blk[i, i] * b_blk[i] + alpha * acc
    return work


def format_output(ni: int, c: np.ndarray) -> str:
    """Render C the way the benchmark dumps it, breaking lines on row stride ``ni``."""
    c = np.asarray(c)
    if c.ndim != 2:
        raise ValueError(f"c must be two-dimensional, got shape {c.shape}")
    cols = c.shape[1]
    return (
        format_values(c.ravel(), lambda k: ((k // cols) * ni + k % cols) % 20 == 0, "%0.2f ")
        + "\n"
    )


def main(argv: list[str] | None = None) -> int:
    """Run the symm kernel from the command line."""
    args = build_parser("symm", "Symmetric matrix multiply kernel.").parse_args(argv)
    size = sizes(args.dataset)
    alpha, beta, c, a, b = init_array(size.ni, size.nj)
    result, elapsed = timed(kernel_symm, size.ni, size.nj, alpha, beta, c, a, b)
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        emit(format_output(size.ni, result[: size.ni]))
    return 0