"""Symmetric rank-2k update: C := alpha*A*B' + alpha*B*A' + beta*C."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from polykernels.common import Dataset, build_parser, emit, format_values, parse_dataset, timed


class Syr2kSizes(NamedTuple):
    ni: int
    nj: int


_SIZES = {
    Dataset.MINI: Syr2kSizes(32, 32),
    Dataset.SMALL: Syr2kSizes(128, 128),
    Dataset.STANDARD: Syr2kSizes(1024, 1024),
    Dataset.LARGE: Syr2kSizes(2000, 2000),
    Dataset.EXTRALARGE: Syr2kSizes(4000, 4000),
}


def sizes(dataset: str | Dataset) -> Syr2kSizes:
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
    """Return ``alpha``, ``beta`` and the matrices C (ni x ni), A and B (ni x nj)."""
    a = _grid(ni, nj, ni)
    return 32412.0, 2123.0, _grid(ni, ni, ni), a, a.copy()


def _block(array: np.ndarray, rows: int, cols: int, name: str) -> np.ndarray:
    array = np.asarray(array, dtype=np.float64)
    if array.ndim != 2 or array.shape[0] < rows or array.shape[1] < cols:
        raise ValueError(f"{name} must be at least {rows}x{cols}, got shape {array.shape}")
    return array[:rows, :cols]


def kernel_syr2k(
    ni: int,
    nj: int,
    alpha: float,
    beta: float,
    c: np.ndarray,
    a: np.ndarray,
    b: np.ndarray,
) -> np.ndarray:
    """Return the new C = alpha*A*B' + alpha*B*A' + beta*C; the inputs are left untouched."""
    c_blk = _block(c, ni, ni, "c")
    a_blk = _block(a, ni, nj, "a")
    b_blk = _block(b, ni, nj, "b")
    return beta * c_blk + alpha * (a_blk @ b_blk.T) + alpha * (b_blk @ a_blk.T)


def format_output(c: np.ndarray) -> str:
    """Render C the way the benchmark dumps it."""
    return format_values(np.asarray(c).ravel(), lambda k: k % 20 == 0, "%0.2f ") + "\n"


def main(argv: list[str] | None = None) -> int:
    """Run the syr2k kernel from the command line."""
    args = build_parser("syr2k", "Symmetric rank-2k update kernel.").parse_args(argv)
    size = sizes(args.dataset)
    alpha, beta, c, a, b = init_array(size.ni, size.nj)
    result, elapsed = timed(kernel_syr2k, size.ni, size.nj, alpha, beta, c, a, b)
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        emit(format_output(result))
    return 0