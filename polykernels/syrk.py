"""Symmetric rank-k update: C := alpha*A*A' + beta*C."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from polykernels.common import Dataset, build_parser, emit, format_values, parse_dataset, timed


class SyrkSizes(NamedTuple):
    ni: int
    nj: int


_SIZES = {
    Dataset.MINI: SyrkSizes(32, 32),
    Dataset.SMALL: SyrkSizes(128, 128),
    Dataset.STANDARD: SyrkSizes(1024, 1024),
    Dataset.LARGE: SyrkSizes(2000, 2000),
    Dataset.EXTRALARGE: SyrkSizes(4000, 4000),
}


def sizes(dataset: str | Dataset) -> SyrkSizes:
    """Problem sizes for a dataset preset."""
    return _SIZES[parse_dataset(dataset)]


def _grid(rows: int, cols: int, divisor: int) -> np.ndarray:
    i = np.arange(rows, dtype=np.float64)[:, None]
    j = np.arange(cols, dtype=np.float64)[None, :]
    with np.errstate(divide="ignore", invalid="ignore"):
        return (i * j) / np.float64(divisor)


def init_array(ni: int, nj: int) -> tuple[float, float, np.ndarray, np.ndarray]:
    """Return ``alpha``, ``beta`` and the matrices C (ni x ni) and A (ni x nj)."""
    return 32412.0, 2123.0, _grid(ni, ni, ni), _grid(ni, nj, ni)


def _block(array: np.ndarray, rows: int, cols: int, name: str) -> np.ndarray:
    array = np.asarray(array, dtype=np.float64)
    if array.ndim != 2 or array.shape[0] < rows or array.shape[1] < cols:
        raise ValueError(f"{name} must be at least {rows}x{cols}, got shape {array.shape}")
    return array[:rows, :cols]


def kernel_syrk(
    ni: int, nj: int, alpha: float, beta: float, c: np.ndarray, a: np.ndarray
) -> np.ndarray:
    """Return the new C = alpha*A*A' + beta*C; the inputs are left untouched."""
    c_blk = _block(c, ni, ni, "c")
    a_blk = _block(a, ni, nj, "a")
    return beta * c_blk + alpha * (a_blk @ a_blk.T)


def format_output(c: np.ndarray) -> str:
    """Render C the way the benchmark dumps it."""
    return format_values(np.asarray(c).ravel(), lambda k: k % 20 == 0, "%0.2f ") + "\n"


def main(argv: list[str] | None = None) -> int:
    """Run the syrk kernel from the command line."""
    args = build_parser("syrk", "Symmetric rank-k update kernel.").parse_args(argv)
    size = sizes(args.dataset)
    alpha, beta, c, a = init_array(size.ni, size.nj)
    result, elapsed = timed(kernel_syrk, size.ni, size.nj, alpha, beta, c, a)
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        emit(format_output(result))
    return 0