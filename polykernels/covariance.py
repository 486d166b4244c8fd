"""Covariance matrix of the column vectors of a data matrix."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from polykernels.common import Dataset, build_parser, emit, format_values, parse_dataset, timed


class CovarianceSizes(NamedTuple):
    m: int
    n: int


_SIZES = {
    Dataset.MINI: CovarianceSizes(32, 32),
    Dataset.SMALL: CovarianceSizes(500, 500),
    Dataset.STANDARD: CovarianceSizes(1000, 1000),
    Dataset.LARGE: CovarianceSizes(2000, 2000),
    Dataset.EXTRALARGE: CovarianceSizes(4000, 4000),
}


def sizes(dataset: str | Dataset) -> CovarianceSizes:
    """Problem sizes for a dataset preset."""
    return _SIZES[parse_dataset(dataset)]


def init_array(m: int, n: int) -> tuple[float, np.ndarray]:
    """Return ``float_n`` and the m-by-n input data."""
    rows = np.arange(m, dtype=np.float64)[:, None]
    cols = np.arange(n, dtype=np.float64)[None, :]
    data = (rows * cols) / m if m else np.zeros((0, n))
    return 1.2, data


def _block(data: np.ndarray, rows: int, cols: int) -> np.ndarray:
    data = np.asarray(data)
    if data.ndim != 2 or data.shape[0] < rows or data.shape[1] < cols:
        raise ValueError(f"data must be at least {rows}x{cols}, got shape {data.shape}")
    return data[:rows, :cols]


def kernel_covariance(
    m: int, n: int, float_n: float, data: np.ndarray
) -> tuple[np.ndarray, np.ndarray]:
    """Return the m-by-m covariance matrix and the column means.

    The input is left untouched; its first n rows and m columns are used.
    """
    block = _block(data, n, m).astype(np.float64, copy=True)
    mean = block.sum(axis=0) / float_n
    block -= mean
    symmat = block.T @ block
    return symmat, mean


def format_output(symmat: np.ndarray) -> str:
    """Render the covariance matrix the way the benchmark dumps it."""
    values = np.asarray(symmat).ravel()
    return format_values(values, lambda k: k % 20 == 0, "%0.2f ") + "\n"


def main(argv: list[str] | None = None) -> int:
    """Run the covariance kernel from the command line."""
    args = build_parser("covariance", "Covariance matrix kernel.").parse_args(argv)
    size = sizes(args.dataset)
    float_n, data = init_array(size.m, size.n)
    (symmat, _mean), elapsed = timed(kernel_covariance, size.m, size.n, float_n, data)
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        emit(format_output(symmat))
    return 0