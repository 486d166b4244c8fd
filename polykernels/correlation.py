"""Correlation matrix of the column vectors of a data matrix (single precision)."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from polykernels.common import Dataset, build_parser, emit, format_values, parse_dataset, timed


class CorrelationSizes(NamedTuple):
    m: int
    n: int


_SIZES = {
    Dataset.MINI: CorrelationSizes(32, 32),
    Dataset.SMALL: CorrelationSizes(500, 500),
    Dataset.STANDARD: CorrelationSizes(1000, 1000),
    Dataset.LARGE: CorrelationSizes(2000, 2000),
    Dataset.EXTRALARGE: CorrelationSizes(4000, 4000),
}

_EPS = np.float32(0.1)


def sizes(dataset: str | Dataset) -> CorrelationSizes:
    """Problem sizes for a dataset preset."""
    return _SIZES[parse_dataset(dataset)]


def init_array(m: int, n: int) -> tuple[np.float32, np.ndarray]:
    """Return ``float_n`` and the m-by-n input data."""
    rows = np.arange(m, dtype=np.float32)[:, None]
    cols = np.arange(n, dtype=np.float32)[None, :]
    data = (rows * cols) / np.float32(m) if m else np.zeros((0, n), dtype=np.float32)
    return np.float32(1.2), data.astype(np.float32)


def _block(data: np.ndarray, rows: int, cols: int) -> np.ndarray:
    data = np.asarray(data)
    if data.ndim != 2 or data.shape[0] < rows or data.shape[1] < cols:
        raise ValueError(f"data must be at least {rows}x{cols}, got shape {data.shape}")
    return data[:rows, :cols]


def kernel_correlation(
    m: int, n: int, float_n: float, data: np.ndarray
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return the m-by-m correlation matrix with the column means and deviations.

    The input is left untouched; its first n rows and m columns are used.
    """
    if m < 1:
        raise ValueError("m must be at least 1")
    block = _block(data, n, m).astype(np.float32, copy=True)
    scale = np.float32(float_n)

    mean = (block.sum(axis=0, dtype=np.float32) / scale).astype(np.float32)
    centered = block - mean
    stddev = np.sqrt((centered * centered).sum(axis=0, dtype=np.float32) / scale)
    # Near-zero deviations would cause a zero divide below.
    stddev = np.where(stddev <= _EPS, np.float32(1.0), stddev).astype(np.float32)

    normalized = (centered / (np.sqrt(np.float64(scale)) * stddev)).astype(np.float32)
    symmat = (normalized.T @ normalized).astype(np.float32)
    np.fill_diagonal(symmat, np.float32(1.0))
    return symmat, mean, stddev


def format_output(symmat: np.ndarray) -> str:
    """Render the correlation matrix the way the benchmark dumps it."""
    values = np.asarray(symmat).ravel()
    return format_values(values, lambda k: k % 20 == 0, "%0.2f ") + "\n"


def main(argv: list[str] | None = None) -> int:
    """Run the correlation kernel from the command line."""
    args = build_parser("correlation", "Correlation matrix kernel.").parse_args(argv)
    size = sizes(args.dataset)
    float_n, data = init_array(size.m, size.n)
    (symmat, _mean, _stddev), elapsed = timed(
        kernel_correlation, size.m, size.n, float_n, data
    )
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        emit(format_output(symmat))
    return 0