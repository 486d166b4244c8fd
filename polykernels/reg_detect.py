"""Region detection over an integer grid of path sums."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from polykernels.common import Dataset, build_parser, emit, format_values, parse_dataset, timed


class RegDetectSizes(NamedTuple):
    niter: int
    length: int
    maxgrid: int


_SIZES = {
    Dataset.MINI: RegDetectSizes(10, 32, 2),
    Dataset.SMALL: RegDetectSizes(100, 50, 6),
    Dataset.STANDARD: RegDetectSizes(10000, 64, 6),
    Dataset.LARGE: RegDetectSizes(1000, 500, 12),
    Dataset.EXTRALARGE: RegDetectSizes(10000, 500, 12),
}


def sizes(dataset: str | Dataset) -> RegDetectSizes:
    """Problem sizes for a dataset preset."""
    return _SIZES[parse_dataset(dataset)]


def _trunc_div(numerator: np.ndarray, denominator: int) -> np.ndarray:
    """Integer division rounding toward zero."""
    return np.sign(numerator) * (np.abs(numerator) // denominator)


def init_array(maxgrid: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return the initial ``sum_tang``, ``mean`` and ``path`` grids."""
    rows = np.arange(maxgrid, dtype=np.int64)[:, None]
    cols = np.arange(maxgrid, dtype=np.int64)[None, :]
    sum_tang = ((rows + 1) * (cols + 1)).astype(np.int32)
    if maxgrid:
        mean = _trunc_div(rows - cols, maxgrid).astype(np.int32)
        path = _trunc_div(rows * (cols - 1), maxgrid).astype(np.int32)
    else:
        mean = np.zeros((0, 0), dtype=np.int32)
        path = np.zeros((0, 0), dtype=np.int32)
    return sum_tang, mean, path


def _grid(array: np.ndarray, maxgrid: int, name: str) -> np.ndarray:
    array = np.asarray(array)
    if array.ndim != 2 or array.shape[0] < maxgrid or array.shape[1] < maxgrid:
        raise ValueError(f"{name} must be at least {maxgrid}x{maxgrid}, got shape {array.shape}")
    return array[:maxgrid, :maxgrid].astype(np.int32, copy=True)


def kernel_reg_detect(
    niter: int,
    maxgrid: int,
    length: int,
    sum_tang: np.ndarray,
    mean: np.ndarray,
    path: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """Return the updated ``mean`` and ``path`` grids after ``niter`` sweeps.

    Only the upper triangles are rewritten; the inputs are left untouched.
    """
    if niter > 0 and maxgrid > 0 and length < 1:
        raise ValueError("length must be at least 1")
    tang = _grid(sum_tang, maxgrid, "sum_tang")
    mean = _grid(mean, maxgrid, "mean")
    path = _grid(path, maxgrid, "path")
    upper = np.triu(np.ones((maxgrid, maxgrid), dtype=bool))
    for _ in range(niter):
        # The running sum of `length` copies of a cell ends at length * cell.
        mean[upper] = (tang * np.int32(length))[upper]
        if maxgrid:
            path[0, :] = mean[0, :]
            for j in range(1, maxgrid):
                path[j, j:] = path[j - 1, j - 1 : -1] + mean[j, j:]
    return mean, path


def format_output(path: np.ndarray) -> str:
    """Render the path grid the way the benchmark dumps it."""
    values = np.asarray(path).ravel()
    return format_values(values, lambda k: k % 20 == 0, "%d ") + "\n"


def main(argv: list[str] | None = None) -> int:
    """Run the region detection kernel from the command line."""
    args = build_parser("reg_detect", "Region detection kernel.").parse_args(argv)
    size = sizes(args.dataset)
    sum_tang, mean, path = init_array(size.maxgrid)
    (_mean, result), elapsed = timed(
        kernel_reg_detect, size.niter, size.maxgrid, size.length, sum_tang, mean, path
    )
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        emit(format_output(result))
    return 0