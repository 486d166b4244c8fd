"""LU decomposition without pivoting, stored in place."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from polykernels.common import Dataset, build_parser, emit, format_values, parse_dataset, timed


class LuSizes(NamedTuple):
    n: int


_SIZES = {
    Dataset.MINI: LuSizes(32),
    Dataset.SMALL: LuSizes(128),
    Dataset.STANDARD: LuSizes(1024),
    Dataset.LARGE: LuSizes(2000),
    Dataset.EXTRALARGE: LuSizes(4000),
}


def sizes(dataset: str | Dataset) -> LuSizes:
    """Problem sizes for a dataset preset."""
    return _SIZES[parse_dataset(dataset)]


def init_array(n: int) -> np.ndarray:
    """Return the n-by-n matrix with entries (i + 1) * (j + 1) / n."""
    if not n:
        return np.zeros((0, 0))
    idx = np.arange(1, n + 1, dtype=np.float64)
    return np.outer(idx, idx) / n


def kernel_lu(n: int, a: np.ndarray) -> np.ndarray:
    """Factor A = L U and return both factors in one matrix.

    The lower triangle with the diagonal holds L; the strict upper triangle
    holds U, whose diagonal is all ones. Zero pivots give inf or nan. The
    input is left untouched.
    """
    a = np.asarray(a, dtype=np.float64)
    if a.ndim != 2 or a.shape[0] < n or a.shape[1] < n:
        raise ValueError(f"a must be at least {n}x{n}, got shape {a.shape}")
    work = a[:n, :n].copy()
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for k in range(n):
            work[k, k + 1 :] /= work[k, k]
            work[k + 1 :, k + 1 :] -= np.outer(work[k + 1 :, k], work[k, k + 1 :])
    return work


def format_output(a: np.ndarray) -> str:
    """Render the factored matrix the way the benchmark dumps it."""
    return format_values(np.asarray(a).ravel(), lambda k: k % 20 == 0, "%0.2f ") + "\n"


def main(argv: list[str] | None = None) -> int:
    """Run the LU kernel from the command line."""
    args = build_parser("lu", "LU decomposition kernel.").parse_args(argv)
    size = sizes(args.dataset)
    a = init_array(size.n)
    result, elapsed = timed(kernel_lu, size.n, a)
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        emit(format_output(result))
    return 0