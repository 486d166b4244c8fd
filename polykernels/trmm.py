"""Triangular matrix multiply updating B in place: B := alpha*A'*B with A triangular."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from polykernels.common import Dataset, build_parser, emit, format_values, parse_dataset, timed


class TrmmSizes(NamedTuple):
    ni: int


_SIZES = {
    Dataset.MINI: TrmmSizes(32),
    Dataset.SMALL: TrmmSizes(128),
    Dataset.STANDARD: TrmmSizes(1024),
    Dataset.LARGE: TrmmSizes(2000),
    Dataset.EXTRALARGE: TrmmSizes(4000),
}


def sizes(dataset: str | Dataset) -> TrmmSizes:
    """Problem sizes for a dataset preset."""
    return _SIZES[parse_dataset(dataset)]


def init_array(ni: int) -> tuple[float, np.ndarray, np.ndarray]:
    """Return ``alpha`` and the ni-by-ni matrices A and B."""
    if not ni:
        return 32412.0, np.zeros((0, 0)), np.zeros((0, 0))
    idx = np.arange(ni, dtype=np.float64)
    a = np.outer(idx, idx) / ni
    return 32412.0, a, a.copy()


def _block(array: np.ndarray, n: int, name: str) -> np.ndarray:
    array = np.asarray(array, dtype=np.float64)
    if array.ndim != 2 or array.shape[0] < n or array.shape[1] < n:
        raise ValueError(f"{name} must be at least {n}x{n}, got shape {array.shape}")
    return array[:n, :n]


def kernel_trmm(ni: int, alpha: float, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Return B after ``B[i][j] += alpha * A[i][k] * B[j][k]`` for all k < i.

    The update runs row by row in place, so each row reads the rows above it
    already updated and, on the diagonal, its own freshly updated entries.
    Only the strict lower triangle of A is used; the inputs are left untouched.
    """
    a_blk = _block(a, ni, "a")
    work = _block(b, ni, "b").copy()
    for i in range(1, ni):
        coeffs = a_blk[i, :i]
        delta = alpha * (work[:, :i] @ coeffs)
        diagonal = work[i, i]
        work[i] += delta
        work[i, i] = diagonal + alpha * (work[i, :i] @ coeffs)
    return work


def format_output(b: np.ndarray) -> str:
    """Render B the way the benchmark dumps it."""
    return format_values(np.asarray(b).ravel(), lambda k: k % 20 == 0, "%0.2f ") + "\n"


def main(argv: list[str] | None = None) -> int:
    """Run the trmm kernel from the command line."""
    args = build_parser("trmm", "Triangular matrix multiply kernel.").parse_args(argv)
    size = sizes(args.dataset)
    alpha, a, b = init_array(size.ni)
    result, elapsed = timed(kernel_trmm, size.ni, alpha, a, b)
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        emit(format_output(result))
    return 0