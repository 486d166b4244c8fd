"""Durbin's algorithm for Toeplitz systems, keeping every intermediate column."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from polykernels.common import Dataset, build_parser, emit, format_values, parse_dataset, timed


class DurbinSizes(NamedTuple):
    n: int


class DurbinResult(NamedTuple):
    out: np.ndarray
    y: np.ndarray
    sums: np.ndarray
    alpha: np.ndarray
    beta: np.ndarray


_SIZES = {
    Dataset.MINI: DurbinSizes(32),
    Dataset.SMALL: DurbinSizes(500),
    Dataset.STANDARD: DurbinSizes(4000),
    Dataset.LARGE: DurbinSizes(8000),
    Dataset.EXTRALARGE: DurbinSizes(100000),
}


def sizes(dataset: str | Dataset) -> DurbinSizes:
    """Problem sizes for a dataset preset."""
    return _SIZES[parse_dataset(dataset)]


def init_array(
    n: int,
) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Return the matrices y and sums and the vectors alpha, beta and r.

    As in the benchmark, ``(i + 1) / n`` is an integer quotient, so beta and r
    are zero except in their last entry.
    """
    if not n:
        return np.zeros((0, 0)), np.zeros((0, 0)), np.zeros(0), np.zeros(0), np.zeros(0)
    idx = np.arange(n, dtype=np.int64)
    step = ((idx + 1) // n).astype(np.float64)
    fidx = idx.astype(np.float64)
    y = np.outer(fidx, fidx) / n
    return y, y.copy(), fidx, step / 2.0, step / 4.0


def _square(array: np.ndarray, n: int, name: str) -> np.ndarray:
    array = np.asarray(array, dtype=np.float64)
    if array.ndim != 2 or array.shape[0] < n or array.shape[1] < n:
        raise ValueError(f"{name} must be at least {n}x{n}, got shape {array.shape}")
    return array[:n, :n].copy()


def _vector(v: np.ndarray, n: int, name: str) -> np.ndarray:
    v = np.asarray(v, dtype=np.float64)
    if v.ndim != 1 or v.shape[0] < n:
        raise ValueError(f"{name} must have at least {n} entries, got shape {v.shape}")
    return v[:n].copy()


def kernel_durbin(
    n: int,
    y: np.ndarray,
    sums: np.ndarray,
    alpha: np.ndarray,
    beta: np.ndarray,
    r: np.ndarray,
) -> DurbinResult:
    """Run Durbin's recursion on r and return the last column of y with all workspaces.

    The inputs are left untouched; entries the recursion never writes keep
    their input values.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    y = _square(y, n, "y")
    sums = _square(sums, n, "sums")
    alpha = _vector(alpha, n, "alpha")
    beta = _vector(beta, n, "beta")
    r = _vector(r, n, "r")

    y[0, 0] = r[0]
    beta[0] = 1.0
    alpha[0] = r[0]
    for k in range(1, n):
        beta[k] = beta[k - 1] - alpha[k - 1] * alpha[k - 1] * beta[k - 1]
        sums[0, k] = r[k]
        sums[1 : k + 1, k] = r[k] + np.cumsum(r[k - 1 :: -1] * y[:k, k - 1])
        alpha[k] = -sums[k, k] * beta[k]
        y[:k, k] = y[:k, k - 1] + alpha[k] * y[k - 1 :: -1, k - 1]
        y[k, k] = alpha[k]
    return DurbinResult(y[:, n - 1].copy(), y, sums, alpha, beta)


def format_output(out: np.ndarray) -> str:
    """Render the output vector the way the benchmark dumps it."""
    return format_values(np.asarray(out).ravel(), lambda k: k % 20 == 0, "%0.2f ")


def main(argv: list[str] | None = None) -> int:
    """Run the Durbin kernel from the command line."""
    args = build_parser("durbin", "Toeplitz system solver kernel.").parse_args(argv)
    size = sizes(args.dataset)
    y, sums, alpha, beta, r = init_array(size.n)
    result, elapsed = timed(kernel_durbin, size.n, y, sums, alpha, beta, r)
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        emit(format_output(result.out))
    return 0