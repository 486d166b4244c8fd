"""Cholesky decomposition storing the factor below the diagonal and 1/L_ii apart."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from polykernels.common import Dataset, build_parser, emit, format_values, parse_dataset, timed


class CholeskySizes(NamedTuple):
    n: int


_SIZES = {
    Dataset.MINI: CholeskySizes(32),
    Dataset.SMALL: CholeskySizes(128),
    Dataset.STANDARD: CholeskySizes(1024),
    Dataset.LARGE: CholeskySizes(2000),
    Dataset.EXTRALARGE: CholeskySizes(4000),
}


def sizes(dataset: str | Dataset) -> CholeskySizes:
    """Problem sizes for a dataset preset."""
    return _SIZES[parse_dataset(dataset)]


def init_array(n: int) -> tuple[np.ndarray, np.ndarray]:
    """Return the vector p and the n-by-n matrix A, every entry 1/n."""
    value = 1.0 / n if n else 0.0
    return np.full(n, value), np.full((n, n), value)


def kernel_cholesky(n: int, p: np.ndarray, a: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Factor A in the Cholesky way.

    Returns ``(p, a)``: ``p[i]`` is ``1 / L[i, i]`` and the strict lower triangle of
    ``a`` holds L; the diagonal and upper triangle keep their input values.
    Non-positive pivots give inf or nan rather than an error.
    """
    a = np.asarray(a, dtype=np.float64)
    if a.ndim != 2 or a.shape[0] < n or a.shape[1] < n:
        raise ValueError(f"a must be at least {n}x{n}, got shape {a.shape}")
    p = np.asarray(p, dtype=np.float64)
    if p.ndim != 1 or p.shape[0] < n:
        raise ValueError(f"p must have at least {n} entries, got shape {p.shape}")
    work = a[:n, :n].copy()
    inv_diag = p[:n].copy()
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for i in range(n):
            row = work[i, :i]
            x = work[i, i] - row @ row
            inv_diag[i] = 1.0 / np.sqrt(x)
            work[i + 1 :, i] = (work[i, i + 1 :] - work[i + 1 :, :i] @ row) * inv_diag[i]
    return inv_diag, work


def format_output(a: np.ndarray, stride: int) -> str:
    """Render A the way the benchmark dumps it, breaking lines on row stride ``stride``."""
    a = np.asarray(a)
    if a.ndim != 2:
        raise ValueError(f"a must be two-dimensional, got shape {a.shape}")
    cols = a.shape[1]
    return format_values(
        a.ravel(), lambda k: ((k // cols) * stride + k % cols) % 20 == 0, "%0.2f "
    )


def main(argv: list[str] | None = None) -> int:
    """Run the Cholesky kernel from the command line."""
    args = build_parser("cholesky", "Cholesky decomposition kernel.").parse_args(argv)
    size = sizes(args.dataset)
    p, a = init_array(size.n)
    (_p, result), elapsed = timed(kernel_cholesky, size.n, p, a)
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        emit(format_output(result, size.n))
    return 0