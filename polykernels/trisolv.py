"""Forward substitution for a lower triangular system A x = c."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from polykernels.common import Dataset, build_parser, emit, format_values, parse_dataset, timed


class TrisolvSizes(NamedTuple):
    n: int


_SIZES = {
    Dataset.MINI: TrisolvSizes(32),
    Dataset.SMALL: TrisolvSizes(500),
    Dataset.STANDARD: TrisolvSizes(4000),
    Dataset.LARGE: TrisolvSizes(8000),
    Dataset.EXTRALARGE: TrisolvSizes(100000),
}


def sizes(dataset: str | Dataset) -> TrisolvSizes:
    """Problem sizes for a dataset preset."""
    return _SIZES[parse_dataset(dataset)]


def init_array(n: int) -> tuple[np.ndarray, np.ndarray]:
    """Return the n-by-n matrix A and the right-hand side c."""
    idx = np.arange(n, dtype=np.float64)
    if not n:
        return np.zeros((0, 0)), np.zeros(0)
    return np.outer(idx, idx) / n, idx / n


def kernel_trisolv(n: int, a: np.ndarray, c: np.ndarray) -> np.ndarray:
    """Solve the lower triangle of A against c by forward substitution.

    Entries above the diagonal are ignored; zero pivots give inf or nan.
    """
    a = np.asarray(a, dtype=np.float64)
    if a.ndim != 2 or a.shape[0] < n or a.shape[1] < n:
        raise ValueError(f"a must be at least {n}x{n}, got shape {a.shape}")
    c = np.asarray(c, dtype=np.float64)
    if c.ndim != 1 or c.shape[0] < n:
        raise ValueError(f"c must have at least {n} entries, got shape {c.shape}")
    x = np.empty(n, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for i in range(n):
            x[i] = (c[i] - a[i, :i] @ x[:i]) / a[i, i]
    return x


def format_output(x: np.ndarray) -> str:
    """Render the solution vector the way the benchmark dumps it."""
    return format_values(np.asarray(x).ravel(), lambda k: k % 20 == 0, "%0.2f ")


def main(argv: list[str] | None = None) -> int:
    """Run the triangular solver kernel from the command line."""
    args = build_parser("trisolv", "Triangular solver kernel.").parse_args(argv)
    size = sizes(args.dataset)
    a, c = init_array(size.n)
    x, elapsed = timed(kernel_trisolv, size.n, a, c)
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        emit(format_output(x))
    return 0