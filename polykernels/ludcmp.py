"""LU decomposition followed by forward and back substitution."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from polykernels.common import Dataset, build_parser, emit, format_values, parse_dataset, timed


class LudcmpSizes(NamedTuple):
    n: int


class LudcmpResult(NamedTuple):
    x: np.ndarray
    a: np.ndarray
    b: np.ndarray
    y: np.ndarray


_SIZES = {
    Dataset.MINI: LudcmpSizes(32),
    Dataset.SMALL: LudcmpSizes(128),
    Dataset.STANDARD: LudcmpSizes(1024),
    Dataset.LARGE: LudcmpSizes(2000),
    Dataset.EXTRALARGE: LudcmpSizes(4000),
}


def sizes(dataset: str | Dataset) -> LudcmpSizes:
    """Problem sizes for a dataset preset."""
    return _SIZES[parse_dataset(dataset)]


def init_array(n: int) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Return A ((n+1) x (n+1)) and the vectors b, x and y of length n + 1.

    As in the benchmark, ``(i + 1) / n`` is an integer quotient.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    idx = np.arange(n + 1, dtype=np.int64)
    step = ((idx + 1) // n).astype(np.float64)
    x = (idx + 1).astype(np.float64)
    y = step / 2.0 + 1
    b = step / 2.0 + 42
    shifted = x.copy()
    a = np.outer(shifted, shifted) / n
    return a, b, x, y


def _vector(v: np.ndarray, length: int, name: str) -> np.ndarray:
    v = np.asarray(v, dtype=np.float64)
    if v.ndim != 1 or v.shape[0] < length:
        raise ValueError(f"{name} must have at least {length} entries, got shape {v.shape}")
    return v[:length].copy()


def kernel_ludcmp(
    n: int, a: np.ndarray, b: np.ndarray, x: np.ndarray, y: np.ndarray
) -> LudcmpResult:
    """Factor the (n+1)-square A and solve A x = b with b[0] replaced by 1.

    Returns the solution with the factored matrix (unit lower L below the
    diagonal, U on and above it), the right-hand side used and the forward
    solution y. Zero pivots give inf or nan. The inputs are left untouched.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    size = n + 1
    a = np.asarray(a, dtype=np.float64)
    if a.ndim != 2 or a.shape[0] < size or a.shape[1] < size:
        raise ValueError(f"a must be at least {size}x{size}, got shape {a.shape}")
    work = a[:size, :size].copy()
    rhs = _vector(b, size, "b")
    _vector(x, size, "x")
    fwd = _vector(y, size, "y")
    sol = np.empty(size, dtype=np.float64)

    rhs[0] = 1.0
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for i in range(n):
            work[i + 1 :, i] = (work[i + 1 :, i] - work[i + 1 :, :i] @ work[:i, i]) / work[i, i]
            work[i + 1, i + 1 :] -= work[i + 1, : i + 1] @ work[: i + 1, i + 1 :]
        fwd[0] = rhs[0]
        for i in range(1, size):
            fwd[i] = rhs[i] - work[i, :i] @ fwd[:i]
        sol[n] = fwd[n] / work[n, n]
        for row in range(n - 1, -1, -1):
            sol[row] = (fwd[row] - work[row, row + 1 :] @ sol[row + 1 :]) / work[row, row]
    return LudcmpResult(sol, work, rhs, fwd)


def format_output(x: np.ndarray) -> str:
    """Render the solution vector the way the benchmark dumps it."""
    return format_values(np.asarray(x).ravel(), lambda k: k % 20 == 0, "%0.2f ")


def main(argv: list[str] | None = None) -> int:
    """Run the ludcmp kernel from the command line."""
    args = build_parser("ludcmp", "LU decomposition and solve kernel.").parse_args(argv)
    size = sizes(args.dataset)
    a, b, x, y = init_array(size.n)
    result, elapsed = timed(kernel_ludcmp, size.n, a, b, x, y)
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        emit(format_output(result.x))
    return 0