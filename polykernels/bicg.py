"""BiCG sub-kernel: s = A^T r and q = A p."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from polykernels.common import Dataset, build_parser, emit, format_values, parse_dataset, timed


class BicgSizes(NamedTuple):
    nx: int
    ny: int


_SIZES = {
    Dataset.MINI: BicgSizes(32, 32),
    Dataset.SMALL: BicgSizes(500, 500),
    Dataset.STANDARD: BicgSizes(4000, 4000),
    Dataset.LARGE: BicgSizes(8000, 8000),
    Dataset.EXTRALARGE: BicgSizes(100000, 100000),
}


def sizes(dataset: str | Dataset) -> BicgSizes:
    """Problem sizes for a dataset preset."""
    return _SIZES[parse_dataset(dataset)]


def init_array(nx: int, ny: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return the nx-by-ny matrix A and the vectors r (length nx) and p (length ny)."""
    p = np.arange(ny, dtype=np.float64) * np.pi
    r = np.arange(nx, dtype=np.float64) * np.pi
    rows = np.arange(nx, dtype=np.float64)[:, None]
    cols = np.arange(1, ny + 1, dtype=np.float64)[None, :]
    a = (rows * cols) / nx if nx else np.zeros((0, ny))
    return a, r, p


def _vector(v: np.ndarray, length: int, name: str) -> np.ndarray:
    v = np.asarray(v, dtype=np.float64)
    if v.ndim != 1 or v.shape[0] < length:
        raise ValueError(f"{name} must have at least {length} entries, got shape {v.shape}")
    return v[:length]


def kernel_bicg(
    nx: int, ny: int, a: np.ndarray, p: np.ndarray, r: np.ndarray
) -> tuple[np.ndarray, np.ndarray]:
    """Return ``s = A^T r`` (length ny) and ``q = A p`` (length nx)."""
    a = np.asarray(a, dtype=np.float64)
    if a.ndim != 2 or a.shape[0] < nx or a.shape[1] < ny:
        raise ValueError(f"a must be at least {nx}x{ny}, got shape {a.shape}")
    block = a[:nx, :ny]
    s = _vector(r, nx, "r") @ block
    q = block @ _vector(p, ny, "p")
    return s, q


def format_output(s: np.ndarray, q: np.ndarray) -> str:
    """Render s then q the way the benchmark dumps them."""
    every_twenty = lambda k: k % 20 == 0  # noqa: E731
    return (
        format_values(np.asarray(s).ravel(), every_twenty, "%0.2f ")
        + format_values(np.asarray(q).ravel(), every_twenty, "%0.2f ")
        + "\n"
    )


def main(argv: list[str] | None = None) -> int:
    """Run the bicg kernel from the command line."""
    args = build_parser("bicg", "BiCG sub-kernel.").parse_args(argv)
    size = sizes(args.dataset)
    a, r, p = init_array(size.nx, size.ny)
    (s, q), elapsed = timed(kernel_bicg, size.nx, size.ny, a, p, r)
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        emit(format_output(s, q))
    return 0