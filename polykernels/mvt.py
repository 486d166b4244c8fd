"""Matrix vector product and transpose: x1 += A*y_1, x2 += A^T*y_2."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from polykernels.atax import _grid, _matrix, _presets, _run, _vector
from polykernels.common import Dataset, format_values, parse_dataset


class MvtSizes(NamedTuple):
    n: int


_SIZES = _presets(MvtSizes, 32, 500, 4000, 8000, 100000)


def sizes(dataset: str | Dataset) -> MvtSizes:
    """Problem sizes for a dataset preset."""
    return _SIZES[parse_dataset(dataset)]


def init_array(n: int) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Return the vectors x1, x2, y_1, y_2 and the n-by-n matrix A."""
    idx = np.arange(n, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        x1, x2, y_1, y_2 = ((idx + shift) / np.float64(n) for shift in (0, 1, 3, 4))
    return x1, x2, y_1, y_2, _grid(n, n, n)


def kernel_mvt(
    n: int,
    x1: np.ndarray,
    x2: np.ndarray,
    y_1: np.ndarray,
    y_2: np.ndarray,
    a: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """Return ``x1 + A y_1`` and ``x2 + A^T y_2``; the inputs are left untouched."""
    block = _matrix(a, n, n, "a")
    new_x1 = _vector(x1, n, "x1") + block @ _vector(y_1, n, "y_1")
    new_x2 = _vector(x2, n, "x2") + block.T @ _vector(y_2, n, "y_2")
    return new_x1, new_x2


def format_output(x1: np.ndarray, x2: np.ndarray) -> str:
    """Render x1 and x2 interleaved, the way the benchmark dumps them."""
    x1 = np.asarray(x1).ravel()
    x2 = np.asarray(x2).ravel()
    if x1.shape != x2.shape:
        raise ValueError(f"x1 and x2 must have the same length, got {x1.shape} and {x2.shape}")
    pairs = np.column_stack((x1, x2)).ravel()
    return format_values(pairs, lambda k: k % 2 == 1 and (k // 2) % 20 == 0, "%0.2f ")


def main(argv: list[str] | None = None) -> int:
    """Run the mvt kernel from the command line."""
    return _run(
        "mvt",
        "Matrix vector product and transpose kernel.",
        argv,
        sizes,
        lambda size: (kernel_mvt, (size.n, *init_array(size.n))),
        lambda size, result: format_output(*result),
    )