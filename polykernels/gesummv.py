"""Scalar, vector and matrix multiplication: y = alpha*A*x + beta*B*x."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from polykernels.atax import _dump_vector, _grid, _matrix, _presets, _run, _vector
from polykernels.common import Dataset, parse_dataset


class GesummvSizes(NamedTuple):
    n: int


_SIZES = _presets(GesummvSizes, 32, 500, 4000, 8000, 100000)


def sizes(dataset: str | Dataset) -> GesummvSizes:
    """Problem sizes for a dataset preset."""
    return _SIZES[parse_dataset(dataset)]


def init_array(n: int) -> tuple[float, float, np.ndarray, np.ndarray, np.ndarray]:
    """Return ``alpha``, ``beta``, the matrices A and B and the vector x."""
    a = _grid(n, n, n)
    with np.errstate(divide="ignore", invalid="ignore"):
        x = np.arange(n, dtype=np.float64) / np.float64(n)
    return 43532.0, 12313.0, a, a.copy(), x


def kernel_gesummv(
    n: int, alpha: float, beta: float, a: np.ndarray, b: np.ndarray, x: np.ndarray
) -> np.ndarray:
    """Return y = alpha*A*x + beta*B*x for the leading n-by-n blocks."""
    x = _vector(x, n, "x")
    tmp = _matrix(a, n, n, "a") @ x
    return alpha * tmp + beta * (_matrix(b, n, n, "b") @ x)


def format_output(y: np.ndarray) -> str:
    """Render y the way the benchmark dumps it."""
    return _dump_vector(y)


def main(argv: list[str] | None = None) -> int:
    """Run the gesummv kernel from the command line."""
    return _run(
        "gesummv",
        "Scalar, vector and matrix multiplication kernel.",
        argv,
        sizes,
        lambda size: (kernel_gesummv, (size.n, *init_array(size.n))),
        lambda size, y: format_output(y),
    )