"""Vector multiplication and matrix addition (gemver)."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from polykernels.atax import _dump_vector, _grid, _matrix, _presets, _run, _vector
from polykernels.common import Dataset, parse_dataset


class GemverSizes(NamedTuple):
    n: int


_SIZES = _presets(GemverSizes, 32, 500, 4000, 8000, 100000)


def sizes(dataset: str | Dataset) -> GemverSizes:
    """Problem sizes for a dataset preset."""
    return _SIZES[parse_dataset(dataset)]


def init_array(n: int) -> tuple:
    """Return ``alpha``, ``beta``, A and the vectors u1, v1, u2, v2, w, x, y, z.

    As in the benchmark, ``(i + 1) / n`` is an integer quotient, so the scaled
    vectors are zero except in their last entry.
    """
    idx = np.arange(n, dtype=np.int64)
    step = ((idx + 1) // max(n, 1)).astype(np.float64)
    u1 = idx.astype(np.float64)
    x = np.zeros(n)
    w = np.zeros(n)
    return (
        43532.0,
        12313.0,
        _grid(n, n, n),
        u1,
        step / 4.0,
        step / 2.0,
        step / 6.0,
        w,
        x,
        step / 8.0,
        step / 9.0,
    )


def kernel_gemver(
    n: int,
    alpha: float,
    beta: float,
    a: np.ndarray,
    u1: np.ndarray,
    v1: np.ndarray,
    u2: np.ndarray,
    v2: np.ndarray,
    w: np.ndarray,
    x: np.ndarray,
    y: np.ndarray,
    z: np.ndarray,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return the updated ``(a, x, w)``; the inputs are left untouched."""
    block = _matrix(a, n, n, "a")
    names = ("u1", "v1", "u2", "v2", "w", "x", "y", "z")
    u1, v1, u2, v2, w, x, y, z = (
        _vector(vec, n, name) for vec, name in zip((u1, v1, u2, v2, w, x, y, z), names)
    )
    a_new = block + np.outer(u1, v1) + np.outer(u2, v2)
    x_new = x + beta * (a_new.T @ y) + z
    w_new = w + alpha * (a_new @ x_new)
    return a_new, x_new, w_new


def format_output(w: np.ndarray) -> str:
    """Render w the way the benchmark dumps it."""
    return _dump_vector(w)


def main(argv: list[str] | None = None) -> int:
    """Run the gemver kernel from the command line."""
    return _run(
        "gemver",
        "Vector multiplication and matrix addition kernel.",
        argv,
        sizes,
        lambda size: (kernel_gemver, (size.n, *init_array(size.n))),
        lambda size, result: format_output(result[2]),
    )