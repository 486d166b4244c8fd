"""Two chained matrix multiplications: D := alpha*A*B*C + beta*D."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from polykernels.atax import _dump_strided, _grid, _matrix, _presets, _run
from polykernels.common import Dataset, parse_dataset


class TwoMmSizes(NamedTuple):
    ni: int
    nj: int
    nk: int
    nl: int


_SIZES = _presets(TwoMmSizes, 32, 128, 1024, 2000, 4000)


def sizes(dataset: str | Dataset) -> TwoMmSizes:
    """Problem sizes for a dataset preset."""
    return _SIZES[parse_dataset(dataset)]


def init_array(
    ni: int, nj: int, nk: int, nl: int
) -> tuple[float, float, np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Return ``alpha``, ``beta`` and the matrices A, B, C and D."""
    a = _grid(ni, nk, ni)
    b = _grid(nk, nj, nj, shift=1)
    c = _grid(nl, nj, nl, shift=3)
    d = _grid(ni, nl, nk, shift=2)
    return 32412.0, 2123.0, a, b, c, d


def kernel_two_mm(
    ni: int,
    nj: int,
    nk: int,
    nl: int,
    alpha: float,
    beta: float,
    a: np.ndarray,
    b: np.ndarray,
    c: np.ndarray,
    d: np.ndarray,
) -> np.ndarray:
    """Return the new D = alpha*A*B*C + beta*D; the inputs are left untouched."""
    tmp = alpha * (_matrix(a, ni, nk, "a") @ _matrix(b, nk, nj, "b"))
    return beta * _matrix(d, ni, nl, "d") + tmp @ _matrix(c, nj, nl, "c")


def format_output(ni: int, d: np.ndarray) -> str:
    """Render D the way the benchmark dumps it, breaking lines on row stride ``ni``."""
    return _dump_strided(ni, d, "d")


def main(argv: list[str] | None = None) -> int:
    """Run the 2mm kernel from the command line."""
    return _run(
        "2mm",
        "Two matrix multiplications kernel.",
        argv,
        sizes,
        lambda size: (kernel_two_mm, (*size, *init_array(*size))),
        lambda size, result: format_output(size.ni, result),
    )