"""Three matrix multiplications: G := (A*B) * (C*D)."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from polykernels.atax import _dump_strided, _grid, _matrix, _presets, _run
from polykernels.common import Dataset, parse_dataset


class ThreeMmSizes(NamedTuple):
    ni: int
    nj: int
    nk: int
    nl: int
    nm: int


_SIZES = _presets(ThreeMmSizes, 32, 128, 1024, 2000, 4000)


def sizes(dataset: str | Dataset) -> ThreeMmSizes:
    """Problem sizes for a dataset preset."""
    return _SIZES[parse_dataset(dataset)]


def init_array(
    ni: int, nj: int, nk: int, nl: int, nm: int
) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Return the input matrices A, B, C and D."""
    a = _grid(ni, nk, ni)
    b = _grid(nk, nj, nj, shift=1)
    c = _grid(nj, nm, nl, shift=3)
    d = _grid(nm, nl, nk, shift=2)
    return a, b, c, d


def kernel_three_mm(
    ni: int,
    nj: int,
    nk: int,
    nl: int,
    nm: int,
    a: np.ndarray,
    b: np.ndarray,
    c: np.ndarray,
    d: np.ndarray,
) -> np.ndarray:
    """Return G = (A*B) * (C*D) for the leading blocks of the inputs."""
    e = _matrix(a, ni, nk, "a") @ _matrix(b, nk, nj, "b")
    f = _matrix(c, nj, nm, "c") @ _matrix(d, nm, nl, "d")
    return e @ f


def format_output(ni: int, g: np.ndarray) -> str:
    """Render G the way the benchmark dumps it, breaking lines on row stride ``ni``."""
    return _dump_strided(ni, g, "g")


def main(argv: list[str] | None = None) -> int:
    """Run the 3mm kernel from the command line."""
    return _run(
        "3mm",
        "Three matrix multiplications kernel.",
        argv,
        sizes,
        lambda size: (kernel_three_mm, (*size, *init_array(*size))),
        lambda size, g: format_output(size.ni, g),
    )