"""General matrix multiply: C := alpha*A*B + beta*C."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from polykernels.atax import _dump_strided, _grid, _matrix, _presets, _run
from polykernels.common import Dataset, parse_dataset


class GemmSizes(NamedTuple):
    ni: int
    nj: int
    nk: int


_SIZES = _presets(GemmSizes, 32, 128, 1024, 2000, 4000)


def sizes(dataset: str | Dataset) -> GemmSizes:
    """Problem sizes for a dataset preset."""
    return _SIZES[parse_dataset(dataset)]


def init_array(
    ni: int, nj: int, nk: int
) -> tuple[float, float, np.ndarray, np.ndarray, np.ndarray]:
    """Return ``alpha``, ``beta`` and the matrices C, A and B."""
    return 32412.0, 2123.0, _grid(ni, nj, ni), _grid(ni, nk, ni), _grid(nk, nj, ni)


def kernel_gemm(
    ni: int,
    nj: int,
    nk: int,
    alpha: float,
    beta: float,
    c: np.ndarray,
    a: np.ndarray,
    b: np.ndarray,
) -> np.ndarray:
    """Return the new C = alpha*A*B + beta*C; the inputs are left untouched."""
    product = _matrix(a, ni, nk, "a") @ _matrix(b, nk, nj, "b")
    return beta * _matrix(c, ni, nj, "c") + alpha * product


def format_output(ni: int, c: np.ndarray) -> str:
    """Render C the way the benchmark dumps it, breaking lines on row stride ``ni``."""
    return _dump_strided(ni, c, "c")


def main(argv: list[str] | None = None) -> int:
    """Run the gemm kernel from the command line."""
    return _run(
        "gemm",
        "General matrix multiply kernel.",
        argv,
        sizes,
        lambda size: (kernel_gemm, (*size, *init_array(*size))),
        lambda size, result: format_output(size.ni, result),
    )