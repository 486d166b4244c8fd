"""Matrix transpose and vector multiplication: y = A^T (A x).

The module also holds the small array, preset and reporting helpers that the
dense linear-algebra kernels share.
"""

from __future__ import annotations

from typing import Any, Callable, NamedTuple

import numpy as np

from polykernels.common import Dataset, build_parser, emit, format_values, parse_dataset, timed

_DATASET_ORDER = (
    Dataset.MINI,
    Dataset.SMALL,
    Dataset.STANDARD,
    Dataset.LARGE,
    Dataset.EXTRALARGE,
)


def _presets(kind: type, *values: Any) -> dict:
    """Map each dataset, smallest first, to a sizes tuple; a bare int fills every field."""
    return {
        dataset: kind(*value) if isinstance(value, tuple) else kind(*(value,) * len(kind._fields))
        for dataset, value in zip(_DATASET_ORDER, values, strict=True)
    }


def _grid(rows: int, cols: int, divisor: int, shift: int = 0) -> np.ndarray:
    """Matrix whose entry (i, j) is i * (j + shift) / divisor."""
    i = np.arange(rows, dtype=np.float64)[:, None]
    j = np.arange(cols, dtype=np.float64)[None, :] + shift
    with np.errstate(divide="ignore", invalid="ignore"):
        return (i * j) / np.float64(divisor)


def _matrix(array: np.ndarray, rows: int, cols: int, name: str) -> np.ndarray:
    """The leading rows-by-cols block of ``array`` as float64."""
    array = np.asarray(array, dtype=np.float64)
    if array.ndim != 2 or array.shape[0] < rows or array.shape[1] < cols:
        raise ValueError(f"{name} must be at least {rows}x{cols}, got shape {array.shape}")
    return array[:rows, :cols]


def _vector(values: np.ndarray, n: int, name: str) -> np.ndarray:
    """The first ``n`` entries of a one-dimensional ``values`` as float64."""
    values = np.asarray(values, dtype=np.float64)
    if values.ndim != 1 or values.shape[0] < n:
        raise ValueError(f"{name} must have at least {n} entries, got shape {values.shape}")
    return values[:n]


def _dump_vector(values: np.ndarray) -> str:
    """Render a vector with a line break after every twentieth entry."""
    return format_values(np.asarray(values).ravel(), lambda k: k % 20 == 0, "%0.2f ")


def _dump_strided(ni: int, matrix: np.ndarray, name: str) -> str:
    """Render a matrix, breaking lines on the row stride ``ni``."""
    matrix = np.asarray(matrix)
    if matrix.ndim != 2:
        raise ValueError(f"{name} must be two-dimensional, got shape {matrix.shape}")
    cols = matrix.shape[1]
    breaks = lambda k: ((k // cols) * ni + k % cols) % 20 == 0  # noqa: E731
    return format_values(matrix.ravel(), breaks, "%0.2f ") + "\n"


def _run(
    prog: str,
    description: str,
    argv: list[str] | None,
    sizes_of: Callable[[str], tuple],
    prepare: Callable[[Any], tuple[Callable[..., Any], tuple]],
    render: Callable[[Any, Any], str],
) -> int:
    """Parse the command line, time the kernel ``prepare`` sets up and report."""
    args = build_parser(prog, description).parse_args(argv)
    size = sizes_of(args.dataset)
    kernel, kernel_args = prepare(size)
    result, elapsed = timed(kernel, *kernel_args)
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        emit(render(size, result))
    return 0


class AtaxSizes(NamedTuple):
    nx: int
    ny: int


_SIZES = _presets(AtaxSizes, 32, 500, 4000, 8000, 100000)


def sizes(dataset: str | Dataset) -> AtaxSizes:
    """Problem sizes for a dataset preset."""
    return _SIZES[parse_dataset(dataset)]


def init_array(nx: int, ny: int) -> tuple[np.ndarray, np.ndarray]:
    """Return the nx-by-ny matrix A and the vector x of length ny."""
    x = np.arange(ny, dtype=np.float64) * np.pi
    return _grid(nx, ny, nx, shift=1), x


def kernel_atax(nx: int, ny: int, a: np.ndarray, x: np.ndarray) -> np.ndarray:
    """Return y = A^T (A x) for the leading nx-by-ny block of A."""
    block = _matrix(a, nx, ny, "a")
    tmp = block @ _vector(x, ny, "x")
    return block.T @ tmp


def format_output(y: np.ndarray) -> str:
    """Render the result vector the way the benchmark dumps it."""
    return _dump_vector(y) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Run the atax kernel from the command line."""
    return _run(
        "atax",
        "Matrix transpose and vector multiplication kernel.",
        argv,
        sizes,
        lambda size: (kernel_atax, (size.nx, size.ny, *init_array(size.nx, size.ny))),
        lambda size, y: format_output(y[: size.nx]),
    )