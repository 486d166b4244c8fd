"""Multiresolution analysis kernel: each (r, q) slice of A is multiplied by C4."""

from __future__ import annotations

from typing import NamedTuple

import numpy

from polykernels.common import Dataset, build_parser, emit, format_values, parse_dataset, timed


class DoitgenSizes(NamedTuple):
    nr: int
    nq: int
    np: int


_SIZES = {
    Dataset.MINI: DoitgenSizes(10, 10, 10),
    Dataset.SMALL: DoitgenSizes(32, 32, 32),
    Dataset.STANDARD: DoitgenSizes(128, 128, 128),
    Dataset.LARGE: DoitgenSizes(256, 256, 256),
    Dataset.EXTRALARGE: DoitgenSizes(1000, 1000, 1000),
}


def sizes(dataset: str | Dataset) -> DoitgenSizes:
    """Problem sizes for a dataset preset."""
    return _SIZES[parse_dataset(dataset)]


def init_array(nr: int, nq: int, np: int) -> tuple[numpy.ndarray, numpy.ndarray]:
    """Return the nr-by-nq-by-np array A and the np-by-np matrix C4."""
    if not np:
        return numpy.zeros((nr, nq, 0)), numpy.zeros((0, 0))
    r = numpy.arange(nr, dtype=numpy.float64)[:, None, None]
    q = numpy.arange(nq, dtype=numpy.float64)[None, :, None]
    p = numpy.arange(np, dtype=numpy.float64)[None, None, :]
    a = (r * q + p) / np
    idx = numpy.arange(np, dtype=numpy.float64)
    c4 = numpy.outer(idx, idx) / np
    return a, c4


def kernel_doitgen(
    nr: int, nq: int, np: int, a: numpy.ndarray, c4: numpy.ndarray
) -> tuple[numpy.ndarray, numpy.ndarray]:
    """Return the updated A and the products of each A[r, q, :] with C4.

    As in the benchmark, only the first ``nr`` entries of each product are
    copied back into A, so ``nr`` may not exceed ``np``. The inputs are left
    untouched.
    """
    a = numpy.asarray(a, dtype=numpy.float64)
    if a.ndim != 3 or a.shape[0] < nr or a.shape[1] < nq or a.shape[2] < np:
        raise ValueError(f"a must be at least {nr}x{nq}x{np}, got shape {a.shape}")
    c4 = numpy.asarray(c4, dtype=numpy.float64)
    if c4.ndim != 2 or c4.shape[0] < np or c4.shape[1] < np:
        raise ValueError(f"c4 must be at least {np}x{np}, got shape {c4.shape}")
    if nr > np:
        raise ValueError(f"nr ({nr}) may not exceed np ({np})")
    block = a[:nr, :nq, :np].copy()
    sums = block @ c4[:np, :np]
    block[:, :, :nr] = sums[:, :, :nr]
    return block, sums


def format_output(a: numpy.ndarray) -> str:
    """Render A the way the benchmark dumps it: every value of an r-slice with r % 20 == 0 ends a line."""
    a = numpy.asarray(a)
    if a.ndim != 3:
        raise ValueError(f"a must be three-dimensional, got shape {a.shape}")
    plane = a.shape[1] * a.shape[2]
    return format_values(a.ravel(), lambda k: (k // plane) % 20 == 0, "%0.2f ") + "\n"


def main(argv: list[str] | None = None) -> int:
    """Run the doitgen kernel from the command line."""
    args = build_parser("doitgen", "Multiresolution analysis kernel.").parse_args(argv)
    size = sizes(args.dataset)
    a, c4 = init_array(size.nr, size.nq, size.np)
    (result, _sums), elapsed = timed(kernel_doitgen, size.nr, size.nq, size.np, a, c4)
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        emit(format_output(result))
    return 0