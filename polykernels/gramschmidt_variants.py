"""Gram-Schmidt variants: the transposed kernel and its alternative drivers."""

from __future__ import annotations

from enum import Enum

import numpy as np

from polykernels.common import build_parser, emit, format_values, timed
from polykernels.gramschmidt import (
    GramSchmidtResult,
    compare_results,
    format_output,
    format_sections,
    init_array,
    kernel_gramschmidt,
    sizes,
)


class Variant(str, Enum):
    """Which driver of the Gram-Schmidt benchmark to run."""

    TRANSPOSE = "transpose"
    STATIC = "static"
    WORKERTHREADS = "workerthreads"


def _grid(rows: int, cols: int, shift_i: int, shift_j: int, divisor: int) -> np.ndarray:
    i = np.arange(rows, dtype=np.float64)[:, None] + shift_i
    j = np.arange(cols, dtype=np.float64)[None, :] + shift_j
    with np.errstate(divide="ignore", invalid="ignore"):
        return (i * j) / np.float64(divisor)


def init_array_shifted(ni: int, nj: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return A (ni x nj) with entries (i+1)(j+1)/ni, R (nj x nj) and Q (ni x nj)."""
    a = _grid(ni, nj, 1, 1, ni)
    q = _grid(ni, nj, 0, 1, nj)
    r = _grid(nj, nj, 0, 2, nj)
    return a, r, q


def transpose_matrix(m: np.ndarray) -> np.ndarray:
    """Return a fresh, contiguous transpose of a two-dimensional array."""
    m = np.asarray(m)
    if m.ndim != 2:
        raise ValueError(f"expected a two-dimensional array, got shape {m.shape}")
    return np.ascontiguousarray(m.T)


def _block(array: np.ndarray, rows: int, cols: int, name: str) -> np.ndarray:
    array = np.asarray(array, dtype=np.float64)
    if array.ndim != 2 or array.shape[0] < rows or array.shape[1] < cols:
        raise ValueError(f"{name} must be at least {rows}x{cols}, got shape {array.shape}")
    return array[:rows, :cols].copy()


def kernel_gramschmidt_transposed(
    ni: int, nj: int, a: np.ndarray, r: np.ndarray, q: np.ndarray
) -> GramSchmidtResult:
    """Gram-Schmidt on transposed copies of A and Q, so columns are read as rows.

    The work happens on the transpose of A, which is never copied back: the
    returned A equals the input block. R gets its upper triangle (the strict
    lower triangle keeps its input values) and Q is transposed back. Columns
    of zero norm give nan. The inputs are left untouched.
    """
    a_blk = _block(a, ni, nj, "a")
    r_out = _block(r, nj, nj, "r")
    q_blk = _block(q, ni, nj, "q")
    a_t = transpose_matrix(a_blk)
    q_t = transpose_matrix(q_blk)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for k in range(nj):
            row = a_t[k]
            r_out[k, k] = np.sqrt(row @ row)
            q_t[k] = row / r_out[k, k]
            r_out[k, k + 1 :] = a_t[k + 1 :] @ q_t[k]
            a_t[k + 1 :] -= np.outer(r_out[k, k + 1 :], q_t[k])
    return GramSchmidtResult(a_blk, r_out, transpose_matrix(q_t))


def _titled_by_column(title: str, matrix: np.ndarray) -> str:
    matrix = np.asarray(matrix)
    if matrix.ndim != 2:
        raise ValueError(f"{title} must be two-dimensional, got shape {matrix.shape}")
    cols = matrix.shape[1]
    body = format_values(matrix.ravel(), lambda k: (k % cols) % 20 == 0, "%0.2f ")
    return f"{title}\n{body}\n"


def format_output_by_column(a: np.ndarray, r: np.ndarray, q: np.ndarray) -> str:
    """Render A, R and Q under titles, breaking lines on every twentieth column."""
    return _titled_by_column("A", a) + _titled_by_column("R", r) + _titled_by_column("Q", q)


def main(argv: list[str] | None = None) -> int:
    """Run one of the Gram-Schmidt drivers from the command line."""
    parser = build_parser("gramschmidt-variants", "Gram-Schmidt decomposition variants.")
    parser.add_argument(
        "--variant",
        choices=[v.value for v in Variant],
        default=Variant.TRANSPOSE.value,
        help="driver to run",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="check the result against the plain kernel",
    )
    args = parser.parse_args(argv)
    variant = Variant(args.variant)
    size = sizes(args.dataset)

    if variant is Variant.WORKERTHREADS:
        a, r, q = init_array(size.ni, size.nj)
    else:
        a, r, q = init_array_shifted(size.ni, size.nj)

    if variant is Variant.TRANSPOSE:
        kernel = kernel_gramschmidt_transposed
    else:
        kernel = kernel_gramschmidt
    result, elapsed = timed(kernel, size.ni, size.nj, a, r, q)

    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        if variant is Variant.TRANSPOSE:
            emit(format_output(result.a, result.r, result.q))
        elif variant is Variant.STATIC:
            emit(format_sections(result.a, result.r, result.q))
        else:
            text = format_output_by_column(result.a, result.r, result.q)
            emit(text)
            emit(text)

    if args.compare and variant is not Variant.TRANSPOSE:
        golden = kernel_gramschmidt(size.ni, size.nj, a, r, q)
        compare_results(result.a, golden.a)
        compare_results(result.r, golden.r)
        compare_results(result.q, golden.q)
    return 0