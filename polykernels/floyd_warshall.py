"""All-pairs shortest paths by the Floyd-Warshall algorithm."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from polykernels.common import Dataset, build_parser, emit, format_values, parse_dataset, timed


class FloydWarshallSizes(NamedTuple):
    n: int


_SIZES = {
    Dataset.MINI: FloydWarshallSizes(32),
    Dataset.SMALL: FloydWarshallSizes(128),
    Dataset.STANDARD: FloydWarshallSizes(1024),
    Dataset.LARGE: FloydWarshallSizes(2000),
    Dataset.EXTRALARGE: FloydWarshallSizes(4000),
}


def sizes(dataset: str | Dataset) -> FloydWarshallSizes:
    """Problem sizes for a dataset preset."""
    return _SIZES[parse_dataset(dataset)]


def init_array(n: int) -> np.ndarray:
    """Return the n-by-n initial path-length matrix."""
    idx = np.arange(1, n + 1, dtype=np.float64)
    return np.outer(idx, idx) / n if n else np.zeros((0, 0))


def kernel_floyd_warshall(n: int, path: np.ndarray) -> np.ndarray:
    """Return the shortest path lengths between every pair of the first n nodes.

    The graph is assumed to have no negative cycles; the input is left untouched.
    """
    path = np.asarray(path)
    if path.ndim != 2 or path.shape[0] < n or path.shape[1] < n:
        raise ValueError(f"path must be at least {n}x{n}, got shape {path.shape}")
    result = path[:n, :n].astype(np.float64, copy=True)
    for k in range(n):
        np.minimum(result, result[:, k, None] + result[None, k, :], out=result)
    return result


def format_output(path: np.ndarray) -> str:
    """Render the path matrix the way the benchmark dumps it."""
    values = np.asarray(path).ravel()
    return format_values(values, lambda k: k % 20 == 0, "%0.2f ") + "\n"


def main(argv: list[str] | None = None) -> int:
    """Run the Floyd-Warshall kernel from the command line."""
    args = build_parser("floyd-warshall", "All-pairs shortest paths kernel.").parse_args(argv)
    size = sizes(args.dataset)
    path = init_array(size.n)
    result, elapsed = timed(kernel_floyd_warshall, size.n, path)
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        emit(format_output(result))
    return 0