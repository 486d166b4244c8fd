"""Shared pieces for the kernel commands: dataset sizes, output formatting and timing."""

from __future__ import annotations

import argparse
import enum
import sys
import time
from typing import Any, Callable, Iterable, TextIO


class Dataset(enum.Enum):
    """Problem-size presets shared by every kernel."""

    MINI = "mini"
    SMALL = "small"
    STANDARD = "standard"
    LARGE = "large"
    EXTRALARGE = "extralarge"


def parse_dataset(name: str | Dataset) -> Dataset:
    """Turn a name such as ``"mini"`` or ``"LARGE_DATASET"`` into a :class:`Dataset`."""
    if isinstance(name, Dataset):
        return name
    if not isinstance(name, str):
        raise TypeError(f"dataset name must be a string, not {type(name).__name__}")
    key = name.strip().lower()
    if key.endswith("_dataset"):
        key = key[: -len("_dataset")]
    try:
        return Dataset(key)
    except ValueError:
        raise ValueError(f"unknown dataset: {name!r}") from None


def format_values(
    values: Iterable[Any],
    breaks: Callable[[int], bool] | None = None,
    fmt: str = "%0.2f ",
) -> str:
    """Format values one after another, adding a newline after each index for which ``breaks`` holds."""
    parts = []
    for index, value in enumerate(values):
        parts.append(fmt % value)
        if breaks is not None and breaks(index):
            parts.append("\n")
    return "".join(parts)


def build_parser(prog: str, description: str) -> argparse.ArgumentParser:
    """Build the command-line parser every kernel command shares."""
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument(
        "--dataset",
        type=parse_dataset,
        default=Dataset.STANDARD,
        metavar="{" + ",".join(d.value for d in Dataset) + "}",
        help="problem size preset (default: standard)",
    )
    parser.add_argument(
        "--time",
        action="store_true",
        help="print the kernel's running time in seconds",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="write the live-out arrays to standard error",
    )
    return parser


def emit(text: str, stream: TextIO | None = None) -> None:
    """Write text to a stream, standard error by default."""
    target = sys.stderr if stream is None else stream
    target.write(text)
    target.flush()


def timed(func: Callable[..., Any], *args: Any) -> tuple[Any, float]:
    """Call ``func(*args)`` and return its result with the elapsed seconds."""
    start = time.perf_counter()
    result = func(*args)
    return result, time.perf_counter() - start