"""Polyhedral benchmark kernels in NumPy, with deterministic inputs, timing and output dumps."""

__version__ = "0.1.0"