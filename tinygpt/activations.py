"""Softmax and layer normalisation applied in place, row by row."""

from __future__ import annotations

import math

from .matrix import Matrix


def _row_bounds(matrix: Matrix, row: int) -> slice:
    if not 0 <= row < matrix.rows:
        raise IndexError(f"row {row} outside a matrix of {matrix.rows} rows")
    start = row * matrix.columns
    return slice(start, start + matrix.columns)


def softmax_row(matrix: Matrix, row: int) -> None:
    """Replace ``row`` of ``matrix`` with its softmax."""
    bounds = _row_bounds(matrix, row)
    values = matrix.data[bounds]
    if not values:
        return
    peak = max(values)
    exps = [math.exp(v - peak) for v in values]
    total = sum(exps)
    matrix.data[bounds] = [e / total for e in exps]


def softmax(matrix: Matrix) -> None:
    """Apply softmax to every row of ``matrix``."""
    for row in range(matrix.rows):
        softmax_row(matrix, row)


def layer_norm(matrix: Matrix, epsilon: float = 1e-5) -> None:
    """Normalise each row of ``matrix`` to zero mean and unit variance."""
    for row in range(matrix.rows):
        bounds = _row_bounds(matrix, row)
        values = matrix.data[bounds]
        if not values:
            continue
        mean = sum(values) / len(values)
        variance = sum((v - mean) ** 2 for v in values) / len(values)
        scale = math.sqrt(variance + epsilon)
        matrix.data[bounds] = [(v - mean) / scale for v in values]