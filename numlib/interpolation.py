"""Polynomial interpolation by the Lagrange and Newton forms."""

from __future__ import annotations

from collections.abc import Sequence

_EPSILON = 1e-12


class DuplicateNodeError(ValueError):
    """Raised when two interpolation nodes coincide."""


def _check_nodes(x_nodes: Sequence[float], y_nodes: Sequence[float]) -> None:
    if len(x_nodes) != len(y_nodes) or not x_nodes:
        raise ValueError("Node vectors must have the same, non-zero size.")


def lagrange_interpolation(
    x_nodes: Sequence[float], y_nodes: Sequence[float], xp: float
) -> float:
    """Evaluate the Lagrange interpolating polynomial at ``xp``."""
    _check_nodes(x_nodes, y_nodes)
    total = 0.0
    for i, (xi, yi) in enumerate(zip(x_nodes, y_nodes)):
        term = float(yi)
        for j, xj in enumerate(x_nodes):
            if i == j:
                continue
            if abs(xi - xj) < _EPSILON:
                raise DuplicateNodeError(
                    "Duplicate x nodes detected, interpolation failed."
                )
            term *= (xp - xj) / (xi - xj)
        total += term
    return total


def divided_differences(
    x_nodes: Sequence[float], y_nodes: Sequence[float]
) -> list[float]:
    """Return the Newton divided-difference coefficients for the nodes."""
    _check_nodes(x_nodes, y_nodes)
    n = len(x_nodes)
    column = [float(y) for y in y_nodes]
    factors = [column[0]]
    for order in range(1, n):
        next_column = []
        for i in range(order, n):
            span = x_nodes[i] - x_nodes[i - order]
            if abs(span) < _EPSILON:
                raise DuplicateNodeError(
                    "Duplicate x nodes detected, cannot calculate divided differences."
                )
            next_column.append((column[i - order + 1] - column[i - order]) / span)
        column = next_column
        factors.append(column[0])
    return factors


def newton_interpolation(
    x_nodes: Sequence[float], factors: Sequence[float], xp: float
) -> float:
    """Evaluate the Newton-form polynomial with the given coefficients at ``xp``."""
    result = 0.0
    term = 1.0
    for xi, factor in zip(x_nodes, factors):
        result += factor * term
        term *= xp - xi
    return result