"""Least-squares polynomial approximation."""

from __future__ import annotations

from collections.abc import Sequence

from numlib.linear_algebra import SingularMatrixError, gaussian_elimination


class ApproximationError(ArithmeticError):
    """Raised when the normal equations cannot be solved."""


def polynomial_approximation(
    x: Sequence[float], y: Sequence[float], degree: int
) -> list[float]:
    """Fit a polynomial of ``degree`` to the points by least squares.

    Returns the coefficients in ascending order of power.
    """
    if len(x) != len(y):
        raise ValueError("Input vectors x and y must have the same size.")
    size = degree + 1
    if len(x) < size:
        raise ValueError("Number of points must be at least degree + 1.")

    normal = [
        [sum(xk ** (i + j) for xk in x) for j in range(size)] for i in range(size)
    ]
    rhs = [sum(yk * xk**i for xk, yk in zip(x, y)) for i in range(size)]

    try:
        return gaussian_elimination(normal, rhs)
    except SingularMatrixError as exc:
        raise ApproximationError(
            "Could not solve the system for approximation coefficients. "
            "The system may be ill-conditioned."
        ) from exc


def evaluate_polynomial(coeffs: Sequence[float], x: float) -> float:
    """Evaluate a polynomial given by ascending coefficients at ``x``."""
    return sum((c * x**i for i, c in enumerate(coeffs)), 0.0)