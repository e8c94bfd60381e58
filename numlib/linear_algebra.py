"""Dense linear systems: Gaussian elimination, LU decomposition and substitution."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[float]]

_EPSILON = 1e-12


class SingularMatrixError(ArithmeticError):
    """Raised when a matrix is singular or too close to singular to use."""


def gaussian_elimination(a: Sequence[Sequence[float]], b: Sequence[float]) -> list[float]:
    """Solve ``a @ x = b`` by Gaussian elimination with partial pivoting.

    The inputs are left untouched. Raises ``ValueError`` on mismatched
    dimensions and ``SingularMatrixError`` when a pivot vanishes.
    """
    n = len(b)
    if len(a) != n or (n > 0 and len(a[0]) != n):
        raise ValueError("Matrix and vector dimensions do not match.")

    rows = [list(map(float, row)) for row in a]
    rhs = [float(v) for v in b]

    for i in range(n):
        pivot = max(range(i, n), key=lambda k: abs(rows[k][i]))
        rows[i], rows[pivot] = rows[pivot], rows[i]
        rhs[i], rhs[pivot] = rhs[pivot], rhs[i]
        pivot_row = rows[i]
        if abs(pivot_row[i]) < _EPSILON:
            raise SingularMatrixError("Matrix is singular.")
        for k in range(i + 1, n):
            row = rows[k]
            factor = row[i] / pivot_row[i]
            for j in range(i, n):
                row[j] -= factor * pivot_row[j]
            rhs[k] -= factor * rhs[i]

    return _back_substitute(rows, rhs)


def lu_decomposition(a: Sequence[Sequence[float]]) -> tuple[Matrix, Matrix]:
    """Doolittle LU decomposition without pivoting.

    Returns ``(lower, upper)`` where ``lower`` has a unit diagonal.
    Raises ``SingularMatrixError`` when a diagonal entry of ``upper`` vanishes.
    """
    n = len(a)
    lower = [[0.0] * n for _ in range(n)]
    upper = [[0.0] * n for _ in range(n)]

    for i in range(n):
        for j in range(i, n):
            total = sum(lower[i][k] * upper[k][j] for k in range(i))
            upper[i][j] = a[i][j] - total
        if abs(upper[i][i]) < _EPSILON:
            raise SingularMatrixError("Matrix is singular.")
        lower[i][i] = 1.0
        for j in range(i + 1, n):
            total = sum(lower[j][k] * upper[k][i] for k in range(i))
            lower[j][i] = (a[j][i] - total) / upper[i][i]

    return lower, upper


def forward_substitution(lower: Sequence[Sequence[float]], b: Sequence[float]) -> list[float]:
    """Solve ``lower @ y = b`` for a unit lower-triangular matrix."""
    y: list[float] = []
    for row, value in zip(lower, b):
        result = float(value)
        for coefficient, known in zip(row, y):
            result -= coefficient * known
        y.append(result)
    return y


def backward_substitution(upper: Sequence[Sequence[float]], y: Sequence[float]) -> list[float]:
    """Solve ``upper @ x = y`` for an upper-triangular matrix."""
    return _back_substitute(upper, y)


def _back_substitute(upper: Sequence[Sequence[float]], rhs: Sequence[float]) -> list[float]:
    n = len(rhs)
    x = [0.0] * n
    for i in reversed(range(n)):
        row = upper[i]
        value = float(rhs[i])
        for coefficient, known in zip(row[i + 1 :], x[i + 1 :]):
            value -= coefficient * known
        x[i] = value / row[i]
    return x