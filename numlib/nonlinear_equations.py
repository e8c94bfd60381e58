"""Root finding for scalar nonlinear equations."""

from __future__ import annotations

from collections.abc import Callable

Function = Callable[[float], float]

_EPSILON = 1e-12


class RootNotFoundError(ArithmeticError):
    """Raised when a method cannot proceed towards a root."""


def bisection(
    f: Function, a: float, b: float, tol: float = 1e-9, max_iter: int = 100
) -> float:
    """Find a root of ``f`` in ``[a, b]`` by bisection.

    Requires a sign change on the interval; returns the last midpoint
    after ``max_iter`` iterations.
    """
    if f(a) * f(b) >= 0.0:
        raise RootNotFoundError("Function must change sign on the interval.")
    c = a
    for _ in range(max_iter):
        c = (a + b) / 2.0
        if abs(f(c)) < tol or (b - a) / 2.0 < tol:
            return c
        if f(c) * f(a) < 0.0:
            b = c
        else:
            a = c
    return c


def newton_method(
    f: Function, df: Function, x0: float, tol: float = 1e-9, max_iter: int = 100
) -> float:
    """Find a root of ``f`` by Newton's method starting from ``x0``.

    Returns the last approximation after ``max_iter`` iterations.
    """
    for _ in range(max_iter):
        fx = f(x0)
        dfx = df(x0)
        if abs(dfx) < _EPSILON:
            raise RootNotFoundError("Derivative is too close to zero.")
        x1 = x0 - fx / dfx
        if abs(x1 - x0) < tol:
            return x1
        x0 = x1
    return x0


def secant_method(
    f: Function, x0: float, x1: float, tol: float = 1e-9, max_iter: int = 100
) -> float:
    """Find a root of ``f`` by the secant method from ``x0`` and ``x1``."""
    for _ in range(max_iter):
        fx0 = f(x0)
        fx1 = f(x1)
        if abs(fx1 - fx0) < _EPSILON:
            raise RootNotFoundError("Secant slope is too close to zero.")
        x2 = x1 - fx1 * (x1 - x0) / (fx1 - fx0)
        if abs(x2 - x1) < tol:
            return x2
        x0, x1 = x1, x2
    return x1


def regula_falsi(
    f: Function, a: float, b: float, tol: float = 1e-9, max_iter: int = 100
) -> float:
    """Find a root of ``f`` in ``[a, b]`` by the false-position method."""
    if f(a) * f(b) >= 0:
        raise RootNotFoundError("Function must change sign on the interval.")
    x = a
    for _ in range(max_iter):
        fa = f(a)
        fb = f(b)
        if abs(fb - fa) < _EPSILON:
            raise RootNotFoundError("Function values at the bounds coincide.")
        x = b - fb * (b - a) / (fb - fa)
        fx = f(x)
        if abs(fx) < tol:
            return x
        if fa * fx < 0.0:
            b = x
        else:
            a = x
    return x