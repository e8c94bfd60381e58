"""Numerical quadrature: rectangle, trapezoidal, Simpson and Gauss-Legendre rules."""

from __future__ import annotations

import math
from collections.abc import Callable

Function = Callable[[float], float]


def rectangle_method(f: Function, a: float, b: float, n: int) -> float:
    """Integrate ``f`` over ``[a, b]`` with ``n`` left-endpoint rectangles."""
    h = (b - a) / n
    return sum((f(a + i * h) for i in range(n)), 0.0) * h


def trapezoidal_method(f: Function, a: float, b: float, n: int) -> float:
    """Integrate ``f`` over ``[a, b]`` with the composite trapezoidal rule."""
    h = (b - a) / n
    total = 0.5 * (f(a) + f(b))
    total += sum(f(a + i * h) for i in range(1, n))
    return total * h


def simpson_method(f: Function, a: float, b: float, n: int) -> float:
    """Integrate ``f`` over ``[a, b]`` with the composite Simpson rule.

    An odd ``n`` is raised to the next even number of intervals.
    """
    if n % 2 != 0:
        n += 1
    h = (b - a) / n
    total = f(a) + f(b)
    total += sum((2 if i % 2 == 0 else 4) * f(a + i * h) for i in range(1, n))
    return total * h / 3.0


def _gauss_legendre_rule(n_points: int) -> tuple[tuple[float, ...], tuple[float, ...]]:
    if n_points == 2:
        node = 1.0 / math.sqrt(3.0)
        return (-node, node), (1.0, 1.0)
    if n_points == 3:
        node = math.sqrt(3.0 / 5.0)
        return (-node, 0.0, node), (5.0 / 9.0, 8.0 / 9.0, 5.0 / 9.0)
    if n_points == 4:
        outer = math.sqrt(3.0 / 7.0 + 2.0 / 7.0 * math.sqrt(6.0 / 5.0))
        inner = math.sqrt(3.0 / 7.0 - 2.0 / 7.0 * math.sqrt(6.0 / 5.0))
        w_outer = (18.0 - math.sqrt(30.0)) / 36.0
        w_inner = (18.0 + math.sqrt(30.0)) / 36.0
        return (-outer, -inner, inner, outer), (w_outer, w_inner, w_inner, w_outer)
    raise ValueError("Only 2, 3, and 4-point Gauss-Legendre quadrature is supported.")


def composite_gauss_legendre(
    f: Function, a: float, b: float, n_points: int, subdivisions: int
) -> float:
    """Integrate ``f`` over ``[a, b]`` with a composite Gauss-Legendre rule.

    ``n_points`` must be 2, 3 or 4; the interval is split into
    ``subdivisions`` equal parts.
    """
    nodes, weights = _gauss_legendre_rule(n_points)
    h = (b - a) / subdivisions
    total = 0.0
    for i in range(subdivisions):
        sub_a = a + i * h
        sub_b = a + (i + 1) * h
        half = (sub_b - sub_a) / 2.0
        mid = (sub_a + sub_b) / 2.0
        total += half * sum(w * f(half * t + mid) for t, w in zip(nodes, weights))
    return total