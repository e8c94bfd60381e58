"""Fixed-step solvers for scalar first-order ODEs ``y' = f(t, y)``."""

from __future__ import annotations

from collections.abc import Callable

Derivative = Callable[[float, float], float]
ODEResult = list[tuple[float, float]]
_Step = Callable[[Derivative, float, float, float], float]


def _solve(
    step: _Step, f: Derivative, t0: float, y0: float, t_end: float, h: float
) -> ODEResult:
    if h <= 0:
        raise ValueError("Step h must be positive.")
    t, y = t0, y0
    results: ODEResult = [(t, y)]
    for _ in range(int((t_end - t0) / h)):
        y = step(f, t, y, h)
        t += h
        results.append((t, y))
    return results


def _euler_step(f: Derivative, t: float, y: float, h: float) -> float:
    return y + h * f(t, y)


def _heun_step(f: Derivative, t: float, y: float, h: float) -> float:
    k1 = f(t, y)
    k2 = f(t + h, y + h * k1)
    return y + h * 0.5 * (k1 + k2)


def _rk4_step(f: Derivative, t: float, y: float, h: float) -> float:
    k1 = f(t, y)
    k2 = f(t + 0.5 * h, y + 0.5 * h * k1)
    k3 = f(t + 0.5 * h, y + 0.5 * h * k2)
    k4 = f(t + h, y + h * k3)
    return y + (h / 6.0) * (k1 + 2 * k2 + 2 * k3 + k4)


def euler_method(
    f: Derivative, t0: float, y0: float, t_end: float, h: float
) -> ODEResult:
    """Solve with the explicit Euler method; returns ``(t, y)`` pairs."""
    return _solve(_euler_step, f, t0, y0, t_end, h)


def heun_method(
    f: Derivative, t0: float, y0: float, t_end: float, h: float
) -> ODEResult:
    """Solve with Heun's method; returns ``(t, y)`` pairs."""
    return _solve(_heun_step, f, t0, y0, t_end, h)


def rk4_method(
    f: Derivative, t0: float, y0: float, t_end: float, h: float
) -> ODEResult:
    """Solve with the classical fourth-order Runge-Kutta method."""
    return _solve(_rk4_step, f, t0, y0, t_end, h)