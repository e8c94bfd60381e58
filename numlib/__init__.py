"""Numerical methods: linear algebra, interpolation, approximation, integration, ODEs and root finding."""

__version__ = "0.1.0"

__all__ = [
    "linear_algebra",
    "interpolation",
    "approximation",
    "integration",
    "differential_equations",
    "nonlinear_equations",
    "examples",
]