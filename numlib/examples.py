"""Demonstration runner showing each part of the library in use."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence

from numlib.approximation import polynomial_approximation
from numlib.differential_equations import euler_method, rk4_method
from numlib.integration import simpson_method, trapezoidal_method
from numlib.interpolation import (
    divided_differences,
    lagrange_interpolation,
    newton_interpolation,
)
from numlib.linear_algebra import gaussian_elimination, lu_decomposition
from numlib.nonlinear_equations import bisection, newton_method


def run_all_examples() -> None:
    """Run every example and print the results to standard output."""
    print("===== PLIK DEMONSTRACYJNY: Zastosowania biblioteki NumLib =====")

    print("\n--- KATEGORIA: Algebra Liniowa ---")
    a, b, c = gaussian_elimination([[4, -2, 1], [1, 1, 1], [9, 3, 1]], [1, 7, 3])
    print("Przyklad 1.1: Uklad rownan dla paraboli przechodzacej przez punkty.")
    print(f"  Wynik: a={a:.6f}, b={b:.6f}, c={c:.6f}")
    lower, upper = lu_decomposition([[2, 1], [4, 3]])
    print("Przyklad 1.2: Dekompozycja LU macierzy 2x2.")
    print(f"  L[1][0]={lower[1][0]:.6f}, U[0][1]={upper[0][1]:.6f}")

    print("\n--- KATEGORIA: Interpolacja ---")
    ix, iy = [0, 1, 3], [1, 3, 13]
    lag = lagrange_interpolation(ix, iy, 2.0)
    print("Przyklad 2.1: Estymacja wartosci w punkcie x=2 (Lagrange).")
    print(f"  Wynik: {lag:.6f} (dokladnie: 7.0)")
    factors = divided_differences(ix, iy)
    newt = newton_interpolation(ix, factors, 2.0)
    print("Przyklad 2.2: Estymacja wartosci w punkcie x=2 (Newton).")
    print(f"  Wynik: {newt:.6f} (dokladnie: 7.0)")

    print("\n--- KATEGORIA: Aproksymacja ---")
    c1 = polynomial_approximation([0, 1, 2, 3, 4], [1.1, 2.8, 4.2, 5.9, 7.8], 1)
    print("Przyklad 3.1: Aproksymacja liniowa dla danych z szumem.")
    print(f"  Prosta: y = {c1[1]:.6f}x + {c1[0]:.6f}")
    c2 = polynomial_approximation([0, 1, 2], [1, 3, 7], 2)
    print("Przyklad 3.2: Aproksymacja kwadratowa dla danych bez szumu.")
    print(f"  Wspolczynniki: c0={c2[0]:.6f}, c1={c2[1]:.6f}, c2={c2[2]:.6f}")

    print("\n--- KATEGORIA: Calkowanie ---")

    def f_int(x: float) -> float:
        return 3 * x * x

    trap = trapezoidal_method(f_int, 0, 2, 100)
    print("Przyklad 4.1: Calka z 3*x^2 od 0 do 2 (trapezy).")
    print(f"  Wynik: {trap:.6f} (dokladnie: 8.0)")
    simp = simpson_method(f_int, 0, 2, 100)
    print("Przyklad 4.2: Calka z 3*x^2 od 0 do 2 (Simpson).")
    print(f"  Wynik: {simp:.6f} (dokladnie: 8.0)")

    print("\n--- KATEGORIA: Rownania Rozniczkowe ---")

    def f_ode(t: float, y: float) -> float:
        return -y

    exact = math.exp(-1.0)
    euler = euler_method(f_ode, 0, 1, 1.0, 0.1)[-1][1]
    print("Przyklad 5.1: Rozwiazanie y'=-y dla t=1 (Euler).")
    print(f"  Wynik: {euler:.6f} (dokladnie: {exact:.6f})")
    rk4 = rk4_method(f_ode, 0, 1, 1.0, 0.1)[-1][1]
    print("Przyklad 5.2: Rozwiazanie y'=-y dla t=1 (RK4).")
    print(f"  Wynik: {rk4:.6f} (dokladnie: {exact:.6f})")

    print("\n--- KATEGORIA: Rownania Nieliniowe ---")

    def f_nonlin(x: float) -> float:
        return x * x - 5

    def df_nonlin(x: float) -> float:
        return 2 * x

    root = math.sqrt(5.0)
    bis = bisection(f_nonlin, 2, 3)
    print("Przyklad 6.1: Pierwiastek x^2-5 (bisekcja).")
    print(f"  Wynik: {bis:.6f} (dokladnie: {root:.6f})")
    newt_root = newton_method(f_nonlin, df_nonlin, 2.0)
    print("Przyklad 6.2: Pierwiastek x^2-5 (Newton).")
    print(f"  Wynik: {newt_root:.6f} (dokladnie: {root:.6f})")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the examples; return 0 on success and 1 if any of them fails."""
    parser = argparse.ArgumentParser(
        prog="numlib-examples", description="Run the NumLib demonstration examples."
    )
    parser.parse_args(argv)
    try:
        run_all_examples()
    except Exception as exc:  # noqa: BLE001 - report any failure and exit non-zero
        print(f"\n\n--- WYSTAPIL KRYTYCZNY BLAD: {exc} ---", file=sys.stderr)
        return 1
    print("\n\n--- Wszystkie przyklady zostaly wykonane pomyslnie. ---")
    return 0


if __name__ == "__main__":
    sys.exit(main())