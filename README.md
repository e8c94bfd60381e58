# numlib

A small library of classic numerical methods. It is written in plain Python and
has no third-party dependencies. All values are Python floats, and matrices are
lists of lists.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Functions |
| --- | --- |
| `numlib.linear_algebra` | `gaussian_elimination`, `lu_decomposition`, `forward_substitution`, `backward_substitution` |
| `numlib.interpolation` | `lagrange_interpolation`, `divided_differences`, `newton_interpolation` |
| `numlib.approximation` | `polynomial_approximation`, `evaluate_polynomial` |
| `numlib.integration` | `rectangle_method`, `trapezoidal_method`, `simpson_method`, `composite_gauss_legendre` |
| `numlib.differential_equations` | `euler_method`, `heun_method`, `rk4_method` |
| `numlib.nonlinear_equations` | `bisection`, `newton_method`, `secant_method`, `regula_falsi` |
| `numlib.examples` | `run_all_examples`, `main` |

Some notes on how the functions behave:

- `gaussian_elimination` uses partial pivoting and does not modify its inputs.
  `lu_decomposition` is a Doolittle decomposition without pivoting. It returns
  `(lower, upper)`, and `lower` has a unit diagonal.
- `divided_differences` returns the coefficients that `newton_interpolation`
  expects.
- `polynomial_approximation` returns least-squares coefficients in ascending
  order of power. `evaluate_polynomial` takes coefficients in that same order.
- `simpson_method` rounds an odd number of intervals up to the next even number.
  `composite_gauss_legendre` supports 2, 3 or 4 points per subinterval.
- The ODE solvers return a list of `(t, y)` pairs, starting at `(t0, y0)`. They
  take `int((t_end - t0) / h)` fixed steps.
- The root finders take optional `tol` (default `1e-9`) and `max_iter`
  (default `100`) arguments. If they run out of iterations, they return the
  last approximation.

## Errors

When a method cannot go on, it raises an exception instead of returning a
sentinel value:

- `SingularMatrixError` (in `numlib.linear_algebra`) is raised when a pivot or
  a diagonal entry is too close to zero.
- `DuplicateNodeError` (in `numlib.interpolation`, a subclass of `ValueError`)
  is raised when two interpolation nodes coincide.
- `ApproximationError` (in `numlib.approximation`) is raised when the normal
  equations cannot be solved.
- `RootNotFoundError` (in `numlib.nonlinear_equations`) is raised in three
  cases: a bracketing method gets an interval without a sign change, a
  derivative is close to zero, or a secant slope is close to zero.

Invalid arguments raise `ValueError`. Examples are mismatched lengths, empty
node lists, too few points for the degree, a step size that is not positive,
and an unsupported number of Gauss-Legendre points.

## Examples

Solve a linear system:

```python
from numlib.linear_algebra import gaussian_elimination

x = gaussian_elimination([[2, 1, -1], [-3, -1, 2], [-2, 1, 2]], [8, -11, -3])
# approximately [2.0, 3.0, -1.0]
```

Interpolate through a few points:

```python
from numlib.interpolation import lagrange_interpolation, divided_differences, newton_interpolation

xs, ys = [0, 1, 3], [1, 3, 13]
lagrange_interpolation(xs, ys, 2.0)                              # ~7.0
newton_interpolation(xs, divided_differences(xs, ys), 2.0)       # ~7.0
```

Fit a least-squares polynomial:

```python
from numlib.approximation import polynomial_approximation, evaluate_polynomial

coeffs = polynomial_approximation([0, 1, 2], [1, 3, 5], 1)      # ~[1.0, 2.0]
evaluate_polynomial(coeffs, 10.0)                                # ~21.0
```

Integrate, solve an ODE and find a root:

```python
from numlib.integration import simpson_method
from numlib.differential_equations import rk4_method
from numlib.nonlinear_equations import bisection

simpson_method(lambda x: 3 * x * x, 0, 2, 100)                   # ~8.0
rk4_method(lambda t, y: -y, 0, 1, 1.0, 0.1)[-1]                  # (~1.0, ~exp(-1))
bisection(lambda x: x * x - 5, 2, 3)                             # ~sqrt(5)
```

## Demonstration

The package includes a command that runs one example from each category and
prints the results with six decimal places:

```
numlib-examples
```

The printed messages are in Polish. The command exits with status 0 on success.
If an example fails, it prints the error to standard error and exits with
status 1.