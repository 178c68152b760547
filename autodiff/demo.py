"""
Worked examples: value and derivative of composed functions, and simple
gradient-based solving.

Usage:
    python -m autodiff.demo --demo all
"""

import argparse
import math

from .core.expression import X
from .optimize import gradient_ascent, gradient_descent


def basic_derivative(at=3.0):
    """f(x) = x^3 / 2 + sin(2x); returns (f(at), f'(at))."""
    f = X.pow(3.0) / 2.0 + (2.0 * X).sin()
    return f.eval(at)


def composed_derivative(at=25.0):
    """h(x) = f(g(x)) with f(x) = x^3 / 2 + sin(2x), g(x) = x / 3 - 5."""
    f = X.pow(3.0) / 2.0 + (2.0 * X).sin()
    g = X / 3.0 - 5.0
    return f.compose(g).eval(at)


def solve_square_equals_power():
    """Solve x^2 = 2^x by descending on (x^2 - 2^x)^2 from x = 0."""
    f_x = X.pow(2.0)
    g_x = (X * math.log(2.0)).exp()
    cost = (f_x - g_x).pow(2.0)

    x = gradient_descent(cost, 0.0)
    return x, f_x.eval(x)[0], g_x.eval(x)[0]


def maximize_sin_plus_cos():
    """Gradient ascent on sin(x) + cos(x) from x = 0."""
    f_x = X.sin() + X.cos()
    x = gradient_ascent(f_x, 0.0)
    return x, f_x.eval(x)[0]


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Forward-mode autodiff examples',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--demo', default='all',
                        choices=['basic', 'compose', 'solve', 'maximize', 'all'],
                        help='Which example to run')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    run_all = args.demo == 'all'

    if run_all or args.demo == 'basic':
        print("Basic derivative calculation")
        print("f(x)  = x^3 / 2 + sin(2x)")
        value, deriv = basic_derivative()
        print(f"f(3)  = {value}")
        print(f"f'(3) = {deriv}")
        print()

    if run_all or args.demo == 'compose':
        print("Derivative of a composition")
        print("f(x) = x^3 / 2 + sin(2x)")
        print("g(x) = x / 3 - 5")
        print("h(x) = f(g(x))")
        value, deriv = composed_derivative()
        print(f"h(25)  = {value}")
        print(f"h'(25) = {deriv}")
        print()

    if run_all or args.demo == 'solve':
        print("Solving for x^2 = 2^x")
        x, y1, y2 = solve_square_equals_power()
        print(f"f({x}) = {y1}")
        print(f"g({x}) = {y2}")
        print()

    if run_all or args.demo == 'maximize':
        print("Find the max of sin(x) + cos(x)")
        x, y = maximize_sin_plus_cos()
        print(f"sin({x}) + cos({x}) = {y}")


if __name__ == "__main__":
    main()
