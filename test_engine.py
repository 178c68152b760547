"""
Forward-mode evaluation: value and first derivative of each node kind.
"""

import math
import warnings
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from autodiff import Expression, X, constant, evaluate, value, derivative


@pytest.mark.parametrize("a", [-3.5, 0.0, 1.0, 1e6])
def test_constant_has_zero_derivative(a):
    assert evaluate(constant(4.25), a) == (4.25, 0.0)


@pytest.mark.parametrize("a", [-3.5, 0.0, 1.0, 1e6])
def test_variable_is_identity(a):
    assert evaluate(X, a) == (a, 1.0)


def test_returns_python_floats():
    val, dot = X.sin().eval(1)
    assert type(val) is float
    assert type(dot) is float


def test_bare_number_evaluates_as_constant():
    assert evaluate(2.5, 10.0) == (2.5, 0.0)


def test_addition_is_linear():
    u, v = X.sin(), X.pow(2)
    a = 0.3
    uv, ud = u.eval(a)
    vv, vd = v.eval(a)
    val, dot = (u + v).eval(a)
    assert val == pytest.approx(uv + vv)
    assert dot == pytest.approx(ud + vd)


def test_product_rule():
    assert (X * constant(2.0)).eval(3.0) == (6.0, 2.0)


def test_chain_rule_through_compose():
    assert X.sin().compose(2.0 * X).eval(0.0) == (0.0, 2.0)


def test_compose_evaluates_outer_at_inner_value():
    # (x + 1)^2 at 2 -> (9, 6)
    val, dot = X.pow(2).compose(X + 1.0).eval(2.0)
    assert val == pytest.approx(9.0)
    assert dot == pytest.approx(6.0)


def test_nested_compose():
    # exp(sin(3x)) at 0.2
    h = X.exp().compose(X.sin().compose(3.0 * X))
    val, dot = h.eval(0.2)
    assert val == pytest.approx(math.exp(math.sin(0.6)))
    assert dot == pytest.approx(math.exp(math.sin(0.6)) * math.cos(0.6) * 3.0)


def test_documented_example():
    f = X.pow(3.0) / 2.0 + (2.0 * X).sin()
    val, dot = f.eval(3.0)
    assert val == pytest.approx(13.220585, abs=1e-5)
    assert dot == pytest.approx(15.420341, abs=1e-5)


A = 0.7


@pytest.mark.parametrize("expr, expected", [
    (X + 2.0, (A + 2.0, 1.0)),
    (X - 2.0, (A - 2.0, 1.0)),
    (3.0 - X, (3.0 - A, -1.0)),
    (X * X, (A * A, 2 * A)),
    (1.0 / X, (1.0 / A, -1.0 / A ** 2)),
    (-X, (-A, -1.0)),
    (X.pow(3), (A ** 3, 3 * A ** 2)),
    (X.pow(-1.5), (A ** -1.5, -1.5 * A ** -2.5)),
    (X.sqrt(), (math.sqrt(A), 0.5 / math.sqrt(A))),
    (X.exp(), (math.exp(A), math.exp(A))),
    (X.sin(), (math.sin(A), math.cos(A))),
    (X.cos(), (math.cos(A), -math.sin(A))),
    (X.atan(), (math.atan(A), 1.0 / (1.0 + A * A))),
    (X.ln(), (math.log(A), 1.0 / A)),
], ids=lambda p: p.op_tag if isinstance(p, Expression) else None)
def test_rule_matches_calculus(expr, expected):
    val, dot = expr.eval(A)
    assert val == pytest.approx(expected[0])
    assert dot == pytest.approx(expected[1])


@pytest.mark.parametrize("expr", [
    X.pow(3) * X.sin(),
    (X + 2.0).ln() / X.exp(),
    X.atan().cos() - X.sqrt(),
    (X * X + 1.0).sqrt().compose(X.sin()),
    -X.pow(2.5),
])
def test_agrees_with_central_difference(expr):
    a, h = 0.7, 1e-6
    fd = (value(expr, a + h) - value(expr, a - h)) / (2 * h)
    assert derivative(expr, a) == pytest.approx(fd, rel=1e-6, abs=1e-6)


def test_division_by_zero_gives_infinity():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        val, dot = (constant(1.0) / X).eval(0.0)
    assert val == math.inf
    assert dot == -math.inf


@pytest.mark.parametrize("expr, a, check_val, check_dot", [
    (X.ln(), 0.0, lambda v: v == -math.inf, np.isinf),
    (X.ln(), -1.0, np.isnan, lambda d: d == -1.0),
    (X.sqrt(), -1.0, np.isnan, np.isnan),
    (X.sqrt(), 0.0, lambda v: v == 0.0, lambda d: d == math.inf),
    (X.pow(-1.0), 0.0, lambda v: v == math.inf, np.isinf),
    (X.pow(1.0 / 3.0), -8.0, np.isnan, np.isnan),
    (X.exp(), 1000.0, lambda v: v == math.inf, lambda d: d == math.inf),
])
def test_domain_errors_propagate_without_raising(expr, a, check_val, check_dot):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        val, dot = expr.eval(a)
    assert check_val(val)
    assert check_dot(dot)


def test_nan_propagates_through_parent_nodes():
    val, dot = (X.sqrt() + 1.0).sin().eval(-4.0)
    assert math.isnan(val)
    assert math.isnan(dot)


def test_unknown_node_kind_raises():
    with pytest.raises(ValueError):
        evaluate(Expression("tan", (X,)), 1.0)


def test_repeated_evaluation_is_deterministic():
    f = X.pow(3.0) / 2.0 + (2.0 * X).sin()
    g = X.pow(3.0) / 2.0 + (2.0 * X).sin()
    assert f.eval(1.3) == g.eval(1.3)
    assert f.eval(1.3) == f.eval(1.3)
    f.eval(-2.0)
    assert f.eval(1.3) == g.eval(1.3)


def test_concurrent_evaluation():
    f = (X.exp() * X.cos()).compose(X / 2.0)
    points = np.linspace(-2.0, 2.0, 64)
    expected = [f.eval(p) for p in points]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(f.eval, points))
    assert results == expected
