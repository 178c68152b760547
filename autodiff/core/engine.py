# autodiff/core/engine.py
from __future__ import annotations
import numpy as np
from typing import Callable, Dict, Tuple
from .expression import Expression, as_expression

# Forward rules, keyed by op_tag. Each maps the children's (value, derivative)
# pairs to the node's own pair:
#   unary  : rule(u, du, payload)  -> (value, derivative)
#   binary : rule(u, du, v, dv)    -> (value, derivative)
UNARY_RULES: Dict[str, Callable] = {}
BINARY_RULES: Dict[str, Callable] = {}


def register_unary(tag: str):
    """Decorator: register the forward rule of a one-child node kind."""
    def deco(rule):
        UNARY_RULES[tag] = rule
        return rule
    return deco


def register_binary(tag: str):
    """Decorator: register the forward rule of a two-child node kind."""
    def deco(rule):
        BINARY_RULES[tag] = rule
        return rule
    return deco


def evaluate(expr: Expression, x) -> Tuple[float, float]:
    """
    Evaluate expr and its first derivative at x in one bottom-up pass.

    Args:
        expr: the expression tree (a bare real number is treated as a constant).
        x:    the point of evaluation.

    Returns:
        (value, derivative) as Python floats.

    Notes:
        - Arithmetic is plain float64. Division by zero, sqrt of a negative
          number, log of a non-positive number etc. give inf/nan, which then
          propagate through the rest of the tree. Nothing is raised and no
          RuntimeWarning is emitted.
        - Recursion depth equals tree depth.
    """
    expr = as_expression(expr)
    with np.errstate(all="ignore"):
        val, dot = _forward(expr, np.float64(x))
    return float(val), float(dot)


def _forward(expr: Expression, x: np.float64) -> Tuple[np.float64, np.float64]:
    tag = expr.op_tag

    # f(x) = x, f'(x) = 1
    if tag == "var":
        return x, np.float64(1.0)

    # f(x) = k, f'(x) = 0
    if tag == "const":
        return np.float64(expr.payload), np.float64(0.0)

    # (f o g)' = f'(g(x)) * g'(x); the only node whose child sees another point
    if tag == "compose":
        outer, inner = expr.children
        g, dg = _forward(inner, x)
        f, df = _forward(outer, g)
        return f, df * dg

    if tag in UNARY_RULES:
        (u,) = expr.children
        val, dot = _forward(u, x)
        return UNARY_RULES[tag](val, dot, expr.payload)

    if tag in BINARY_RULES:
        lhs, rhs = expr.children
        u, du = _forward(lhs, x)
        v, dv = _forward(rhs, x)
        return BINARY_RULES[tag](u, du, v, dv)

    raise ValueError(f"No differentiation rule registered for op_tag {tag!r}")


def value(expr: Expression, x) -> float:
    """Return f(x) only."""
    return evaluate(expr, x)[0]


def derivative(expr: Expression, x) -> float:
    """Return f'(x) only."""
    return evaluate(expr, x)[1]
