# autodiff/core/__init__.py

"""
Core public API for the autodiff package.

Exports:
    Expression    : Immutable expression-tree node over the single variable x.
    X, variable   : The free variable (identity function).
    constant      : Build a constant function.
    evaluate      : Forward pass returning (value, derivative) at a point.
    value         : Convenience: only the value.
    derivative    : Convenience: only the derivative.
"""

from .expression import Expression, X, variable, constant, as_expression
from .engine import evaluate, value, derivative

__all__ = [
    "Expression", "X", "variable", "constant", "as_expression",
    "evaluate", "value", "derivative",
]
