# autodiff/__init__.py
# Forward-mode automatic differentiation over single-variable expression trees

from .core.expression import Expression, X, variable, constant
from .core.engine import evaluate, value, derivative

# Registers the forward rule of every node kind
from . import ops
from .ops import (
    add, sub, mul, div, neg, pow,
    sqrt, exp, sin, cos, atan, ln, log,
    compose,
)

from .optimize import DescentConfig, gradient_descent, gradient_ascent, find_root

__all__ = [
    # Core
    'Expression',
    'X',
    'variable',
    'constant',
    'evaluate',
    'value',
    'derivative',
    # Constructors
    'ops',
    'add', 'sub', 'mul', 'div', 'neg', 'pow',
    'sqrt', 'exp', 'sin', 'cos', 'atan', 'ln', 'log',
    'compose',
    # Optimisation
    'DescentConfig',
    'gradient_descent',
    'gradient_ascent',
    'find_root',
]
