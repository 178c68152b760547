# autodiff/ops/__init__.py

# Ensure every node kind has its forward rule registered
from . import arithmetic
from . import transcendental
from . import composition

# Convenience re-exports so users can do: from autodiff.ops import mul, sin, ...
from .arithmetic import add, sub, mul, div, neg, pow
from .transcendental import sqrt, exp, sin, cos, atan, ln, log
from .composition import compose

__all__ = [
    "add", "sub", "mul", "div", "neg", "pow",
    "sqrt", "exp", "sin", "cos", "atan", "ln", "log",
    "compose",
]
