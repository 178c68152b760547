# autodiff/core/expression.py
from __future__ import annotations
import numbers
from dataclasses import dataclass
from typing import Any, Tuple

@dataclass(frozen=True, repr=False)
class Expression:
    """
    One node of an expression tree over the single free variable x.

    Attributes
    ----------
    op_tag   : str
        Node kind ("var", "const", "add", "mul", "pow", "sin", "compose", ...).
    children : Tuple[Expression, ...]
        Sub-expressions this node combines. Empty for leaves.
    payload  : float
        The constant value for "const", the exponent for "pow"; unused otherwise.

    Trees are immutable once built, so sub-trees can be shared freely between
    expressions and evaluated from several threads at once.
    """
    op_tag: str
    children: Tuple["Expression", ...] = ()
    payload: float = 0.0

    # numpy scalars on the left of an operator defer to our reflected methods
    __array_ufunc__ = None

    def __repr__(self):
        if self.op_tag == "var":
            return "Expression('var')"
        if self.op_tag == "const":
            return f"Expression('const', payload={self.payload!r})"
        return f"Expression({self.op_tag!r}, {len(self.children)} children)"

    def eval(self, x) -> Tuple[float, float]:
        """Return (f(x), f'(x))."""
        from .engine import evaluate
        return evaluate(self, x)

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return _binary_or_not_implemented(add, self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return _binary_or_not_implemented(add, other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return _binary_or_not_implemented(sub, self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return _binary_or_not_implemented(sub, other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return _binary_or_not_implemented(mul, self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return _binary_or_not_implemented(mul, other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return _binary_or_not_implemented(div, self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return _binary_or_not_implemented(div, other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, order):
        # Only constant exponents: u ** v for two expressions is not supported
        if not _is_real(order):
            return NotImplemented
        return self.pow(order)

    # Method-style constructors
    def pow(self, order) -> "Expression":
        from ..ops.arithmetic import pow
        return pow(self, order)

    def sqrt(self) -> "Expression":
        from ..ops.transcendental import sqrt
        return sqrt(self)

    def exp(self) -> "Expression":
        from ..ops.transcendental import exp
        return exp(self)

    def sin(self) -> "Expression":
        from ..ops.transcendental import sin
        return sin(self)

    def cos(self) -> "Expression":
        from ..ops.transcendental import cos
        return cos(self)

    def atan(self) -> "Expression":
        from ..ops.transcendental import atan
        return atan(self)

    def ln(self) -> "Expression":
        from ..ops.transcendental import ln
        return ln(self)

    log = ln

    def compose(self, inner) -> "Expression":
        """f.compose(g) is the function x -> f(g(x))."""
        from ..ops.composition import compose
        return compose(self, inner)


def _is_real(x: Any) -> bool:
    return isinstance(x, numbers.Real) and not isinstance(x, bool)


def _binary_or_not_implemented(op, lhs, rhs):
    if not all(isinstance(v, Expression) or _is_real(v) for v in (lhs, rhs)):
        return NotImplemented
    return op(lhs, rhs)


def constant(value) -> Expression:
    """Constant function f(x) = value."""
    if not _is_real(value):
        raise TypeError(
            f"constant() only accepts real numbers, but got {type(value)}"
        )
    return Expression("const", payload=float(value))


def as_expression(x: Any) -> Expression:
    """Ensure x is an Expression; otherwise wrap a real number as a constant."""
    return x if isinstance(x, Expression) else constant(x)


# The free variable: f(x) = x. All variable leaves compare equal.
X = Expression("var")


def variable() -> Expression:
    return X
