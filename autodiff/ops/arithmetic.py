# autodiff/ops/arithmetic.py
from ..core.expression import Expression, as_expression, _is_real
from ..core.engine import register_unary, register_binary

def _binary(x, y, tag):
    """Build a two-child node, wrapping bare numbers as constants first."""
    return Expression(tag, (as_expression(x), as_expression(y)))

def add(x, y): return _binary(x, y, "add")
def sub(x, y): return _binary(x, y, "sub")
def mul(x, y): return _binary(x, y, "mul")
def div(x, y): return _binary(x, y, "div")

def neg(x):
    """Unary negation: f(x) = -u."""
    return Expression("neg", (as_expression(x),))

def pow(x, order):
    """
    Power with a constant exponent: f(x) = u^n.

    The exponent is a plain real number fixed at construction time, not a
    sub-expression.
    """
    if not _is_real(order):
        raise TypeError(
            f"pow() only accepts a real exponent, but got {type(order)}"
        )
    return Expression("pow", (as_expression(x),), float(order))


# --------- forward rules: (u, u') and (v, v') -> (f, f') ---------
register_binary("add")(lambda u, du, v, dv: (u + v, du + dv))
register_binary("sub")(lambda u, du, v, dv: (u - v, du - dv))
# f = uv, f' = u'v + uv'
register_binary("mul")(lambda u, du, v, dv: (u * v, du * v + u * dv))
# f = u/v, f' = (u'v - uv') / v^2
register_binary("div")(lambda u, du, v, dv: (u / v, (du * v - u * dv) / (v * v)))

register_unary("neg")(lambda u, du, _: (-u, -du))

@register_unary("pow")
def _pow_rule(u, du, order):
    # f = u^n, f' = n u^(n-1) u'
    return u ** order, order * u ** (order - 1.0) * du
