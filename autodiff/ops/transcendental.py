# autodiff/ops/transcendental.py
import numpy as np
from ..core.expression import Expression, as_expression
from ..core.engine import register_unary

def _unary(x, tag):
    return Expression(tag, (as_expression(x),))

def sqrt(x): return _unary(x, "sqrt")
def exp(x):  return _unary(x, "exp")
def sin(x):  return _unary(x, "sin")
def cos(x):  return _unary(x, "cos")
def atan(x): return _unary(x, "atan")
def ln(x):   return _unary(x, "ln")

log = ln


@register_unary("sqrt")
def _sqrt_rule(u, du, _):
    # f = sqrt(u), f' = u' / (2 sqrt(u))
    s = np.sqrt(u)
    return s, du / (2.0 * s)

@register_unary("exp")
def _exp_rule(u, du, _):
    # f = e^u, f' = u' e^u
    ex = np.exp(u)
    return ex, ex * du

@register_unary("sin")
def _sin_rule(u, du, _):
    # f = sin(u), f' = u' cos(u)
    return np.sin(u), np.cos(u) * du

@register_unary("cos")
def _cos_rule(u, du, _):
    # f = cos(u), f' = -u' sin(u)
    return np.cos(u), -np.sin(u) * du

@register_unary("atan")
def _atan_rule(u, du, _):
    """
    Arctangent: f = atan(u), f' = u' / (1 + u^2).
    """
    return np.arctan(u), du / (1.0 + u * u)

@register_unary("ln")
def _ln_rule(u, du, _):
    # f = ln(u), f' = u' / u
    return np.log(u), du / u
