# autodiff/ops/composition.py
from ..core.expression import Expression, as_expression

def compose(outer, inner):
    """
    Function composition: compose(f, g) is x -> f(g(x)).

    Evaluated by the engine with the chain rule: g is evaluated at x, then f
    at g(x), and the derivatives multiply.
    """
    return Expression("compose", (as_expression(outer), as_expression(inner)))
