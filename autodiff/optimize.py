"""
Scalar optimisation driven by exact forward-mode derivatives.

Small helpers for the experiments this package is meant for: walking
downhill (or uphill) on f(x) with a fixed step size, and Newton root finding
with f'(x) supplied exactly instead of by finite differences.
"""

import logging
from dataclasses import dataclass

import numpy as np
from scipy.optimize import newton

from .core.engine import evaluate, value, derivative

logger = logging.getLogger(__name__)


@dataclass
class DescentConfig:
    """Configuration for fixed-step gradient descent / ascent."""
    learning_rate: float = 0.1
    iterations: int = 100

    def __post_init__(self):
        if not self.learning_rate > 0.0:
            raise ValueError(
                f"learning_rate must be positive, got {self.learning_rate!r}"
            )
        if self.iterations < 0:
            raise ValueError(
                f"iterations must be non-negative, got {self.iterations!r}"
            )


def _walk(expr, x0, config, sign):
    config = config or DescentConfig()
    x = float(x0)
    for step in range(config.iterations):
        _, dfdx = evaluate(expr, x)
        x = x + sign * config.learning_rate * dfdx
        if not np.isfinite(x):
            logger.warning(
                "Iterate became non-finite (x=%r) at step %d; stopping early",
                x, step,
            )
            return x
    logger.debug("Finished %d steps at x=%r", config.iterations, x)
    return x


def gradient_descent(expr, x0=0.0, config=None):
    """
    Minimise expr by repeating x <- x - lr * f'(x).

    Args:
        expr:   Expression to minimise.
        x0:     Starting point.
        config: DescentConfig; defaults to lr=0.1, 100 iterations.

    Returns:
        The final iterate (a local minimiser if the walk converged).
    """
    return _walk(expr, x0, config, -1.0)


def gradient_ascent(expr, x0=0.0, config=None):
    """Maximise expr by repeating x <- x + lr * f'(x)."""
    return _walk(expr, x0, config, +1.0)


def find_root(expr, x0, tol=1.48e-8, maxiter=50):
    """
    Newton iteration for f(x) = 0 with the exact derivative.

    Raises scipy's RuntimeError if the iteration does not converge.
    """
    root = newton(
        lambda x: value(expr, x),
        float(x0),
        fprime=lambda x: derivative(expr, x),
        tol=tol,
        maxiter=maxiter,
    )
    logger.debug("Newton converged to x=%r from x0=%r", root, x0)
    return float(root)
