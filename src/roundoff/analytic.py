"""The analytic test function and its closed-form derivative.

The sweep studies f(x) = x**2, whose first derivative 2x is known exactly and
serves as the ground truth for every estimate.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from roundoff.utils.types import Scalar

__all__ = ["AnalyticFunctionPair", "SQUARE", "evaluate", "true_derivative"]


def evaluate(x: Scalar) -> Scalar:
    """Returns f(x) = x**2 in the precision of ``x``."""
    return x * x


def true_derivative(x: Scalar) -> Scalar:
    """Returns f'(x) = 2x in the precision of ``x``."""
    factor = np.asarray(x).dtype.type(2.0)
    return factor * x


@dataclass(frozen=True)
class AnalyticFunctionPair:
    """A function together with its exact first derivative.

    Attributes:
        function: The function being differentiated.
        derivative: Its closed-form first derivative.
        label: Human-readable description, used in log messages.
    """

    function: Callable[[Scalar], Scalar]
    derivative: Callable[[Scalar], Scalar]
    label: str = ""

    def evaluate(self, x: Scalar) -> Scalar:
        return self.function(x)

    def true_derivative(self, x: Scalar) -> Scalar:
        return self.derivative(x)


#: f(x) = x**2 with f'(x) = 2x.
SQUARE = AnalyticFunctionPair(function=evaluate, derivative=true_derivative, label="x**2")
