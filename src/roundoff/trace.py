"""Human-readable trace of a sweep, in fixed-width scientific notation."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TextIO

import numpy as np

from roundoff.estimator import DerivativeEstimate
from roundoff.utils.types import Scalar

__all__ = ["TraceFormat", "DiagnosticTrace", "ESTIMATE_LABELS"]


#: Row labels of :meth:`DiagnosticTrace.write_estimate`, keyed by estimate field.
ESTIMATE_LABELS: dict[str, str] = {
    "h": "h",
    "x_plus_h": "x+h",
    "f_x_plus_h": "f(x+h)",
    "f_x": "f(x)",
    "difference": "f(x+h)-f(x)",
    "estimated": "Est.    f'(x)",
    "true": "True    f'(x)",
    "relative_error": "Rel. error   ",
}


@dataclass(frozen=True)
class TraceFormat:
    """Formatting of numbers in the trace.

    Attributes:
        precision: Digits after the decimal point of the mantissa.
        width: Field width each number is right-aligned in.
    """

    precision: int = 20
    width: int = 27


class DiagnosticTrace:
    """Writes epsilons and per-step estimates to a text stream."""

    def __init__(self, stream: TextIO | None = None, fmt: TraceFormat = TraceFormat()) -> None:
        self.stream = sys.stdout if stream is None else stream
        self.fmt = fmt

    def format_value(self, value: Scalar) -> str:
        """Formats ``value`` in scientific notation with a fixed number of digits.

        Digits are produced from the value's own type, so long double values
        keep their full precision.
        """
        return np.format_float_scientific(
            value, precision=self.fmt.precision, unique=False
        )

    def _line(self, text: str = "") -> None:
        self.stream.write(text + "\n")

    def write_epsilons(self, epsilons: Mapping[str, Scalar]) -> None:
        """Writes one ``NAME = value`` line per machine epsilon."""
        pad = max((len(name) for name in epsilons), default=0)
        for name, eps in epsilons.items():
            self._line(f"{name:<{pad}} = {self.format_value(eps)}")

    def write_estimate(self, estimate: DerivativeEstimate) -> None:
        """Writes every intermediate value of one estimate, then a blank line."""
        pad = max(len(label) for label in ESTIMATE_LABELS.values())
        self._line("In function numder ")
        for field, label in ESTIMATE_LABELS.items():
            value = self.format_value(getattr(estimate, field))
            self._line(f"{label:>{pad}}: {value:>{self.fmt.width}}")
        self._line(" ")
