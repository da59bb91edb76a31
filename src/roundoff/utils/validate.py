"""Validation utilities for roundoff."""

from __future__ import annotations

import numpy as np

from roundoff.utils.types import Scalar

__all__ = [
    "DomainError",
    "validate_step_size",
    "validate_nonzero_derivative",
    "validate_sweep_parameters",
]


class DomainError(ValueError):
    """Raised when an arithmetic operation is undefined for its inputs."""


def validate_step_size(h: Scalar) -> None:
    """Checks that a finite-difference step can be divided by.

    Args:
        h: The step size.

    Raises:
        DomainError: If ``h`` is exactly zero or not finite.
    """
    if not np.isfinite(h):
        raise DomainError(f"[Estimator] Step size must be finite; got {h!r}.")
    if h == 0:
        raise DomainError(
            "[Estimator] Step size is exactly zero; the forward difference "
            "would divide by zero (has h underflowed?)."
        )


def validate_nonzero_derivative(value: Scalar, x: Scalar) -> None:
    """Checks that the true derivative can serve as a relative-error denominator.

    Args:
        value: The true derivative at ``x``.
        x: The evaluation point, used in the error message.

    Raises:
        DomainError: If ``value`` is exactly zero.
    """
    if value == 0:
        raise DomainError(
            f"[Estimator] True derivative vanishes at x={x!r}; "
            "relative error is undefined."
        )


def validate_sweep_parameters(
    initial_step: float,
    divisor: float,
    n_steps: int,
) -> None:
    """Validates the constants that drive a geometric step sweep.

    Args:
        initial_step: Step size of the first iteration.
        divisor: Factor the step is divided by after each iteration.
        n_steps: Number of iterations.

    Raises:
        ValueError: If any of the parameters is out of range.
    """
    if isinstance(n_steps, bool) or not isinstance(n_steps, (int, np.integer)):
        raise ValueError(f"[ErrorSweep] n_steps must be an integer; got {n_steps!r}.")
    if n_steps < 1:
        raise ValueError(f"[ErrorSweep] n_steps must be at least 1; got {n_steps}.")
    if not np.isfinite(initial_step) or initial_step <= 0:
        raise ValueError(
            f"[ErrorSweep] initial_step must be positive and finite; got {initial_step!r}."
        )
    if not np.isfinite(divisor) or divisor <= 1:
        raise ValueError(f"[ErrorSweep] divisor must be greater than 1; got {divisor!r}.")
