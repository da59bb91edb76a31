"""Forward-difference derivative estimates and their errors.

Example:
-------
>>> import numpy as np
>>> from roundoff.estimator import estimate
>>> est = estimate(np.float64(1.0), np.float64(0.5))
>>> float(est.estimated)
2.5
>>> float(est.absolute_error)
0.5
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

import numpy as np

from roundoff.analytic import SQUARE, AnalyticFunctionPair
from roundoff.logger import roundoff_logger
from roundoff.precision import resolve_precision
from roundoff.utils.types import FloatType, Scalar
from roundoff.utils.validate import validate_nonzero_derivative, validate_step_size

__all__ = ["DerivativeEstimate", "estimate", "coerce_inputs"]


@dataclass(frozen=True)
class DerivativeEstimate:
    """Everything computed for one forward-difference evaluation.

    All fields share the working precision of the call.

    Attributes:
        x: Evaluation point.
        h: Step size.
        x_plus_h: The shifted point ``x + h``.
        f_x_plus_h: ``f(x + h)``.
        f_x: ``f(x)``.
        difference: ``f(x + h) - f(x)``.
        estimated: Forward-difference estimate ``difference / h``.
        true: Closed-form derivative at ``x``.
        absolute_error: ``|estimated - true|``.
        relative_error: ``(estimated - true) / true``.
    """

    x: np.floating
    h: np.floating
    x_plus_h: np.floating
    f_x_plus_h: np.floating
    f_x: np.floating
    difference: np.floating
    estimated: np.floating
    true: np.floating
    absolute_error: np.floating
    relative_error: np.floating

    @property
    def dtype(self) -> np.dtype:
        return np.asarray(self.estimated).dtype

    def as_dict(self) -> dict[str, float]:
        """Returns a plain dictionary of Python floats, suited for logging."""
        return {key: float(value) for key, value in asdict(self).items()}


def coerce_inputs(
    x: Scalar | str,
    h: Scalar,
    dtype: str | FloatType | None = None,
) -> tuple[np.floating, np.floating]:
    """Converts ``x`` and ``h`` to one common numpy floating type.

    Args:
        x: Evaluation point. Strings are parsed directly in the target type,
            so decimal literals keep every digit that type can hold.
        h: Step size.
        dtype: Target precision. If ``None``, the promoted type of ``x`` and
            ``h`` is used, falling back to ``float64`` for non-floating input.

    Returns:
        The pair ``(x, h)`` as scalars of the same numpy type.
    """
    if dtype is None:
        if isinstance(x, str):
            raise ValueError("[Estimator] A dtype is required when x is given as a string.")
        promoted = np.result_type(x, h)
        dtype = promoted if np.issubdtype(promoted, np.floating) else np.float64
    ftype = resolve_precision(dtype)
    return ftype(x), ftype(h)


def estimate(
    x: Scalar | str,
    h: Scalar,
    pair: AnalyticFunctionPair = SQUARE,
    *,
    dtype: str | FloatType | None = None,
) -> DerivativeEstimate:
    """Estimates f'(x) with a forward difference and measures its error.

    The estimate is ``(f(x + h) - f(x)) / h``; the reference value comes from
    the closed-form derivative of ``pair`` and never from the estimate itself.

    Args:
        x: Evaluation point.
        h: Step size. Must be non-zero and finite.
        pair: Function and exact derivative to use.
        dtype: Working precision; see :func:`coerce_inputs`.

    Returns:
        A :class:`DerivativeEstimate` with all intermediate values.

    Raises:
        DomainError: If ``h`` is zero or not finite, or if the true
            derivative at ``x`` is zero so the relative error is undefined.
    """
    x, h = coerce_inputs(x, h, dtype)
    validate_step_size(h)

    x2 = x + h
    f2 = pair.evaluate(x2)
    f1 = pair.evaluate(x)
    difference = f2 - f1
    estimated = difference / h
    true = pair.true_derivative(x)
    validate_nonzero_derivative(true, x)

    deviation = estimated - true
    result = DerivativeEstimate(
        x=x,
        h=h,
        x_plus_h=x2,
        f_x_plus_h=f2,
        f_x=f1,
        difference=difference,
        estimated=estimated,
        true=true,
        absolute_error=np.abs(deviation),
        relative_error=deviation / true,
    )
    roundoff_logger.debug("forward difference: %s", result.as_dict())
    return result
