"""Working floating-point precisions and their machine epsilons.

The whole computation runs in a single numpy scalar type chosen by name, so
the same code can be re-run in single, double or extended precision.
"""

from __future__ import annotations

import numpy as np

from roundoff.utils.types import FloatType

__all__ = [
    "PRECISIONS",
    "EPSILON_LABELS",
    "resolve_precision",
    "precision_name",
    "machine_epsilons",
]


#: Supported working precisions, from smallest to widest.
PRECISIONS: dict[str, FloatType] = {
    "single": np.float32,
    "double": np.float64,
    "extended": np.longdouble,
}

#: C-style names of the machine epsilon for each precision class.
EPSILON_LABELS: dict[str, str] = {
    "single": "FLT_EPSILON",
    "double": "DBL_EPSILON",
    "extended": "LDBL_EPSILON",
}


def resolve_precision(precision: str | FloatType | np.dtype) -> FloatType:
    """Returns the numpy scalar type for a precision name or type.

    Args:
        precision: One of the names in :data:`PRECISIONS`, or a numpy
            floating type or dtype.

    Returns:
        The numpy floating scalar type, e.g. ``numpy.float64``.

    Raises:
        ValueError: If the name is unknown or the type is not floating point.
    """
    if isinstance(precision, str):
        try:
            return PRECISIONS[precision]
        except KeyError:
            raise ValueError(
                f"[Precision] Unknown precision {precision!r}. "
                f"Must be one of {list(PRECISIONS)}."
            ) from None

    dtype = np.dtype(precision)
    if not np.issubdtype(dtype, np.floating):
        raise ValueError(f"[Precision] {dtype} is not a floating-point type.")
    return dtype.type


def precision_name(precision: str | FloatType | np.dtype) -> str:
    """Returns the registry name of a precision, e.g. ``"double"``.

    Types outside the registry (such as ``numpy.float16``) are named after
    their dtype.
    """
    ftype = resolve_precision(precision)
    for name, candidate in PRECISIONS.items():
        if np.dtype(candidate) == np.dtype(ftype):
            return name
    return np.dtype(ftype).name


def machine_epsilons() -> dict[str, np.floating]:
    """Machine epsilon of each supported precision class.

    Returns:
        A mapping from ``FLT_EPSILON``, ``DBL_EPSILON`` and ``LDBL_EPSILON``
        to the epsilon in the corresponding numpy type.
    """
    return {
        EPSILON_LABELS[name]: np.finfo(ftype).eps
        for name, ftype in PRECISIONS.items()
    }
