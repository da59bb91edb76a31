"""Pytest configuration with shared precision fixtures."""

import numpy as np
import pytest

__all__ = ["ROUNDOFF_VISIBLE_PRECISIONS"]

#: Precisions in which 80 halvings of h reach the round-off regime.
ROUNDOFF_VISIBLE_PRECISIONS = ["single", "double"]
if np.finfo(np.longdouble).eps > 2.0**-78:
    # quad-precision long double would need more than 80 halvings
    ROUNDOFF_VISIBLE_PRECISIONS.append("extended")


@pytest.fixture(params=ROUNDOFF_VISIBLE_PRECISIONS)
def precision(request):
    """Parametrizes a test over precisions whose error curve turns up within 80 steps."""
    return request.param
