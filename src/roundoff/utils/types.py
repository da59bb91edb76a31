"""Shared typing aliases for roundoff."""

from __future__ import annotations

from typing import TypeAlias

import numpy as np
from numpy.typing import NDArray

FloatType: TypeAlias = type[np.floating]
Scalar: TypeAlias = float | np.floating
Array: TypeAlias = NDArray[np.floating]
IndexArray: TypeAlias = NDArray[np.int64]
