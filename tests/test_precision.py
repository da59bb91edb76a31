"""Tests for roundoff.precision."""

import numpy as np
import pytest

from roundoff.precision import (
    PRECISIONS,
    machine_epsilons,
    precision_name,
    resolve_precision,
)


@pytest.mark.parametrize(
    "name, ftype",
    [("single", np.float32), ("double", np.float64), ("extended", np.longdouble)],
)
def test_resolve_by_name(name, ftype):
    """Tests that registry names map to their numpy types."""
    assert resolve_precision(name) is ftype


@pytest.mark.parametrize("ftype", [np.float16, np.float32, np.float64, np.longdouble])
def test_resolve_accepts_floating_types_and_dtypes(ftype):
    """Tests that numpy floating types and dtypes resolve to the scalar type."""
    assert resolve_precision(ftype) is ftype
    assert resolve_precision(np.dtype(ftype)) is ftype


def test_resolve_rejects_unknown_name():
    """Tests that an unknown precision name raises a ValueError listing the options."""
    with pytest.raises(ValueError) as ei:
        resolve_precision("quadruple")
    assert "Unknown precision" in str(ei.value)
    assert "double" in str(ei.value)


@pytest.mark.parametrize("bad", [np.int32, np.complex128, bool])
def test_resolve_rejects_non_floating_types(bad):
    """Tests that integer, complex and boolean types are refused."""
    with pytest.raises(ValueError):
        resolve_precision(bad)


def test_precision_name_round_trips_registry():
    """Tests that every registered type is named after its registry key."""
    for name, ftype in PRECISIONS.items():
        assert precision_name(ftype) == name
    assert precision_name(np.float16) == "float16"


def test_machine_epsilons_cover_three_width_classes():
    """Tests the epsilon labels, their order and their values."""
    eps = machine_epsilons()
    assert list(eps) == ["FLT_EPSILON", "DBL_EPSILON", "LDBL_EPSILON"]
    assert eps["FLT_EPSILON"] == np.float32(2.0**-23)
    assert eps["DBL_EPSILON"] == 2.0**-52
    assert eps["LDBL_EPSILON"] <= eps["DBL_EPSILON"]
    assert type(eps["LDBL_EPSILON"]) is np.longdouble
