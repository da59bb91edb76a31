"""Tests for roundoff.trace."""

import io

import numpy as np
import pytest

from roundoff.estimator import estimate
from roundoff.precision import machine_epsilons
from roundoff.trace import DiagnosticTrace, TraceFormat


def test_format_value_uses_fixed_digits():
    """Tests scientific notation with 20 digits after the point by default."""
    trace = DiagnosticTrace(io.StringIO())
    assert trace.format_value(np.float64(1.0)) == "1.00000000000000000000e+00"
    assert trace.format_value(np.float64(-0.5)) == "-5.00000000000000000000e-01"


def test_format_value_respects_format_config():
    """Tests that the digit count comes from the TraceFormat passed in."""
    trace = DiagnosticTrace(io.StringIO(), TraceFormat(precision=3, width=12))
    assert trace.format_value(np.float64(1234.0)) == "1.234e+03"


def test_extended_values_keep_their_digits():
    """Tests that long double values are not rounded through float64."""
    if np.finfo(np.longdouble).eps == np.finfo(np.float64).eps:
        pytest.skip("long double is float64 on this platform")
    trace = DiagnosticTrace(io.StringIO())
    third = np.longdouble("0.33333333333333333333")
    assert trace.format_value(third) != trace.format_value(np.float64(third))


def test_write_epsilons_lines():
    """Tests the epsilon report layout."""
    buf = io.StringIO()
    DiagnosticTrace(buf).write_epsilons(machine_epsilons())
    lines = buf.getvalue().splitlines()
    assert len(lines) == 3
    assert lines[0] == "FLT_EPSILON  = 1.19209289550781250000e-07"
    assert lines[1] == "DBL_EPSILON  = 2.22044604925031308085e-16"
    assert lines[2].startswith("LDBL_EPSILON = ")


def test_write_estimate_block():
    """Tests the labels, alignment and separator of one estimate block."""
    buf = io.StringIO()
    trace = DiagnosticTrace(buf)
    trace.write_estimate(estimate(np.float64(0.5), np.float64(0.25)))
    lines = buf.getvalue().split("\n")

    assert lines[0] == "In function numder "
    assert lines[1] == "            h: " + " 2.50000000000000000000e-01"
    labels = [line.split(":")[0].strip() for line in lines[1:9]]
    assert labels == [
        "h", "x+h", "f(x+h)", "f(x)", "f(x+h)-f(x)",
        "Est.    f'(x)", "True    f'(x)", "Rel. error",
    ]
    assert all(len(line) == 15 + 27 for line in lines[1:9])
    assert lines[9] == " "


def test_default_stream_is_stdout(capsys):
    """Tests that the trace prints to standard output when no stream is given."""
    DiagnosticTrace().write_epsilons({"X": np.float64(2.0)})
    assert capsys.readouterr().out == "X = 2.00000000000000000000e+00\n"
