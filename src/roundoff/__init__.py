"""Forward-difference round-off versus truncation error explorer."""

from importlib.metadata import PackageNotFoundError, version

from roundoff.analytic import SQUARE, AnalyticFunctionPair
from roundoff.compare import compare_precisions
from roundoff.estimator import DerivativeEstimate, estimate
from roundoff.precision import PRECISIONS, machine_epsilons, resolve_precision
from roundoff.sink import HistogramSink, load_histogram
from roundoff.sweep import ErrorSweep, ResultSeries, SweepConfig
from roundoff.trace import DiagnosticTrace, TraceFormat
from roundoff.utils.validate import DomainError

try:
    __version__ = version("roundoff")
except PackageNotFoundError:
    pass

__all__ = [
    "AnalyticFunctionPair",
    "DerivativeEstimate",
    "DiagnosticTrace",
    "DomainError",
    "ErrorSweep",
    "HistogramSink",
    "PRECISIONS",
    "ResultSeries",
    "SQUARE",
    "SweepConfig",
    "TraceFormat",
    "compare_precisions",
    "estimate",
    "load_histogram",
    "machine_epsilons",
    "resolve_precision",
]
