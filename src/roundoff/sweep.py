"""Geometric step-size sweep of the forward-difference error.

Starting from ``h = 1`` the step is halved after every iteration. For large
``h`` the truncation error dominates and shrinks with ``h``; once ``h`` nears
the resolution of the working precision, cancellation in ``f(x+h) - f(x)``
takes over and the error grows again. The resulting curve is U-shaped.

Example:
-------
>>> from roundoff.sweep import ErrorSweep, SweepConfig
>>> series = ErrorSweep(SweepConfig(precision="double")).run()
>>> len(series)
80
>>> series.is_u_shaped()
True
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from roundoff.analytic import SQUARE, AnalyticFunctionPair
from roundoff.estimator import estimate
from roundoff.logger import roundoff_logger
from roundoff.precision import precision_name, resolve_precision
from roundoff.sink import HistogramSink
from roundoff.trace import DiagnosticTrace
from roundoff.utils.types import Array, FloatType, IndexArray
from roundoff.utils.validate import validate_sweep_parameters

__all__ = ["SweepConfig", "ResultSeries", "ErrorSweep"]


@dataclass(frozen=True)
class SweepConfig:
    """Constants of a sweep.

    Attributes:
        x: Evaluation point. Given as a decimal string so that it is parsed
            directly in the working precision.
        initial_step: Step size of iteration 1.
        divisor: The step is divided by this after every iteration.
        n_steps: Number of iterations.
        precision: Working precision name (see
            :data:`roundoff.precision.PRECISIONS`) or numpy floating type.
    """

    x: str | float = "0.33333333333333333333"
    initial_step: float = 1.0
    divisor: float = 2.0
    n_steps: int = 80
    precision: str | FloatType = "double"

    def __post_init__(self) -> None:
        validate_sweep_parameters(self.initial_step, self.divisor, self.n_steps)
        resolve_precision(self.precision)

    @property
    def ftype(self) -> FloatType:
        return resolve_precision(self.precision)


@dataclass(frozen=True)
class ResultSeries:
    """Absolute error per step index, as produced by :meth:`ErrorSweep.run`.

    The arrays are read-only.

    Attributes:
        indices: Step indices ``1..n``.
        step_sizes: Step size used at each index.
        absolute_errors: ``|estimated - true|`` at each index.
        precision: Name of the working precision.
    """

    indices: IndexArray
    step_sizes: Array
    absolute_errors: Array
    precision: str

    def __post_init__(self) -> None:
        for arr in (self.indices, self.step_sizes, self.absolute_errors):
            arr.setflags(write=False)

    def __len__(self) -> int:
        return self.indices.size

    def argmin_index(self) -> int:
        """Returns the 1-based step index with the smallest error."""
        return int(self.indices[np.argmin(self.absolute_errors)])

    def minimum_error(self) -> np.floating:
        return self.absolute_errors.min()

    def is_u_shaped(self) -> bool:
        """True if the minimum error is strictly below the first and last errors."""
        lowest = self.minimum_error()
        return bool(lowest < self.absolute_errors[0] and lowest < self.absolute_errors[-1])


class ErrorSweep:
    """Runs forward-difference estimates over a halving sequence of step sizes.

    Attributes:
        config: The sweep constants.
        sink: Optional receiver of ``(index, absolute_error)`` pairs.
        trace: Optional writer of the per-step diagnostic trace.
        pair: Function and exact derivative being studied.
    """

    def __init__(
        self,
        config: SweepConfig = SweepConfig(),
        *,
        sink: HistogramSink | None = None,
        trace: DiagnosticTrace | None = None,
        pair: AnalyticFunctionPair = SQUARE,
    ) -> None:
        self.config = config
        self.sink = sink
        self.trace = trace
        self.pair = pair

    def run(self) -> ResultSeries:
        """Performs the sweep.

        The sink, if any, receives every value but is not finalized here.

        Returns:
            The :class:`ResultSeries` of the run.

        Raises:
            DomainError: If the step size underflows to zero before the last
                iteration.
        """
        cfg = self.config
        ftype = cfg.ftype
        x = ftype(cfg.x)
        h = ftype(cfg.initial_step)
        divisor = ftype(cfg.divisor)

        roundoff_logger.info(
            "sweeping f(x)=%s at x=%s over %d steps in %s precision",
            self.pair.label, cfg.x, cfg.n_steps, precision_name(ftype),
        )

        indices = np.arange(1, cfg.n_steps + 1, dtype=np.int64)
        steps = np.empty(cfg.n_steps, dtype=ftype)
        errors = np.empty(cfg.n_steps, dtype=ftype)

        for i in indices:
            result = estimate(x, h, self.pair, dtype=ftype)
            steps[i - 1] = h
            errors[i - 1] = result.absolute_error
            if self.sink is not None:
                self.sink.record(int(i), result.absolute_error)
            if self.trace is not None:
                self.trace.write_estimate(result)
            h = h / divisor

        series = ResultSeries(
            indices=indices,
            step_sizes=steps,
            absolute_errors=errors,
            precision=precision_name(ftype),
        )
        best = series.argmin_index()
        roundoff_logger.info(
            "smallest error %.3e at step %d (h=%.3e)",
            float(series.minimum_error()), best, float(steps[best - 1]),
        )
        return series
