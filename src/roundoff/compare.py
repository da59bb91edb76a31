"""Side-by-side summary of the error sweep in every supported precision."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import numpy as np

from roundoff.precision import PRECISIONS, resolve_precision
from roundoff.sweep import ErrorSweep, SweepConfig

__all__ = ["PrecisionSummary", "compare_precisions", "format_summary_table"]


@dataclass(frozen=True)
class PrecisionSummary:
    """Where the error curve of one precision bottoms out."""

    precision: str
    epsilon: float
    best_index: int
    best_step: float
    minimum_error: float
    u_shaped: bool


def compare_precisions(
    names: Iterable[str] = tuple(PRECISIONS),
    **config: Any,
) -> list[PrecisionSummary]:
    """Runs one sweep per precision and summarizes each.

    Args:
        names: Precision names to run, in output order.
        **config: Further :class:`~roundoff.sweep.SweepConfig` fields shared
            by all runs, except ``precision``, which comes from ``names``.

    Returns:
        One :class:`PrecisionSummary` per name.

    Raises:
        ValueError: If ``precision`` is passed in ``config``.
    """
    if "precision" in config:
        raise ValueError("[compare_precisions] precision is set per run via names.")

    summaries = []
    for name in names:
        series = ErrorSweep(SweepConfig(precision=name, **config)).run()
        best = series.argmin_index()
        summaries.append(
            PrecisionSummary(
                precision=name,
                epsilon=float(np.finfo(resolve_precision(name)).eps),
                best_index=best,
                best_step=float(series.step_sizes[best - 1]),
                minimum_error=float(series.minimum_error()),
                u_shaped=series.is_u_shaped(),
            )
        )
    return summaries


def format_summary_table(summaries: Iterable[PrecisionSummary]) -> str:
    """Renders summaries as a fixed-width text table."""
    header = "  {:>10s}  {:>12s}  {:>6s}  {:>12s}  {:>12s}  {:>8s}".format(
        "precision", "epsilon", "step", "best h", "min error", "U-shape"
    )
    lines = [header, "  " + "-" * (len(header) - 2)]
    for s in summaries:
        lines.append(
            f"  {s.precision:>10s}  {s.epsilon:12.4e}  {s.best_index:6d}  "
            f"{s.best_step:12.4e}  {s.minimum_error:12.4e}  {str(s.u_shaped):>8s}"
        )
    return "\n".join(lines)
