"""Command-line entry point: run the default sweep and save the histogram.

Run with::

    python -m roundoff
"""

from __future__ import annotations

import logging
import sys

from roundoff.logger import roundoff_logger
from roundoff.precision import machine_epsilons
from roundoff.sink import DEFAULT_OUTPUT, HistogramSink
from roundoff.sweep import ErrorSweep, SweepConfig
from roundoff.trace import DiagnosticTrace
from roundoff.utils.validate import DomainError


def main() -> int:
    """Prints the trace, writes ``histos.npz`` and returns the exit status."""
    logging.basicConfig(level=logging.WARNING)

    config = SweepConfig()
    trace = DiagnosticTrace(sys.stdout)
    sink = HistogramSink.for_series(config.n_steps, path=DEFAULT_OUTPUT)

    try:
        trace.write_epsilons(machine_epsilons())
        ErrorSweep(config, sink=sink, trace=trace).run()
        sink.finalize()
    except (DomainError, OSError) as exc:
        roundoff_logger.error("sweep failed: %s", exc)
        print(f"roundoff: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
