"""Histogram-style persistence for per-step error magnitudes.

A :class:`HistogramSink` stores one value per equal-width bin and writes the
series to a ``.npz`` archive with :func:`numpy.savez` when finalized. Indices
are bin-centred: with the default 80 bins over ``[0.5, 80.5)``, step ``i``
lands in the ``i``-th bin.
"""

from __future__ import annotations

from os import PathLike
from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from roundoff.logger import roundoff_logger

__all__ = ["HistogramSink", "load_histogram", "DEFAULT_OUTPUT"]

#: File written by the command-line entry point.
DEFAULT_OUTPUT = "histos.npz"


class HistogramSink:
    """Fixed-binning container for ``(index, value)`` pairs.

    Attributes:
        name: Name stored alongside the data.
        edges: Bin edges, ``n_bins + 1`` values from ``low`` to ``high``.
        contents: Current bin contents.
        path: Destination of :meth:`finalize`.
    """

    def __init__(
        self,
        name: str = "hist",
        n_bins: int = 80,
        low: float = 0.5,
        high: float = 80.5,
        path: str | PathLike[str] = DEFAULT_OUTPUT,
        dtype: type[np.floating] = np.float64,
    ) -> None:
        """Initialises an empty histogram.

        Args:
            name: Name stored in the archive.
            n_bins: Number of equal-width bins.
            low: Lower edge of the first bin.
            high: Upper edge of the last bin.
            path: Output file written by :meth:`finalize`.
            dtype: Floating type of the stored contents.

        Raises:
            ValueError: If ``n_bins < 1`` or ``high <= low``.
        """
        if n_bins < 1:
            raise ValueError(f"[HistogramSink] n_bins must be at least 1; got {n_bins}.")
        if not high > low:
            raise ValueError(f"[HistogramSink] high ({high}) must exceed low ({low}).")

        self.name = name
        self.low = float(low)
        self.high = float(high)
        self.edges = np.linspace(self.low, self.high, n_bins + 1)
        self.contents: NDArray[np.floating] = np.zeros(n_bins, dtype=dtype)
        self.path = Path(path)
        self._closed = False

    @classmethod
    def for_series(
        cls,
        n_steps: int,
        path: str | PathLike[str] = DEFAULT_OUTPUT,
        name: str = "hist",
    ) -> HistogramSink:
        """Builds a sink with one bin centred on each step index ``1..n_steps``."""
        return cls(name=name, n_bins=n_steps, low=0.5, high=n_steps + 0.5, path=path)

    @property
    def n_bins(self) -> int:
        return self.contents.size

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        return self.n_bins

    def bin_of(self, index: float) -> int:
        """Returns the zero-based bin that contains ``index``.

        Raises:
            ValueError: If ``index`` lies outside ``[low, high)``.
        """
        if not self.low <= index < self.high:
            raise ValueError(
                f"[HistogramSink] index {index} outside [{self.low}, {self.high})."
            )
        return int(np.searchsorted(self.edges, index, side="right")) - 1

    def record(self, index: float, value: float) -> None:
        """Stores ``value`` in the bin containing ``index``, replacing what was there.

        Raises:
            RuntimeError: If the sink has already been finalized.
            ValueError: If ``index`` is out of range.
        """
        if self._closed:
            raise RuntimeError(f"[HistogramSink] {self.name!r} is already finalized.")
        self.contents[self.bin_of(index)] = value

    def finalize(self) -> Path:
        """Writes the histogram to :attr:`path` and closes the sink.

        An existing file at :attr:`path` is overwritten.

        Returns:
            The path that was written.

        Raises:
            RuntimeError: If the sink has already been finalized.
            OSError: If the file cannot be created or written.
        """
        if self._closed:
            raise RuntimeError(f"[HistogramSink] {self.name!r} is already finalized.")
        try:
            with open(self.path, "wb") as fh:
                np.savez(fh, name=np.array(self.name), edges=self.edges, contents=self.contents)
        except OSError as exc:
            roundoff_logger.debug("could not write histogram to %s: %s", self.path, exc)
            raise
        self._closed = True
        roundoff_logger.info("wrote %d bins of %r to %s", self.n_bins, self.name, self.path)
        return self.path


def load_histogram(
    path: str | PathLike[str],
) -> tuple[str, NDArray[np.float64], NDArray[np.floating]]:
    """Reads an archive written by :meth:`HistogramSink.finalize`.

    Args:
        path: The ``.npz`` file to read.

    Returns:
        A tuple ``(name, edges, contents)``.
    """
    with np.load(path) as data:
        return str(data["name"]), data["edges"], data["contents"]
