"""
Prediction and text reports for a trained linear model.

Reports are written to any object with a ``write(str)`` method (standard
output when none is given) in this layout:

    --------------------------------------------------------------------------
    Input: -1
    Output: 1
    Input: 0
    Output: 3
    --------------------------------------------------------------------------

Numbers use ``%g`` style formatting. Predictions closer to zero than the
threshold are shown as 0; the model itself is not changed.
"""

from __future__ import annotations

import math
import sys
from typing import IO, Iterable, Iterator, List, Optional, Tuple

from .dataset import RegressionDataset
from .model import LinearRegressor


SEPARATOR = "-" * 74


def snap(value: float, threshold: float) -> float:
    """Return 0.0 for values strictly inside (-threshold, threshold)."""
    if -threshold < value < threshold:
        return 0.0
    return value


def format_value(value: float) -> str:
    return f"{value:g}"


def _advances(x: float, step: float) -> bool:
    return x + step != x


def iter_range_inputs(start: float, end: float, step: float) -> Iterator[float]:
    """
    Yield start, start + step, ... while the value is <= end.

    Values are accumulated by repeated float addition. Raises ValueError if
    an addition stops changing the value, which happens once ``step`` is
    below the float spacing at ``x``.
    """
    x = float(start)
    while x <= end:
        yield x
        if not _advances(x, step):
            raise ValueError(f"step {step} is too small to advance past {x}")
        x += step


class Predictor:
    """
    Applies a trained model to stored or generated inputs.

    Attributes:
        model: The model whose weight and bias are read (never written).
        dataset: Training data; its inputs feed `predict_all`, and an empty
            dataset turns every report into a no-op.
    """

    def __init__(self, model: LinearRegressor, dataset: RegressionDataset) -> None:
        self.model = model
        self.dataset = dataset

    def predict(self, x: float) -> float:
        """Return ``weight * x + bias`` for a single input."""
        return self.model.predict(x)

    def _report(
        self,
        inputs: Iterable[float],
        threshold: float,
        sink: Optional[IO[str]],
    ) -> List[Tuple[float, float]]:
        out = sink if sink is not None else sys.stdout
        rows: List[Tuple[float, float]] = []

        out.write(SEPARATOR + "\n")
        for x in inputs:
            y = snap(self.model.predict(x), threshold)
            out.write(f"Input: {format_value(x)}\n")
            out.write(f"Output: {format_value(y)}\n")
            rows.append((x, y))
        out.write(SEPARATOR + "\n\n")
        return rows

    def predict_all(
        self, threshold: float, sink: Optional[IO[str]] = None
    ) -> List[Tuple[float, float]]:
        """
        Report predictions for every stored input, in ingestion order.

        Args:
            threshold: Predictions inside (-threshold, threshold) show as 0.
            sink: Destination with a ``write`` method; stdout when None.

        Returns:
            The (input, shown output) pairs; empty, with nothing written,
            when the dataset is empty.
        """
        if len(self.dataset) == 0:
            return []
        return self._report(list(self.dataset.train_in), threshold, sink)

    def predict_range(
        self,
        start: float,
        end: float,
        step: float,
        threshold: float,
        sink: Optional[IO[str]] = None,
    ) -> List[Tuple[float, float]]:
        """
        Report predictions for start, start + step, ... up to and including end.

        The input is advanced by repeated addition, so with fractional steps
        the last value can land just past ``end`` and be skipped. Rows are
        written as they are computed.

        Args:
            start: First input.
            end: Inclusive upper bound.
            step: Increment; must be positive and large enough to change
                every input in the range.
            threshold: Predictions inside (-threshold, threshold) show as 0.
            sink: Destination with a ``write`` method; stdout when None.

        Returns:
            The (input, shown output) pairs; empty, with nothing written,
            when the model has no training data.

        Raises:
            ValueError: For a non-finite bound or step, a non-positive step,
                or a step lost to float rounding within the range.
        """
        for name, value in (("start", start), ("end", end), ("step", step)):
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite (got {value})")
        if step <= 0:
            raise ValueError(f"step must be positive (got {step})")
        if len(self.dataset) == 0:
            return []

        # Float spacing is widest at the range's largest magnitude.
        if start <= end:
            for x in (float(start), float(end)):
                if not _advances(x, step):
                    raise ValueError(f"step {step} is too small to advance past {x}")

        return self._report(iter_range_inputs(start, end, step), threshold, sink)


__all__ = ["SEPARATOR", "snap", "format_value", "iter_range_inputs", "Predictor"]
