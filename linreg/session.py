"""
One-stop regression object tying the dataset, model, trainer and predictor.

Typical use:

    reg = LinearRegression(seed=0)
    reg.load_training_data("data.txt")
    reg.train(epochs=1000, learning_rate=0.01)
    reg.predict_range(-10, 10, 1, threshold=1e-4)

The session owns the model exclusively; only training and `reset()` change
weight and bias.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, List, Optional, Sequence, Tuple

from .dataset import RegressionDataset
from .model import LinearRegressor
from .predictor import Predictor
from .trainer import IndexSource, RandomSource, Trainer, TrainingConfig, TrainingHistory


class LinearRegression:
    """
    Linear regression model with its training data and random source.

    Attributes:
        dataset: Training pairs and their shuffle order.
        model: The weight/bias module, owned by this session.
        rng: Source of shuffle indices; a seeded `RandomSource` unless one
            is injected.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[IndexSource] = None) -> None:
        self.dataset = RegressionDataset()
        self.model = LinearRegressor()
        self.rng: IndexSource = rng if rng is not None else RandomSource(seed)
        self._trainer = Trainer(self.model, self.dataset, self.rng)
        self._predictor = Predictor(self.model, self.dataset)

    @property
    def weight(self) -> float:
        return self.model.weight.item()

    @property
    def bias(self) -> float:
        return self.model.bias.item()

    @property
    def num_samples(self) -> int:
        return len(self.dataset)

    def load_training_data(self, path: str | Path) -> int:
        """Add every two-number line of a text file; returns pairs added."""
        return self.dataset.load_from_source(path)

    def set_training_data(self, inputs: Sequence[float], outputs: Sequence[float]) -> int:
        """
        Append pairs from two equal-length sequences.

        Raises ValueError when the lengths differ; nothing is added then.
        """
        return self.dataset.ingest_from_arrays(inputs, outputs)

    def ingest_line(self, line: str) -> bool:
        """Add a pair from one line of text; returns True if one was found."""
        return self.dataset.ingest_from_text(line)

    def train(
        self,
        epochs: int,
        learning_rate: float,
        log_every: int = 0,
        track_loss: bool = False,
    ) -> TrainingHistory:
        """
        Run SGD over the training data.

        Args:
            epochs: Passes over the data, each in a freshly shuffled order.
            learning_rate: Step size for every single-sample update.
            log_every: Print progress every N epochs; 0 keeps quiet.
            track_loss: Record the mean squared error after every epoch.

        Returns:
            A TrainingHistory with the epochs run and any recorded losses.
        """
        return self._trainer.train(
            epochs, learning_rate, log_every=log_every, track_loss=track_loss
        )

    def fit(self, config: TrainingConfig) -> TrainingHistory:
        """Train with the hyperparameters from ``config``."""
        return self._trainer.fit(config)

    def predict(self, x: float) -> float:
        """Return ``weight * x + bias``."""
        return self._predictor.predict(x)

    def predict_all(
        self, threshold: float, sink: Optional[IO[str]] = None
    ) -> List[Tuple[float, float]]:
        """Report predictions for the training inputs; see `Predictor.predict_all`."""
        return self._predictor.predict_all(threshold, sink)

    def predict_range(
        self,
        start: float,
        end: float,
        step: float,
        threshold: float,
        sink: Optional[IO[str]] = None,
    ) -> List[Tuple[float, float]]:
        """Report predictions for a stepped input range; see `Predictor.predict_range`."""
        return self._predictor.predict_range(start, end, step, threshold, sink)

    def reset(self) -> None:
        """Clear training data and zero the parameters; the object stays usable."""
        self.dataset.reset()
        self.model.reset_parameters()


__all__ = ["LinearRegression"]
