"""
Stochastic gradient descent for the univariate linear model.

Each epoch:
  1. Reshuffles the dataset's order permutation in place.
  2. Walks the permutation and applies one parameter update per sample
     (batch size 1, no accumulation).

Randomness comes from an injected source exposing ``next_index(n)``, so
seeded runs are reproducible and nothing touches global RNG state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, MutableSequence, Optional, Protocol

import torch

from .dataset import RegressionDataset
from .model import LinearRegressor


class IndexSource(Protocol):
    def next_index(self, n: int) -> int: ...


class RandomSource:
    """Uniform integers in [0, n) drawn from a private torch.Generator."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.generator = torch.Generator()
        if seed is None:
            self.generator.seed()
        else:
            self.generator.manual_seed(seed)

    def next_index(self, n: int) -> int:
        return int(torch.randint(0, n, (1,), generator=self.generator).item())


@dataclass
class TrainingConfig:
    """Hyperparameters for a training run."""
    epochs: int = 1000
    learning_rate: float = 0.01
    log_every: int = 0  # 0 disables progress output


@dataclass
class TrainingHistory:
    epochs_run: int = 0
    losses: List[float] = field(default_factory=list)


def swap_shuffle(order: MutableSequence[int], rng: IndexSource) -> None:
    """
    Reorder ``order`` in place by swapping every position with a random one.

    The swap partner is drawn from the whole range on every step, not from
    the shrinking tail as in Fisher-Yates, so the resulting permutations are
    not uniformly distributed. Training runs depend on this exact sequence
    of draws.
    """
    n = len(order)
    for i in range(n):
        r = rng.next_index(n)
        order[i], order[r] = order[r], order[i]


def mean_squared_error(model: LinearRegressor, dataset: RegressionDataset) -> float:
    if len(dataset) == 0:
        return 0.0
    with torch.no_grad():
        residuals = dataset.outputs_tensor() - model(dataset.inputs_tensor())
        return float((residuals ** 2).mean().item())


class Trainer:
    """Runs SGD epochs for a model over a dataset."""

    def __init__(
        self,
        model: LinearRegressor,
        dataset: RegressionDataset,
        rng: Optional[IndexSource] = None,
    ) -> None:
        self.model = model
        self.dataset = dataset
        self.rng = rng if rng is not None else RandomSource()

    def run_epoch(self, learning_rate: float) -> None:
        """Shuffle the order once, then update on every sample in that order."""
        swap_shuffle(self.dataset.train_order, self.rng)

        train_in = self.dataset.train_in
        train_out = self.dataset.train_out
        for k in self.dataset.train_order:
            self.model.sgd_step(train_in[k], train_out[k], learning_rate)

    def train(
        self,
        epochs: int,
        learning_rate: float,
        log_every: int = 0,
        track_loss: bool = False,
    ) -> TrainingHistory:
        """
        Run ``epochs`` shuffled passes of single-sample updates.

        Args:
            epochs: Number of passes; 0 leaves the model untouched.
            learning_rate: Step size for every update.
            log_every: Print a `[train]` line every N epochs and after the
                last one; 0 disables it.
            track_loss: Record the mean squared error after every epoch.

        Returns:
            TrainingHistory with the epochs run and the recorded losses.

        Raises:
            ValueError: If ``epochs`` is negative.
        """
        if epochs < 0:
            raise ValueError(f"epochs must be non-negative (got {epochs})")

        history = TrainingHistory()
        for epoch in range(1, epochs + 1):
            self.run_epoch(learning_rate)
            history.epochs_run = epoch

            should_log = log_every > 0 and (epoch % log_every == 0 or epoch == epochs)
            if track_loss or should_log:
                mse = mean_squared_error(self.model, self.dataset)
                history.losses.append(mse)
                if should_log:
                    print(
                        f"[train] epoch {epoch}/{epochs} - mse={mse:.6f}, "
                        f"weight={self.model.weight.item():.6f}, bias={self.model.bias.item():.6f}",
                        flush=True,
                    )

        return history

    def fit(self, config: TrainingConfig) -> TrainingHistory:
        """Train with the epochs, learning rate and log interval from ``config``."""
        return self.train(config.epochs, config.learning_rate, log_every=config.log_every)


__all__ = [
    "IndexSource",
    "RandomSource",
    "TrainingConfig",
    "TrainingHistory",
    "swap_shuffle",
    "mean_squared_error",
    "Trainer",
]
