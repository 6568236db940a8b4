"""
Univariate affine model for linear regression experiments.

Provides a single module with two scalar float64 parameters:
  - weight (slope)
  - bias   (intercept)

Parameters are updated by hand, one sample at a time, so autograd is
switched off for both of them.
"""

from __future__ import annotations

from torch import nn
import torch


class LinearRegressor(nn.Module):
    """
    ``y = weight * x + bias`` with scalar parameters starting at zero.

    Forward signature:
        predictions = model(inputs)

    Where inputs is a float64 tensor of any shape.
    """

    def __init__(self) -> None:
        super().__init__()
        self.weight = nn.Parameter(torch.zeros((), dtype=torch.float64), requires_grad=False)
        self.bias = nn.Parameter(torch.zeros((), dtype=torch.float64), requires_grad=False)

    def forward(self, x: torch.Tensor) -> torch.Tensor:  # type: ignore[override]
        return self.weight * x + self.bias

    def predict(self, x: float) -> float:
        """Return ``weight * x + bias`` as a Python float."""
        return self.weight.item() * x + self.bias.item()

    @torch.no_grad()
    def sgd_step(self, x: float, reference: float, learning_rate: float) -> float:
        """
        Move weight and bias against the squared error of one sample.

        Returns the error (reference - prediction) seen before the update.
        """
        weight = self.weight.item()
        bias = self.bias.item()

        prediction = weight * x + bias
        error = reference - prediction
        delta = error * learning_rate

        self.weight.fill_(weight + delta * x)
        self.bias.fill_(bias + delta)
        return error

    @torch.no_grad()
    def reset_parameters(self) -> None:
        """Set weight and bias back to zero."""
        self.weight.zero_()
        self.bias.zero_()


__all__ = ["LinearRegressor"]
