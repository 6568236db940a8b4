"""
Online stochastic gradient descent for univariate linear regression.
"""

from .dataset import RegressionDataset
from .model import LinearRegressor
from .predictor import Predictor
from .session import LinearRegression
from .trainer import RandomSource, Trainer, TrainingConfig

__all__ = [
    "LinearRegression",
    "LinearRegressor",
    "Predictor",
    "RandomSource",
    "RegressionDataset",
    "Trainer",
    "TrainingConfig",
]
