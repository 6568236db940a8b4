"""
Train a linear regression model on a text file of (x, y) pairs.

Run from the project root as:

    # Defaults: data.txt, 1000 epochs at learning rate 0.01,
    # predictions for x in [-10, 10] with step 1
    python -m linreg.train_linear

    # Custom data and schedule
    python -m linreg.train_linear points.txt --epochs 5000 --learning-rate 0.001

    # Reproducible run with progress every 100 epochs
    python -m linreg.train_linear points.txt --seed 42 --log-every 100

Each line of the data file should contain exactly two numbers (input, then
expected output); other lines are skipped.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from .session import LinearRegression
from .trainer import TrainingConfig


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Online SGD trainer for y = weight * x + bias")
    parser.add_argument(
        "data",
        type=Path,
        nargs="?",
        default=Path("data.txt"),
        help="Text file with one 'x y' pair per line",
    )
    parser.add_argument("--epochs", type=int, default=1000, help="Number of training epochs")
    parser.add_argument("--learning-rate", type=float, default=0.01, help="SGD learning rate")
    parser.add_argument("--start", type=float, default=-10.0, help="First input to predict")
    parser.add_argument("--end", type=float, default=10.0, help="Last input to predict (inclusive)")
    parser.add_argument("--step", type=float, default=1.0, help="Increment between predicted inputs")
    parser.add_argument(
        "--threshold",
        type=float,
        default=0.0001,
        help="Predictions with smaller magnitude are printed as 0",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the shuffle RNG")
    parser.add_argument(
        "--log-every", type=int, default=0, help="Print training progress every N epochs (0 = off)"
    )
    parser.add_argument(
        "--predict-all",
        action="store_true",
        help="Predict the training inputs instead of the --start/--end range",
    )
    return parser


def main(argv: List[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)

    if args.step <= 0:
        print(f"Error: --step must be positive (got {args.step})")
        raise SystemExit(1)
    if args.epochs < 0:
        print(f"Error: --epochs must be non-negative (got {args.epochs})")
        raise SystemExit(1)

    reg = LinearRegression(seed=args.seed)
    reg.load_training_data(args.data)
    if reg.num_samples == 0:
        print(f"Dataset is empty; expected lines with two numbers each in {args.data}")
        raise SystemExit(1)

    config = TrainingConfig(
        epochs=args.epochs,
        learning_rate=args.learning_rate,
        log_every=args.log_every,
    )
    if config.log_every:
        print(
            f"Training on {reg.num_samples} samples "
            f"(epochs={config.epochs}, learning_rate={config.learning_rate})",
            flush=True,
        )

    reg.fit(config)

    if args.predict_all:
        reg.predict_all(args.threshold, sys.stdout)
        return

    try:
        reg.predict_range(args.start, args.end, args.step, args.threshold, sys.stdout)
    except ValueError as exc:
        print(f"Error: {exc}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
