"""
PyTorch Dataset holding (input, reference output) pairs for regression.

Training data is kept as three parallel sequences:

    - train_in:    inputs, in ingestion order.
    - train_out:   reference outputs, in ingestion order.
    - train_order: a permutation of [0, n) that the trainer reshuffles
                   every epoch, so the data itself never moves.

Pairs can be added from text (one line at a time or a whole file) or from
two equal-length numeric sequences. Nothing is ever removed except by
`reset()`, which clears all three sequences together.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Sequence, Tuple

import torch
from torch.utils.data import Dataset

from .text_extract import extract_pair, iter_training_pairs


# Lines are consumed in chunks of this many characters, newline included,
# the way a 100-byte line buffer would hand them over.
MAX_LINE_LENGTH = 99


def _split_line(line: str, limit: int = MAX_LINE_LENGTH) -> List[str]:
    if len(line) <= limit:
        return [line]
    return [line[i : i + limit] for i in range(0, len(line), limit)]


class RegressionDataset(Dataset):
    """
    Append-only store of training pairs plus their training order.

    Attributes:
        train_in: Inputs in ingestion order.
        train_out: Reference outputs in ingestion order.
        train_order: Indices into train_in/train_out; always a permutation
            of range(len(self)).
    """

    def __init__(self) -> None:
        super().__init__()
        self.train_in: List[float] = []
        self.train_out: List[float] = []
        self.train_order: List[int] = []

    def __len__(self) -> int:  # type: ignore[override]
        return len(self.train_in)

    def __getitem__(self, idx: int) -> Tuple[torch.Tensor, torch.Tensor]:  # type: ignore[override]
        x = torch.tensor(self.train_in[idx], dtype=torch.float64)
        y = torch.tensor(self.train_out[idx], dtype=torch.float64)
        return x, y

    def _append(self, x: float, y: float) -> None:
        self.train_in.append(float(x))
        self.train_out.append(float(y))
        self.train_order.append(len(self.train_order))

    def ingest_from_text(self, line: str) -> bool:
        """
        Add one pair if ``line`` holds exactly two numbers.

        Returns True when a pair was added.
        """
        pair = extract_pair(line)
        if pair is None:
            return False
        self._append(*pair)
        return True

    def ingest_from_arrays(self, inputs: Sequence[float], outputs: Sequence[float]) -> int:
        """
        Append ``inputs[i], outputs[i]`` for every i.

        New order entries are appended after the existing ones, which keep
        whatever order the last epoch left them in. Returns the number of
        pairs added.
        """
        if len(inputs) != len(outputs):
            raise ValueError(
                f"inputs and outputs must have the same length "
                f"(got {len(inputs)} and {len(outputs)})"
            )

        offset = len(self.train_in)
        new_in = [float(x) for x in inputs]
        new_out = [float(y) for y in outputs]

        self.train_in.extend(new_in)
        self.train_out.extend(new_out)
        self.train_order.extend(range(offset, offset + len(new_in)))
        return len(new_in)

    def load_from_source(self, path: str | Path) -> int:
        """
        Read training pairs from a text file, one candidate pair per line.

        An unreadable file is reported on stderr and leaves the dataset as it
        was. Returns the number of pairs added.
        """
        p = Path(path)
        try:
            f = p.open("r", encoding="utf-8", errors="replace")
        except OSError:
            print(f"Could not open file at path {p}!\n", file=sys.stderr, flush=True)
            return 0

        added = 0
        with f:
            chunks = (chunk for line in f for chunk in _split_line(line))
            for x, y in iter_training_pairs(chunks):
                self._append(x, y)
                added += 1
        return added

    def reset(self) -> None:
        """Drop every pair and its order entry."""
        self.train_in.clear()
        self.train_out.clear()
        self.train_order.clear()

    def inputs_tensor(self) -> torch.Tensor:
        return torch.tensor(self.train_in, dtype=torch.float64)

    def outputs_tensor(self) -> torch.Tensor:
        return torch.tensor(self.train_out, dtype=torch.float64)


def build_dataset_from_file(path: str | Path) -> RegressionDataset:
    """Convenience helper to create a dataset from a single text file."""
    dataset = RegressionDataset()
    dataset.load_from_source(path)
    return dataset


__all__ = ["MAX_LINE_LENGTH", "RegressionDataset", "build_dataset_from_file"]
