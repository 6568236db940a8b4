# tests/conftest.py
from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from linreg.session import LinearRegression


class ScriptedSource:
    """Replays a fixed list of indices instead of drawing random ones."""

    def __init__(self, draws: List[int]) -> None:
        self.draws = list(draws)
        self.calls: List[int] = []

    def next_index(self, n: int) -> int:
        self.calls.append(n)
        return self.draws.pop(0)


@pytest.fixture
def scripted_source():
    return ScriptedSource


@pytest.fixture
def line_xs() -> List[float]:
    return [float(x) for x in range(-5, 6)]


@pytest.fixture
def reg() -> LinearRegression:
    return LinearRegression(seed=1234)


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """
    y = 2x + 3 mixed with lines that must be skipped.
    """
    path = tmp_path / "data.txt"
    path.write_text(
        "x y\n"
        "-2 -1\n"
        "-1 1\n"
        "\n"
        "0 3\n"
        "1\t5\n"
        "2,0 7,0\n"
        "3 9 12\n",
        encoding="utf-8",
    )
    return path
