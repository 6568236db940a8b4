"""
Utilities for pulling numeric training pairs out of free-form text.

Training files are plain text where each useful line carries exactly two
numbers, for example:

    1 5
    x = 2,5   y = -7.25
    3.0;9.0

A number token is any run of digits, minus signs, periods and commas. Commas
are accepted as decimal separators and normalised to periods before parsing.
Everything else (whitespace, letters, punctuation) ends the current token.

Lines that yield anything other than exactly two numbers are ignored, so
headers, comments and blank lines can live in the same file as the data.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, List, Optional, Tuple


NUMBER_CHARS = frozenset("0123456789-.,")

# Longest prefix accepted by a C-style atof() over the NUMBER_CHARS alphabet.
_LEADING_NUMBER = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


def parse_number(token: str) -> float:
    """
    Convert a raw token to a float, leniently.

    Commas become periods, then the longest leading numeric prefix is parsed.
    Tokens with no usable prefix (``"-"``, ``"."``, ``"--5"``) give ``0.0``
    rather than an error, so ``"1-2"`` reads as ``1.0`` and ``"1.2.3"`` as
    ``1.2``.
    """
    normalized = token.replace(",", ".")
    match = _LEADING_NUMBER.match(normalized)
    if match is None:
        return 0.0
    return float(match.group(0))


def extract_numbers(line: str) -> List[float]:
    """Return every number token found in ``line``, in order."""
    numbers: List[float] = []
    token: List[str] = []

    for ch in line:
        if ch in NUMBER_CHARS:
            token.append(ch)
        elif token:
            numbers.append(parse_number("".join(token)))
            token = []

    if token:
        numbers.append(parse_number("".join(token)))

    return numbers


def extract_pair(line: str) -> Optional[Tuple[float, float]]:
    """
    Return ``(input, output)`` if the line holds exactly two numbers.

    Lines with zero, one, or three or more numbers return ``None``.
    """
    numbers = extract_numbers(line)
    if len(numbers) != 2:
        return None
    return numbers[0], numbers[1]


def iter_training_pairs(lines: Iterable[str]) -> Iterator[Tuple[float, float]]:
    """Yield a training pair for every line that contains one."""
    for line in lines:
        pair = extract_pair(line)
        if pair is not None:
            yield pair


__all__ = [
    "NUMBER_CHARS",
    "parse_number",
    "extract_numbers",
    "extract_pair",
    "iter_training_pairs",
]
