"""Product of two integer matrices."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence


def multiply(left: Sequence[Sequence[int]], right: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the matrix product ``left`` × ``right``."""
    inner = len(right)
    if any(len(row) != inner for row in left):
        raise ValueError("left matrix width must equal right matrix height")
    widths = {len(row) for row in right}
    if len(widths) > 1:
        raise ValueError("right matrix rows must have equal length")
    columns = list(zip(*right))
    return [[sum(a * b for a, b in zip(row, column)) for column in columns] for row in left]


def _read_matrix(numbers: list[int], offset: int) -> tuple[list[list[int]], int]:
    rows, cols = numbers[offset], numbers[offset + 1]
    start = offset + 2
    flat = numbers[start : start + rows * cols]
    matrix = [flat[r * cols : (r + 1) * cols] for r in range(rows)]
    return matrix, start + rows * cols


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Multiply two matrices.")
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    numbers = [int(token) for token in args.input.read().split()]
    left, offset = _read_matrix(numbers, 0)
    right, _ = _read_matrix(numbers, offset)
    for row in multiply(left, right):
        print(" ".join(map(str, row)))
    return 0