"""Length of the shortest contiguous run whose sum reaches a target."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence


def shortest_subarray(values: Sequence[int], target: int) -> int:
    """Return the length of the shortest run of ``values`` summing to at least ``target``.

    Returns 0 when no run reaches the target.
    """
    if target <= 0:
        raise ValueError("target must be positive")
    best = len(values) + 1
    window = 0
    left = 0
    for right, value in enumerate(values):
        window += value
        while window >= target:
            best = min(best, right - left + 1)
            window -= values[left]
            left += 1
    return 0 if best > len(values) else best


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the shortest run reaching a sum.")
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    numbers = [int(token) for token in args.input.read().split()]
    count, target = numbers[0], numbers[1]
    print(shortest_subarray(numbers[2 : 2 + count], target))
    return 0