"""Minimum number of rooms needed to hold a set of lectures."""

from __future__ import annotations

import argparse
import heapq
import sys
from typing import Iterable


def min_rooms(lectures: Iterable[tuple[int, int]]) -> int:
    """Return how many rooms are needed so no two overlapping lectures share one.

    A lecture ending at time ``t`` frees its room for one starting at ``t``.
    """
    ends: list[int] = []
    for start, end in sorted(lectures):
        if ends and ends[0] <= start:
            heapq.heapreplace(ends, end)
        else:
            heapq.heappush(ends, end)
    return len(ends)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count the rooms needed for lectures.")
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    numbers = [int(token) for token in args.input.read().split()]
    count = numbers[0]
    pairs = numbers[1 : 1 + 2 * count]
    lectures = list(zip(pairs[::2], pairs[1::2]))
    print(min_rooms(lectures))
    return 0