"""Coordinate compression: replace each value by its rank among distinct values."""

from __future__ import annotations

import argparse
import bisect
import sys
from typing import Iterable


def compress(values: Iterable[int]) -> list[int]:
    """Return, for each value, how many distinct values are smaller than it."""
    items = list(values)
    distinct = sorted(set(items))
    return [bisect.bisect_left(distinct, value) for value in items]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compress coordinates.")
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    numbers = [int(token) for token in args.input.read().split()]
    count = numbers[0]
    print(" ".join(map(str, compress(numbers[1 : 1 + count]))))
    return 0