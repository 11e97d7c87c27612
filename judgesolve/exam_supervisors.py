"""Minimum number of supervisors for a set of exam rooms."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable


def count_supervisors(rooms: Iterable[int], chief: int, assistant: int) -> int:
    """Return the supervisors needed: one chief per room plus enough assistants.

    A chief watches ``chief`` candidates, each assistant ``assistant``.
    """
    if chief <= 0 or assistant <= 0:
        raise ValueError("supervisor capacities must be positive")
    total = 0
    for candidates in rooms:
        remaining = candidates - chief
        total += 1
        if remaining > 0:
            total += -(-remaining // assistant)
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count exam supervisors.")
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    numbers = [int(token) for token in args.input.read().split()]
    count = numbers[0]
    rooms = numbers[1 : 1 + count]
    chief, assistant = numbers[1 + count : 3 + count]
    print(count_supervisors(rooms, chief, assistant))
    return 0