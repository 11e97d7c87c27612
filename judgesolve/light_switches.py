"""Fewest presses turning one row of bulbs into another.

Pressing switch ``i`` toggles bulbs ``i - 1``, ``i`` and ``i + 1``.
"""

from __future__ import annotations

import argparse
import sys


def _parse(row: str) -> list[bool]:
    if any(ch not in "01" for ch in row):
        raise ValueError(f"bulb row must contain only 0 and 1: {row!r}")
    return [ch == "1" for ch in row]


def _solve(state: list[bool], goal: list[bool], presses: int) -> int | None:
    n = len(state)
    for i in range(1, n):
        if state[i - 1] != goal[i - 1]:
            presses += 1
            for j in range(i - 1, min(i + 2, n)):
                state[j] = not state[j]
    if state[-1] == goal[-1] and state[-2] == goal[-2]:
        return presses
    return None


def min_presses(current: str, target: str) -> int | None:
    """Return the number of presses reaching ``target``, or None if impossible.

    The solution that leaves the first switch alone is preferred when it exists.
    """
    state = _parse(current)
    goal = _parse(target)
    if len(state) != len(goal):
        raise ValueError("rows must have the same length")
    if len(state) < 2:
        raise ValueError("rows need at least two bulbs")

    untouched = _solve(list(state), goal, 0)
    if untouched is not None:
        return untouched

    pressed = list(state)
    pressed[0] = not pressed[0]
    pressed[1] = not pressed[1]
    return _solve(pressed, goal, 1)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count switch presses.")
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    tokens = args.input.read().split()
    n = int(tokens[0])
    current, target = tokens[1], tokens[2]
    if len(current) < n or len(target) < n:
        raise ValueError("rows are shorter than announced")
    result = min_presses(current[:n], target[:n])
    print(-1 if result is None else result)
    return 0