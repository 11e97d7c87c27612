"""Cheapest path across a square grid from the top-left to the bottom-right cell."""

from __future__ import annotations

import argparse
import heapq
import sys
from typing import Sequence

_STEPS = ((-1, 0), (0, -1), (1, 0), (0, 1))


def min_cost(grid: Sequence[Sequence[int]]) -> int:
    """Return the least total of cell values on a path between opposite corners.

    Both end cells are counted; moves go to orthogonal neighbours.
    """
    rows = [list(row) for row in grid]
    n = len(rows)
    if n == 0 or any(len(row) != n for row in rows):
        raise ValueError("grid must be a non-empty square")

    goal = (n - 1, n - 1)
    best = {(0, 0): rows[0][0]}
    heap = [(rows[0][0], 0, 0)]
    while heap:
        cost, r, c = heapq.heappop(heap)
        if (r, c) == goal:
            return cost
        if cost > best[(r, c)]:
            continue
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < n and 0 <= nc < n:
                candidate = cost + rows[nr][nc]
                if candidate < best.get((nr, nc), candidate + 1):
                    best[(nr, nc)] = candidate
                    heapq.heappush(heap, (candidate, nr, nc))
    raise ValueError("goal cell is unreachable")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve cheapest-path problems until a 0.")
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    numbers = iter(int(token) for token in args.input.read().split())
    for number, n in enumerate(iter(lambda: next(numbers, 0), 0), start=1):
        grid = [[next(numbers) for _ in range(n)] for _ in range(n)]
        print(f"Problem {number}: {min_cost(grid)}")
    return 0