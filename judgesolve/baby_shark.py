"""A shark on a square grid eating the nearest smaller fish until none are reachable."""

from __future__ import annotations

import argparse
import heapq
import sys
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

SHARK = 9

_STEPS = ((-1, 0), (0, -1), (0, 1), (1, 0))


@dataclass
class Shark:
    """Position as (row, column), current size, and fish eaten toward the next size."""

    position: Tuple[int, int]
    size: int = 2
    ate: int = 0

    def move_and_eat(self, destination: Tuple[int, int]) -> None:
        """Move to ``destination`` and eat the fish there, growing after ``size`` meals."""
        self.ate += 1
        if self.ate >= self.size:
            self.ate -= self.size
            self.size += 1
        self.position = destination


def _nearest_meal(
    grid: list[list[int]], shark: Shark
) -> Optional[Tuple[int, Tuple[int, int]]]:
    """Time and cell of the closest edible fish; ties go to the top, then the left."""
    n = len(grid)
    start = shark.position
    best = {start: 0}
    heap = [(0, start[0], start[1])]
    while heap:
        time, r, c = heapq.heappop(heap)
        if time > best[(r, c)]:
            continue
        if 0 < grid[r][c] < shark.size:
            return time, (r, c)
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < n and 0 <= nc < n):
                continue
            if grid[nr][nc] > shark.size:
                continue
            if time + 1 < best.get((nr, nc), time + 2):
                best[(nr, nc)] = time + 1
                heapq.heappush(heap, (time + 1, nr, nc))
    return None


def hunt_time(field: Sequence[Sequence[int]]) -> int:
    """Return the time the shark hunts before no edible fish can be reached.

    ``field`` holds 0 for empty cells, fish sizes, and 9 for the shark.
    """
    grid = [list(row) for row in field]
    n = len(grid)
    if n == 0 or any(len(row) != n for row in grid):
        raise ValueError("field must be a non-empty square")
    sharks = [(r, c) for r, row in enumerate(grid) for c, cell in enumerate(row) if cell == SHARK]
    if len(sharks) != 1:
        raise ValueError("field must hold exactly one shark")
    if any(cell < 0 for row in grid for cell in row):
        raise ValueError("fish sizes must be non-negative")

    start = sharks[0]
    grid[start[0]][start[1]] = 0
    shark = Shark(start)
    total = 0
    while (meal := _nearest_meal(grid, shark)) is not None:
        time, (r, c) = meal
        total += time
        grid[r][c] = 0
        shark.move_and_eat((r, c))
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Time the shark's hunt.")
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    numbers = [int(token) for token in args.input.read().split()]
    n = numbers[0]
    cells = numbers[1 : 1 + n * n]
    field = [cells[r * n : (r + 1) * n] for r in range(n)]
    print(hunt_time(field))
    return 0