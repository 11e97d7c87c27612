"""Tilting a board so the red marble drops into the hole before the blue one."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

WALL = "#"
HOLE = "O"
EMPTY = "."
RED = "R"
BLUE = "B"

Position = Tuple[int, int]

_DIRECTIONS = {"left": (0, -1), "right": (0, 1), "up": (-1, 0), "down": (1, 0)}


class Outcome(Enum):
    """What a single tilt did to the marbles."""

    RED_IN = "red"
    BLUE_IN = "blue"
    NONE = "none"


@dataclass(frozen=True)
class State:
    """Marble positions as (row, column) and the number of tilts made so far."""

    red: Position
    blue: Position
    depth: int = 0


@dataclass(frozen=True)
class Board:
    """The fixed layout of walls, empty cells and holes, plus the starting state."""

    grid: Tuple[str, ...]
    start: State

    @classmethod
    def parse(cls, rows: Iterable[str]) -> "Board":
        """Build a board from rows of ``#``, ``.``, ``O``, ``R`` and ``B``."""
        lines = list(rows)
        if not lines:
            raise ValueError("board is empty")
        width = len(lines[0])
        if any(len(line) != width for line in lines):
            raise ValueError("board rows must have equal length")

        red: Optional[Position] = None
        blue: Optional[Position] = None
        for r, line in enumerate(lines):
            for c, ch in enumerate(line):
                if ch not in (WALL, HOLE, EMPTY, RED, BLUE):
                    raise ValueError(f"unexpected board character {ch!r}")
                if ch == RED:
                    if red is not None:
                        raise ValueError("board has more than one red marble")
                    red = (r, c)
                elif ch == BLUE:
                    if blue is not None:
                        raise ValueError("board has more than one blue marble")
                    blue = (r, c)
        if red is None or blue is None:
            raise ValueError("board needs one red and one blue marble")

        grid = tuple(line.replace(RED, EMPTY).replace(BLUE, EMPTY) for line in lines)
        return cls(grid, State(red, blue))

    def _is_wall(self, row: int, col: int) -> bool:
        if not (0 <= row < len(self.grid) and 0 <= col < len(self.grid[row])):
            return True
        return self.grid[row][col] == WALL

    def _roll(
        self, pos: Position, dr: int, dc: int, blocker: Optional[Position] = None
    ) -> Tuple[Position, bool]:
        """Roll one marble until a wall, the hole, or the other marble stops it."""
        r, c = pos
        while not self._is_wall(r + dr, c + dc):
            r, c = r + dr, c + dc
            if self.grid[r][c] == HOLE:
                return (r, c), True
            if (r, c) == blocker:
                return (r - dr, c - dc), False
        return (r, c), False

    def tilt(self, state: State, direction: str) -> Tuple[Outcome, State]:
        """Tilt the board one way; return what happened and the resulting state.

        ``direction`` is one of ``left``, ``right``, ``up`` and ``down``.
        """
        try:
            dr, dc = _DIRECTIONS[direction]
        except KeyError:
            raise ValueError(f"unknown direction {direction!r}") from None

        red, blue = state.red, state.blue
        depth = state.depth + 1
        dy, dx = blue[0] - red[0], blue[1] - red[1]
        blue_ahead = dy * dc == dx * dr and dy * dr + dx * dc > 0

        if blue_ahead:
            blue, blue_in = self._roll(blue, dr, dc)
            if blue_in:
                return Outcome.BLUE_IN, State(red, blue, depth)
            red, red_in = self._roll(red, dr, dc, blocker=blue)
            outcome = Outcome.RED_IN if red_in else Outcome.NONE
            return outcome, State(red, blue, depth)

        red, red_in = self._roll(red, dr, dc)
        blue, blue_in = self._roll(blue, dr, dc, blocker=red)
        if blue_in:
            outcome = Outcome.BLUE_IN
        elif red_in:
            outcome = Outcome.RED_IN
        else:
            outcome = Outcome.NONE
        return outcome, State(red, blue, depth)


def min_tilts(rows: Iterable[str], limit: int = 10) -> Optional[int]:
    """Return the fewest tilts dropping only the red marble, or None beyond ``limit``."""
    board = Board.parse(rows)
    queue = deque([board.start])
    seen = {(board.start.red, board.start.blue)}
    while queue:
        state = queue.popleft()
        if state.depth >= limit:
            break
        for direction in _DIRECTIONS:
            outcome, moved = board.tilt(state, direction)
            if outcome is Outcome.RED_IN:
                return moved.depth
            if outcome is Outcome.NONE and (moved.red, moved.blue) not in seen:
                seen.add((moved.red, moved.blue))
                queue.append(moved)
    return None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the fewest tilts for the red marble.")
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    tokens = args.input.read().split()
    height, width = int(tokens[0]), int(tokens[1])
    cells = "".join(tokens[2:])
    if len(cells) < height * width:
        raise ValueError("board is smaller than announced")
    rows = [cells[r * width : (r + 1) * width] for r in range(height)]
    result = min_tilts(rows)
    print(-1 if result is None else result)
    return 0