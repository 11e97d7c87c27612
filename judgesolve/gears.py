"""A row of toothed gears whose rotations spread to touching neighbours."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

DEFAULT_SCORES = (1, 2, 4, 8)


class Gear:
    """A gear whose teeth are N (``0``) or S (``1``), read clockwise from the top."""

    def __init__(self, pattern: str, score: int) -> None:
        if not pattern or any(ch not in "01" for ch in pattern):
            raise ValueError(f"gear pattern must be a non-empty string of 0 and 1: {pattern!r}")
        self.teeth = [ch == "1" for ch in pattern]
        self.score = score
        self.top = 0

    def left_is_south(self) -> bool:
        """Whether the tooth facing the left neighbour is S."""
        return self.teeth[(self.top - 2) % len(self.teeth)]

    def right_is_south(self) -> bool:
        """Whether the tooth facing the right neighbour is S."""
        return self.teeth[(self.top + 2) % len(self.teeth)]

    def score_value(self) -> int:
        """The gear's score if its top tooth is S, otherwise 0."""
        return self.score if self.teeth[self.top] else 0

    def render(self) -> str:
        """Two lines: the teeth, and a caret under the top tooth."""
        teeth = "".join(f"{int(tooth)} " for tooth in self.teeth)
        marker = "".join("^ " if i == self.top else "  " for i in range(len(self.teeth)))
        return f"{teeth}\n{marker}\n"

    def rotate(self, amount: int) -> None:
        """Move the top by ``amount`` teeth; a negative amount turns clockwise."""
        self.top = (self.top + amount) % len(self.teeth)


def is_connected(left: Gear, right: Gear) -> bool:
    """Whether touching teeth have different poles, so rotation is passed on."""
    return right.left_is_south() != left.right_is_south()


class GearBox:
    """Gears placed left to right, each touching its neighbours."""

    def __init__(self, patterns: Sequence[str], scores: Sequence[int]) -> None:
        if len(patterns) != len(scores):
            raise ValueError("each gear needs exactly one score")
        self.gears = [Gear(pattern, score) for pattern, score in zip(patterns, scores)]

    def rotate_at(self, index: int, amount: int) -> None:
        """Rotate gear ``index`` by ``amount``, turning connected neighbours the other way."""
        if not 0 <= index < len(self.gears):
            raise IndexError(f"no gear at index {index}")
        amounts = [0] * len(self.gears)
        amounts[index] = amount
        for i in range(index, 0, -1):
            if not is_connected(self.gears[i - 1], self.gears[i]):
                break
            amounts[i - 1] = -amounts[i]
        for i in range(index, len(self.gears) - 1):
            if not is_connected(self.gears[i], self.gears[i + 1]):
                break
            amounts[i + 1] = -amounts[i]
        for gear, turn in zip(self.gears, amounts):
            gear.rotate(turn)

    def score(self) -> int:
        """Sum of the scores of gears with S at the top."""
        return sum(gear.score_value() for gear in self.gears)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Rotate gears and report the score.")
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    tokens = args.input.read().split()
    count = len(DEFAULT_SCORES)
    box = GearBox(tokens[:count], DEFAULT_SCORES)
    moves = int(tokens[count])
    numbers = [int(token) for token in tokens[count + 1 : count + 1 + 2 * moves]]
    for index, amount in zip(numbers[::2], numbers[1::2]):
        box.rotate_at(index - 1, -amount)
    print(box.score())
    return 0