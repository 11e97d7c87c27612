"""Fastest time to reach a target position by walking (1s) and doubling (0s)."""

from __future__ import annotations

import argparse
import sys


def _popcount(value: int) -> int:
    return bin(value).count("1")


def _min_ones(distance: int, shifts: int) -> int:
    """Cheaper of covering ``distance`` by single steps or by overshooting and coming back."""
    if distance == 0:
        return 0
    direct = _popcount(distance)
    mask = (1 << (shifts - 1)) - 1 if shifts >= 1 else 0
    overshoot = 1 + _popcount(-distance & mask)
    return min(direct, overshoot)


def _cost(distance: int, shifts: int) -> int:
    quotient = distance >> shifts
    remainder = distance & ((1 << shifts) - 1)
    return quotient + _min_ones(remainder, shifts)


def min_time(start: int, target: int) -> int:
    """Return the seconds needed to go from ``start`` to ``target``."""
    if start < 0 or target < 0:
        raise ValueError("positions must be non-negative")
    if start >= target:
        return start - target

    result = 0
    if start == 0:
        start = 1
        result = 1

    closest_big = start
    shifts_big = 0
    while closest_big < target:
        closest_big <<= 1
        shifts_big += 1

    best = _cost(closest_big - target, shifts_big)
    if shifts_big >= 1:
        closest_small = closest_big >> 1
        best = min(best, _cost(target - closest_small, shifts_big - 1))
    return result + best


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the fastest way to the target.")
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    start, target = (int(token) for token in args.input.read().split()[:2])
    print(min_time(start, target))
    return 0