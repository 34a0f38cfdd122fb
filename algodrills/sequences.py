"""Array and sequence problems: gondolas, permutations, Hanoi, Collatz and more."""

from collections.abc import Iterable, Iterator
from itertools import groupby

MAX_DOUBLINGS = 7


def min_gondolas(weights: Iterable[int], limit: int) -> int:
    """Fewest gondolas for children of the given weights, at most two per gondola."""
    ordered = sorted(weights)
    lightest, heaviest = 0, len(ordered) - 1
    gondolas = 0
    while lightest <= heaviest:
        if ordered[lightest] + ordered[heaviest] <= limit:
            lightest += 1
        heaviest -= 1
        gondolas += 1
    return gondolas


def increasing_array_moves(values: Iterable[int]) -> int:
    """Total increments needed to make ``values`` non-decreasing."""
    moves = 0
    highest = None
    for value in values:
        if highest is None or value > highest:
            highest = value
        else:
            moves += highest - value
    return moves


def beautiful_permutation(n: int) -> list[int]:
    """A permutation of 1..n with no adjacent values differing by one.

    Raises ValueError when no such permutation exists.
    """
    if n in (2, 3):
        raise ValueError("NO SOLUTION")
    return list(range(2, n + 1, 2)) + list(range(1, n + 1, 2))


def longest_repetition(text: str) -> int:
    """Length of the longest run of one repeated character."""
    return max((sum(1 for _ in run) for _, run in groupby(text)), default=1)


def _hanoi(n: int, source: int, target: int, spare: int) -> Iterator[tuple[int, int]]:
    if n == 0:
        return
    yield from _hanoi(n - 1, source, spare, target)
    yield source, target
    yield from _hanoi(n - 1, spare, target, source)


def hanoi_moves(n: int) -> list[tuple[int, int]]:
    """Moves that carry ``n`` disks from peg 1 to peg 3, as (from, to) pairs."""
    if n < 0:
        raise ValueError("number of disks must be non-negative")
    return list(_hanoi(n, 1, 3, 2))


def collatz(n: int) -> Iterator[int]:
    """Yield the Collatz sequence from ``n`` down to and including 1."""
    if n < 1:
        raise ValueError("start value must be a positive integer")
    while True:
        yield n
        if n == 1:
            return
        n = n // 2 if n % 2 == 0 else 3 * n + 1


def min_doublings(x: str, s: str) -> int:
    """Fewest self-concatenations of ``x`` until it contains ``s``; -1 beyond seven."""
    current = x
    for operations in range(MAX_DOUBLINGS + 1):
        if s in current:
            return operations
        current += current
    return -1