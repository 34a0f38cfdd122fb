"""Counting problems: coin sums, pile games, knight placements and grid walks."""

from collections import Counter
from collections.abc import Iterable

MOD = 10**9 + 7

GRID_SIZE = 8
GRID_TARGET = (GRID_SIZE - 1, 0)
_MOVES = {
    "D": (0, 1),
    "U": (0, -1),
    "L": (-1, 0),
    "R": (1, 0),
}


def coin_combinations(coins: Iterable[int], target: int) -> int:
    """Count ordered ways to reach ``target`` with the given coins, modulo 10**9 + 7."""
    coin_list = list(coins)
    ways = [0] * (target + 1)
    ways[0] = 1
    for amount in range(1, target + 1):
        ways[amount] = (
            sum(ways[amount - coin] for coin in coin_list if coin <= amount) % MOD
        )
    return ways[target]


def can_empty_piles(a: int, b: int) -> bool:
    """Whether two piles can be emptied by removing (2, 1) or (1, 2) coins per move."""
    return (a + b) % 3 == 0 and 2 * a >= b and 2 * b >= a


def two_knights(n: int) -> list[int]:
    """Non-attacking placements of two knights on k-by-k boards for k = 1..n."""
    results = []
    for k in range(1, n + 1):
        total = k * k * (k * k - 1) // 2
        attacking = 4 * (k - 1) * (k - 2) if k > 2 else 0
        results.append(total - attacking)
    return results


def missing_number(n: int, numbers: Iterable[int]) -> int:
    """The number from 1..n that is absent from ``numbers``."""
    return n * (n + 1) // 2 - sum(numbers)


def count_grid_paths(path: str) -> int:
    """Count walks on an 8x8 grid from the top-left corner to the top-right corner.

    Each character of ``path`` is a step: ``D``, ``U``, ``L``, ``R`` or ``?``
    for any of the four.  A walk that leaves the grid is not counted; an
    unknown character admits no step.
    """
    positions = Counter({(0, 0): 1})
    for step in path:
        if step == "?":
            deltas = list(_MOVES.values())
        elif step in _MOVES:
            deltas = [_MOVES[step]]
        else:
            deltas = []
        following: Counter = Counter()
        for (x, y), ways in positions.items():
            for dx, dy in deltas:
                nx, ny = x + dx, y + dy
                if 0 <= nx < GRID_SIZE and 0 <= ny < GRID_SIZE:
                    following[(nx, ny)] += ways
        positions = following
    return positions[GRID_TARGET]