import pytest

from algodrills.sequences import (
    beautiful_permutation,
    collatz,
    hanoi_moves,
    increasing_array_moves,
    longest_repetition,
    min_doublings,
    min_gondolas,
)


def test_min_gondolas_example():
    assert min_gondolas([7, 2, 3, 9], 10) == 3


def test_min_gondolas_all_heavy_ride_alone():
    weights = [6, 7, 8, 9, 10]
    assert min_gondolas(weights, 10) == len(weights)


@pytest.mark.parametrize("count", [1, 4, 7])
def test_min_gondolas_all_light_pair_up(count):
    assert min_gondolas([1] * count, 10) == (count + 1) // 2


def test_min_gondolas_empty():
    assert min_gondolas([], 10) == 0


def test_increasing_array_example():
    assert increasing_array_moves([3, 2, 5, 1, 7]) == 5


@pytest.mark.parametrize("values", [[], [4], [1, 1, 2, 9], list(range(50))])
def test_increasing_array_already_sorted(values):
    assert increasing_array_moves(values) == 0


def test_increasing_array_constant_drop():
    assert increasing_array_moves([10, 0, 0]) == 20


@pytest.mark.parametrize("n", [0, 1, 4, 5, 10, 33])
def test_beautiful_permutation_is_valid(n):
    result = beautiful_permutation(n)
    assert sorted(result) == list(range(1, n + 1))
    assert all(abs(a - b) != 1 for a, b in zip(result, result[1:]))


@pytest.mark.parametrize("n", [2, 3])
def test_beautiful_permutation_impossible(n):
    with pytest.raises(ValueError, match="NO SOLUTION"):
        beautiful_permutation(n)


def test_longest_repetition_example():
    assert longest_repetition("ATTCGGGA") == 3


def test_longest_repetition_single_character():
    assert longest_repetition("aaaa") == len("aaaa")


def test_longest_repetition_all_distinct():
    assert longest_repetition("abcdef") == 1


def test_hanoi_single_disk():
    assert hanoi_moves(1) == [(1, 3)]


def test_hanoi_zero_disks():
    assert hanoi_moves(0) == []


def test_hanoi_negative_rejected():
    with pytest.raises(ValueError):
        hanoi_moves(-1)


@pytest.mark.parametrize("n", [2, 3, 6])
def test_hanoi_moves_are_legal_and_minimal(n):
    moves = hanoi_moves(n)
    assert len(moves) == 2**n - 1
    pegs = {1: list(range(n, 0, -1)), 2: [], 3: []}
    for source, target in moves:
        disk = pegs[source].pop()
        assert not pegs[target] or pegs[target][-1] > disk
        pegs[target].append(disk)
    assert pegs[3] == list(range(n, 0, -1))
    assert pegs[1] == [] and pegs[2] == []


def test_collatz_of_one():
    assert list(collatz(1)) == [1]


@pytest.mark.parametrize("start", [3, 7, 27, 1024])
def test_collatz_follows_rule(start):
    sequence = list(collatz(start))
    assert sequence[0] == start
    assert sequence[-1] == 1
    assert 1 not in sequence[:-1]
    for current, following in zip(sequence, sequence[1:]):
        expected = current // 2 if current % 2 == 0 else 3 * current + 1
        assert following == expected


@pytest.mark.parametrize("start", [0, -5])
def test_collatz_rejects_non_positive(start):
    with pytest.raises(ValueError):
        list(collatz(start))


def test_min_doublings_already_present():
    assert min_doublings("abcab", "bca") == 0


def test_min_doublings_never_present():
    assert min_doublings("a", "b") == -1


@pytest.mark.parametrize("x,s", [("ab", "ba"), ("abc", "cab"), ("a", "aaaaa")])
def test_min_doublings_is_minimal(x, s):
    result = min_doublings(x, s)
    assert s in x * (2**result)
    assert s not in x * (2 ** (result - 1))


def test_min_doublings_limit_reached():
    assert min_doublings("a", "a" * 128) == 7


def test_min_doublings_beyond_limit():
    assert min_doublings("a", "a" * 129) == -1