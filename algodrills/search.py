"""Binary-search problems: medians, partitions, bouquets, divisors and shipping."""

from collections.abc import Iterable, Sequence


def median_sorted_arrays(first: Sequence[int], second: Sequence[int]) -> float:
    """Median of the union of two sorted sequences.

    Raises ValueError when both sequences are empty or the inputs are not sorted.
    """
    if len(first) > len(second):
        first, second = second, first
    m, n = len(first), len(second)
    if m + n == 0:
        raise ValueError("both arrays are empty")

    low, high = 0, m
    half = (m + n + 1) // 2
    while low <= high:
        cut_first = (low + high) // 2
        cut_second = half - cut_first

        left_first = first[cut_first - 1] if cut_first > 0 else float("-inf")
        right_first = first[cut_first] if cut_first < m else float("inf")
        left_second = second[cut_second - 1] if cut_second > 0 else float("-inf")
        right_second = second[cut_second] if cut_second < n else float("inf")

        if left_first <= right_second and left_second <= right_first:
            left = max(left_first, left_second)
            if (m + n) % 2 == 0:
                return (left + min(right_first, right_second)) / 2.0
            return float(left)
        if left_first > right_second:
            high = cut_first - 1
        else:
            low = cut_first + 1

    raise ValueError("Input arrays are not sorted.")


def can_allocate(pages: Iterable[int], students: int, max_pages: int) -> bool:
    """Whether contiguous books fit ``students`` readers with at most ``max_pages`` each."""
    readers = 1
    current = 0
    for book in pages:
        if book > max_pages:
            return False
        if current + book > max_pages:
            readers += 1
            current = book
            if readers > students:
                return False
        else:
            current += book
    return True


def min_max_pages(pages: Sequence[int], students: int) -> int:
    """Smallest possible maximum of pages read by any student; -1 if impossible."""
    if len(pages) < students:
        return -1
    low = max(pages, default=0)
    high = sum(pages)
    answer = -1
    while low <= high:
        mid = (low + high) // 2
        if can_allocate(pages, students, mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def can_make_bouquets(bloom_days: Iterable[int], m: int, k: int, day: int) -> bool:
    """Whether ``m`` bouquets of ``k`` adjacent bloomed flowers exist by ``day``."""
    bouquets = 0
    flowers = 0
    for bloom in bloom_days:
        if bloom <= day:
            flowers += 1
            if flowers == k:
                bouquets += 1
                flowers = 0
        else:
            flowers = 0
    return bouquets >= m


def min_bouquet_days(bloom_days: Sequence[int], m: int, k: int) -> int:
    """Earliest day on which ``m`` bouquets of ``k`` adjacent flowers can be made, or -1."""
    if len(bloom_days) < m * k:
        return -1
    low = min(bloom_days, default=0)
    high = max(bloom_days, default=0)
    result = -1
    while low <= high:
        mid = (low + high) // 2
        if can_make_bouquets(bloom_days, m, k, mid):
            result = mid
            high = mid - 1
        else:
            low = mid + 1
    return result


def _divided_sum_within(nums: Iterable[int], divisor: int, threshold: int) -> bool:
    total = 0
    for value in nums:
        total += -(-value // divisor)
        if total > threshold:
            return False
    return True


def smallest_divisor(nums: Sequence[int], threshold: int) -> int:
    """Smallest divisor whose rounded-up quotients sum to at most ``threshold``."""
    low, high = 1, max(nums)
    while low < high:
        mid = (low + high) // 2
        if _divided_sum_within(nums, mid, threshold):
            high = mid
        else:
            low = mid + 1
    return low


def kth_missing_positive(arr: Iterable[int], k: int) -> int:
    """The ``k``-th positive integer absent from the increasing sequence ``arr``."""
    if k < 1:
        return -1
    values = iter(arr)
    upcoming = next(values, None)
    missing = 0
    current = 1
    while True:
        if upcoming == current:
            upcoming = next(values, None)
        else:
            missing += 1
            if missing == k:
                return current
        current += 1


def can_paint(boards: Iterable[int], painters: int, max_time: int) -> bool:
    """Whether contiguous boards fit ``painters`` workers with at most ``max_time`` each."""
    workers = 1
    load = 0
    for length in boards:
        if length > max_time:
            return False
        if load + length > max_time:
            workers += 1
            load = length
            if workers > painters:
                return False
        else:
            load += length
    return True


def min_paint_time(boards: Sequence[int], painters: int) -> int:
    """Least time in which ``painters`` can paint all boards, each a contiguous run."""
    low = max(boards, default=0)
    high = sum(boards)
    while low < high:
        mid = (low + high) // 2
        if can_paint(boards, painters, mid):
            high = mid
        else:
            low = mid + 1
    return low


def days_needed(weights: Iterable[int], capacity: int) -> int:
    """Days needed to ship the packages in order with the given daily capacity."""
    days = 1
    load = 0
    for weight in weights:
        if load + weight > capacity:
            days += 1
            load = 0
        load += weight
    return days


def ship_within_days(weights: Sequence[int], days: int) -> int:
    """Least ship capacity that delivers all packages, in order, within ``days``."""
    low = max(weights)
    high = sum(weights)
    while low < high:
        mid = (low + high) // 2
        if days_needed(weights, mid) <= days:
            high = mid
        else:
            low = mid + 1
    return low


def can_split(nums: Iterable[int], k: int, max_sum: int) -> bool:
    """Whether ``nums`` splits into at most ``k`` runs each summing to at most ``max_sum``."""
    count = 1
    current = 0
    for value in nums:
        if current + value > max_sum:
            count += 1
            current = 0
        current += value
    return count <= k


def split_array(nums: Sequence[int], k: int) -> int:
    """Smallest possible largest sum when ``nums`` is split into ``k`` contiguous runs."""
    low = max(nums, default=0)
    high = sum(nums)
    while low < high:
        mid = (low + high) // 2
        if can_split(nums, k, mid):
            high = mid
        else:
            low = mid + 1
    return low