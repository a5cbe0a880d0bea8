"""Array problem solvers: greedy orderings, subarray sums and segment splits."""

import heapq
from bisect import bisect_left
from typing import Optional, Sequence

_MASKED = -(10**12)
_SEARCH_HIGH = 10**12 + 1


def reorder_for_max(values: Sequence[int]) -> list[int]:
    """Reorder values so that the nested value f(f(...f(a1, a2)...), an) is maximal.

    With f(x, y) = (x | y) - y the result depends only on the first element,
    which is the one having the most bits that no other element has.
    """
    items = list(values)
    n = len(items)
    if n <= 1:
        return items
    prefix = [-1] * (n + 1)
    for i, value in enumerate(items):
        prefix[i + 1] = prefix[i] & ~value
    suffix = [-1] * (n + 1)
    for i in range(n - 1, -1, -1):
        suffix[i] = suffix[i + 1] & ~items[i]
    best, best_index = 0, 0
    for i, value in enumerate(items):
        score = value & prefix[i] & suffix[i + 1]
        if score > best:
            best, best_index = score, i
    return [items[best_index], *items[:best_index], *items[best_index + 1 :]]


def kevin_can_transform(a: Sequence[int], b: Sequence[int]) -> bool:
    """Tell whether a can be turned into b by merging pairs whose values differ by at most one.

    Works backwards: the largest values of b are split into halves until they
    match the largest remaining values of a.
    """
    remaining = sorted(a)
    heap = [-value for value in b]
    heapq.heapify(heap)

    def match() -> None:
        while heap and remaining and -heap[0] == remaining[-1]:
            heapq.heappop(heap)
            remaining.pop()

    for _ in range(len(a) - len(b)):
        if not heap or not remaining:
            break
        match()
        if heap:
            top = -heapq.heappop(heap)
            heapq.heappush(heap, -(top // 2))
            heapq.heappush(heap, -((top + 1) // 2))
    match()
    return not remaining and not heap


def kadane(values: Sequence[int]) -> int:
    """Return the largest subarray sum, counting the empty subarray as 0."""
    best = running = 0
    for value in values:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def fill_maximum_subarray(k: int, mask: str, values: Sequence[int]) -> Optional[list[int]]:
    """Fill the positions marked '0' in ``mask`` so the maximum subarray sum is exactly k.

    Returns the filled array, or None when that is impossible.
    """
    if len(mask) != len(values):
        raise ValueError("mask and values must have the same length")
    if any(ch not in "01" for ch in mask):
        raise ValueError(f"mask must consist of '0' and '1', got {mask!r}")
    filled = list(values)
    free_position = -1
    for i, ch in enumerate(mask):
        if ch == "0":
            free_position = i
            filled[i] = _MASKED
    current = kadane(filled)
    if current > k or (current != k and free_position == -1):
        return None
    if current == k:
        return filled
    low, high, best = _MASKED, _SEARCH_HIGH, -1
    while low <= high:
        mid = low + (high - low) // 2
        filled[free_position] = mid
        if kadane(filled) <= k:
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    filled[free_position] = best
    return filled


def scoring_subsequences(values: Sequence[int]) -> list[int]:
    """For each prefix of a non-decreasing array, return the size of its best-scoring subsequence."""
    answers = []
    left = 0
    for i in range(len(values)):
        while left <= i and values[left] < i - left + 1:
            left += 1
        answers.append(i - left + 1)
    return answers


def max_magnitude(values: Sequence[int]) -> int:
    """Return the largest final c reachable by adding each value or taking |c + value|."""
    high = low = 0
    for value in values:
        options = (high + value, low + value, abs(high + value), abs(low + value))
        high, low = max(options), min(options)
    return max(abs(low), high)


def nonzero_partition(values: Sequence[int]) -> Optional[list[tuple[int, int]]]:
    """Split an array of -1, 0 and 1 into segments whose alternating sums add up to zero.

    Returns 1-based inclusive segments in order, or None when no split exists.
    """
    if any(value not in (-1, 0, 1) for value in values):
        raise ValueError("values must be -1, 0 or 1")
    n = len(values)
    remaining = sum(values)
    if remaining == 0:
        return [(i, i) for i in range(1, n + 1)]
    sign = 1 if remaining > 0 else -1
    segments = [(0, 0)]
    i = 1
    while i < n:
        segments.append((i, i))
        if values[i] == sign and remaining * sign > 0:
            remaining -= 2 * sign
            segments.pop()
            segments.pop()
            segments.append((i - 1, i))
            i += 1
            if i < n:
                segments.append((i, i))
        i += 1
    if remaining != 0:
        return None
    return [(start + 1, end + 1) for start, end in segments]


def party_sweets(boys: Sequence[int], girls: Sequence[int]) -> Optional[int]:
    """Return the fewest sweets in total given the boys' minima and the girls' maxima.

    Returns None when the minima and maxima cannot be met together.
    """
    if not boys or not girls:
        raise ValueError("both boys and girls are required")
    if any(v < 0 for v in boys) or any(v < 0 for v in girls):
        raise ValueError("sweet counts must be non-negative")
    boys_sorted = sorted(boys)
    girls_sorted = sorted(girls)
    lowest_girl = girls_sorted[0]
    top = boys_sorted[-1]
    if bisect_left(girls_sorted, top) > 0:
        return None
    if len(boys_sorted) == 1 and top < lowest_girl:
        return None
    total = sum(girls_sorted) + len(girls_sorted) * sum(boys_sorted[:-1])
    if len(boys_sorted) > 1 and top != lowest_girl:
        total += top - boys_sorted[-2]
    return total