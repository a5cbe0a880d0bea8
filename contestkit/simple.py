"""Small closed-form contest problems."""

from math import isqrt


def strange_functions(s: str) -> int:
    """Count the distinct values of x / f(f(x)) for x in [1, n].

    ``n`` is given as a decimal string, and the answer is its number of digits.
    """
    if not s or not s.isdigit():
        raise ValueError(f"expected a decimal number, got {s!r}")
    return len(s)


def _triangle(k: int) -> int:
    return k * (k + 1) // 2


def min_jumps(n: int) -> int:
    """Return the fewest jumps needed to reach point ``n`` from 0.

    Jump ``k`` moves either ``k`` forward or one step back.
    """
    if n < 1:
        raise ValueError(f"target must be positive, got {n}")
    k = (isqrt(8 * n + 1) - 1) // 2
    if _triangle(k) < n:
        k += 1
    return k + (1 if _triangle(k) == n + 1 else 0)


def ping_pong(a: int, b: int) -> tuple[int, int]:
    """Return the wins of Alice and Bob when both play optimally with stamina a and b."""
    if a < 1 or b < 1:
        raise ValueError("both players need positive stamina")
    return a - 1, b


def not_acceptable(a: int, b: int, c: int, d: int) -> bool:
    """Tell whether the time a:b is not earlier than the deadline c:d."""
    if a < c:
        return False
    if a == c and b < d:
        return False
    return True


def dinner_time(n: int, m: int, p: int, q: int) -> bool:
    """Tell whether an array of length n summing to m can have every p-window sum q."""
    if p <= 0:
        raise ValueError(f"window length must be positive, got {p}")
    if n % p == 0:
        return q * (n // p) == m
    return True


def bobritto_bandito(n: int, k: int, l: int, r: int) -> tuple[int, int]:
    """Return an infected segment of length k that contains house 0 and lies in [l, r]."""
    if k > r:
        return r - k, r
    return 0, k


def _emotes_in_lines(n: int, lines: int) -> int:
    if lines < n:
        return _triangle(lines)
    extra = lines - n
    return _triangle(n) + (n - 1) * n // 2 - (n - 1 - extra) * (n - extra) // 2


def chat_ban(n: int, k: int) -> int:
    """Return how many lines of an emote triangle of size n are sent before a ban at k emotes.

    The last line sent is counted, and the answer never exceeds the whole triangle.
    """
    if n < 1 or k < 1:
        raise ValueError("triangle size and ban limit must be positive")
    total_lines = 2 * n - 1
    low, high, best = 1, total_lines, 0
    while low <= high:
        mid = (low + high) // 2
        if _emotes_in_lines(n, mid) < k:
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return min(total_lines, best + 1)