"""Number-theory problem solvers: primes, divisors and congruences."""

from bisect import bisect_right
from collections import Counter
from functools import lru_cache
from math import isqrt
from typing import Iterable, Optional, Sequence

from contestkit.modmath import inverse, mul, power

DEFAULT_SIEVE_LIMIT = 10**6


def sieve_primes(limit: int) -> list[int]:
    """Return all primes not greater than ``limit`` in increasing order."""
    if limit < 2:
        return []
    is_prime = bytearray([1]) * (limit + 1)
    is_prime[0] = is_prime[1] = 0
    for i in range(2, isqrt(limit) + 1):
        if is_prime[i]:
            is_prime[i * i :: i] = bytes(len(range(i * i, limit + 1, i)))
    return [i for i, flag in enumerate(is_prime) if flag]


@lru_cache(maxsize=4)
def _primes_with_one(limit: int) -> tuple[int, ...]:
    return (1, *sieve_primes(limit))


def lonely_numbers(queries: Iterable[int], limit: int = DEFAULT_SIEVE_LIMIT) -> list[int]:
    """For each n, count the lonely numbers in the group 1..n.

    A number is lonely when it is 1 or a prime whose square exceeds n.
    """
    table = _primes_with_one(limit)
    answers = []
    for n in queries:
        if n == 1:
            answers.append(1)
            continue
        up_to_n = bisect_right(table, n) - 1
        up_to_root = bisect_right(table, isqrt(n)) - 1
        answers.append(up_to_n - up_to_root + 1)
    return answers


def _prime_factors(value: int) -> set[int]:
    factors = set()
    i = 2
    while i * i <= value:
        if value % i == 0:
            factors.add(i)
            while value % i == 0:
                value //= i
        i += 1
    factors.add(value)
    return factors


def weakened_common_divisor(pairs: Sequence[tuple[int, int]]) -> Optional[int]:
    """Return the smallest prime dividing at least one number of every pair, or None."""
    if not pairs:
        raise ValueError("at least one pair is required")
    ordered = sorted(pairs, key=lambda pair: pair[0] + pair[1], reverse=True)
    first, rest = ordered[0], ordered[1:]
    candidates = _prime_factors(first[0]) | _prime_factors(first[1])
    for candidate in sorted(candidates):
        if candidate == 1:
            continue
        if all(a % candidate == 0 or b % candidate == 0 for a, b in rest):
            return candidate
    return None


def congruence_solutions(a: int, b: int, p: int, x: int) -> int:
    """Count n in [1, x] with n * a**n congruent to b modulo the prime p."""
    if p < 2:
        raise ValueError(f"modulus must be a prime, got {p}")
    if a % p == 0:
        raise ValueError(f"{a} must not be divisible by {p}")
    period = p * (p - 1)
    count = 0
    for i in range(1, p):
        target = mul(b, inverse(power(a, i, p), p), p)
        first = (p - 1) * ((i - target) % p) + i
        if first <= x:
            count += (x - first) // period + 1
    return count


def max_frogs_caught(hops: Sequence[int]) -> int:
    """Return the most frogs a single trap at positions 1..len(hops) can catch."""
    n = len(hops)
    freq = Counter(h for h in hops if h <= n)
    caught = [0] * (n + 1)
    for hop, amount in freq.items():
        for position in range(hop, n + 1, hop):
            caught[position] += amount
    return max(caught[1:], default=0)


def sum_product_pairs(
    values: Iterable[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """For each (sum, product) query, count index pairs i < j with that sum and product."""
    freq = Counter(values)
    answers = []
    for total, product in queries:
        disc = total * total - 4 * product
        if disc < 0:
            answers.append(0)
            continue
        root = isqrt(disc)
        if root * root != disc or (total + root) % 2:
            answers.append(0)
            continue
        x = (total + root) // 2
        y = total - x
        if x == y:
            answers.append(freq[x] * (freq[x] - 1) // 2)
        else:
            answers.append(freq[x] * freq[y])
    return answers