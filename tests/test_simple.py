import pytest

from contestkit.simple import (
    bobritto_bandito,
    chat_ban,
    dinner_time,
    min_jumps,
    not_acceptable,
    ping_pong,
    strange_functions,
)


@pytest.mark.parametrize("s", ["4", "37", "998244353", "1000000007"])
def test_strange_functions_counts_digits(s):
    assert strange_functions(s) == len(s)


@pytest.mark.parametrize("s", ["", "12a", "-5"])
def test_strange_functions_rejects_non_numbers(s):
    with pytest.raises(ValueError):
        strange_functions(s)


@pytest.mark.parametrize("k", [1, 2, 3, 10, 1000])
def test_min_jumps_triangular_targets(k):
    assert min_jumps(k * (k + 1) // 2) == k


@pytest.mark.parametrize("k", [2, 3, 7, 50])
def test_min_jumps_one_below_triangular_needs_extra_jump(k):
    assert min_jumps(k * (k + 1) // 2 - 1) == k + 1


def test_min_jumps_never_decreases_by_more_than_one():
    results = [min_jumps(n) for n in range(1, 200)]
    assert all(b >= a - 1 for a, b in zip(results, results[1:]))


def test_min_jumps_rejects_non_positive():
    with pytest.raises(ValueError):
        min_jumps(0)


def test_ping_pong_single_stamina():
    assert ping_pong(1, 1) == (0, 1)


@pytest.mark.parametrize("a,b", [(2, 1), (1, 7), (10, 10)])
def test_ping_pong_total_wins(a, b):
    alice, bob = ping_pong(a, b)
    assert alice + bob == a + b - 1
    assert bob == b


def test_ping_pong_rejects_zero_stamina():
    with pytest.raises(ValueError):
        ping_pong(0, 3)


@pytest.mark.parametrize("a,b", [(0, 0), (12, 30), (23, 59)])
def test_not_acceptable_same_time_is_acceptable(a, b):
    assert not_acceptable(a, b, a, b) is True


@pytest.mark.parametrize(
    "first,second", [((1, 0), (0, 59)), ((5, 10), (5, 11)), ((0, 1), (23, 0))]
)
def test_not_acceptable_exactly_one_order_holds(first, second):
    assert not_acceptable(*first, *second) != not_acceptable(*second, *first)


@pytest.mark.parametrize("hour", [0, 11, 22])
def test_not_acceptable_later_hour_wins(hour):
    assert not_acceptable(hour + 1, 0, hour, 59)
    assert not not_acceptable(hour, 59, hour + 1, 0)


@pytest.mark.parametrize("n,p,q", [(6, 2, 3), (4, 4, 7), (9, 3, 1)])
def test_dinner_time_divisible_length_needs_exact_sum(n, p, q):
    m = q * (n // p)
    assert dinner_time(n, m, p, q)
    assert not dinner_time(n, m + 1, p, q)


@pytest.mark.parametrize("n,m,p,q", [(5, 1, 2, 100), (7, 3, 4, 2)])
def test_dinner_time_non_divisible_always_possible(n, m, p, q):
    assert dinner_time(n, m, p, q)


def test_dinner_time_rejects_zero_window():
    with pytest.raises(ValueError):
        dinner_time(3, 3, 0, 1)


@pytest.mark.parametrize(
    "n,k,l,r", [(4, 2, -2, 2), (5, 3, -1, 4), (3, 3, -2, 1), (6, 6, -6, 0)]
)
def test_bobritto_bandito_segment_is_valid(n, k, l, r):
    start, end = bobritto_bandito(n, k, l, r)
    assert end - start == k
    assert l <= start <= 0 <= end <= r


@pytest.mark.parametrize("n", [1, 2, 5, 100])
def test_chat_ban_first_emote(n):
    assert chat_ban(n, 1) == 1


@pytest.mark.parametrize("n", [1, 3, 8, 10**9])
def test_chat_ban_whole_triangle(n):
    assert chat_ban(n, n * n) == 2 * n - 1
    assert chat_ban(n, n * n + 5) == 2 * n - 1


@pytest.mark.parametrize("n", [2, 4, 9])
def test_chat_ban_top_of_triangle(n):
    assert chat_ban(n, n * (n + 1) // 2) == n


def test_chat_ban_monotone_in_limit():
    n = 6
    results = [chat_ban(n, k) for k in range(1, n * n + 1)]
    assert results == sorted(results)


def test_chat_ban_rejects_bad_arguments():
    with pytest.raises(ValueError):
        chat_ban(0, 1)