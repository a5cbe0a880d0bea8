"""Game and construction problems decided by simple greedy rules."""

from typing import Optional, Sequence


def lrc_vip(values: Sequence[int]) -> Optional[list[int]]:
    """Split values into two groups with different gcds.

    Returns the group (1 or 2) of each value, or None when all values are equal.
    """
    if not values:
        raise ValueError("at least one value is required")
    largest = max(values)
    if all(v == largest for v in values):
        return None
    return [2 if v == largest else 1 for v in values]


def apples_winner(values: Sequence[int], k: int) -> str:
    """Return "Tom" or "Jerry", the winner of the apple boxes game."""
    if len(values) < 2:
        raise ValueError("at least two boxes are required")
    ordered = sorted(values)
    spread = ordered[-1] - ordered[0] - (1 if ordered[-1] != ordered[-2] else 0)
    if spread <= k and sum(ordered) % 2:
        return "Tom"
    return "Jerry"


def _fills(length: int, width: int, pigments: Sequence[int]) -> bool:
    """Tell whether stripes of height ``length`` can fill ``width`` columns."""
    covered = 0
    wide_stripe = False
    for amount in pigments:
        if covered >= width:
            break
        take = amount // length
        if take < 2:
            continue
        if take > 2:
            wide_stripe = True
        if covered + take > width:
            if wide_stripe:
                covered = width
                break
            continue
        covered += take
    return covered >= width


def can_color_picture(n: int, m: int, pigments: Sequence[int]) -> bool:
    """Tell whether an n-by-m toroidal picture can be colored beautifully."""
    if n <= 0 or m <= 0:
        raise ValueError("picture dimensions must be positive")
    ordered = sorted(pigments, reverse=True)
    return _fills(n, m, ordered) or _fills(m, n, ordered)