"""Bracket walk: can a flippable bracket string be walked into a regular sequence."""

from typing import Iterable

from sortedcontainers import SortedSet


class BracketWalk:
    """A bracket string that answers, after each flip, whether it is walkable."""

    def __init__(self, s: str) -> None:
        if any(ch not in "()" for ch in s):
            raise ValueError(f"expected only brackets, got {s!r}")
        self._chars = list(s)
        self._open: SortedSet = SortedSet()
        self._close: SortedSet = SortedSet()
        for i in range(1, len(self._chars)):
            self._mark(i)

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    def _mark(self, i: int) -> None:
        """Record index i if it closes a pair of equal adjacent brackets."""
        if self._chars[i] == self._chars[i - 1]:
            (self._open if self._chars[i] == "(" else self._close).add(i)

    def _unmark(self, i: int) -> None:
        if i in self._open:
            self._open.remove(i)
        elif i in self._close:
            self._close.remove(i)

    def flip(self, position: int) -> bool:
        """Flip the bracket at 1-based ``position`` and tell whether the string is walkable.

        A string of odd length is never walkable and is left unchanged.
        """
        n = len(self._chars)
        if not 1 <= position <= n:
            raise IndexError(f"position {position} outside 1..{n}")
        if n % 2:
            return False
        p = position - 1
        self._unmark(p)
        self._unmark(p + 1)
        self._chars[p] = ")" if self._chars[p] == "(" else "("
        if p > 0:
            self._mark(p)
        if p < n - 1:
            self._mark(p + 1)
        return self._walkable()

    def _walkable(self) -> bool:
        if self._chars[0] == ")" or self._chars[-1] == "(":
            return False
        if not self._open and not self._close:
            return True
        if not self._open or not self._close:
            return False
        if self._open[0] > self._close[0] or self._open[-1] > self._close[-1]:
            return False
        return True


def bracket_walk(s: str, queries: Iterable[int]) -> list[bool]:
    """Apply each flip to ``s`` in turn and report whether the string is walkable after it."""
    walk = BracketWalk(s)
    return [walk.flip(position) for position in queries]