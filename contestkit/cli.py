"""Command line front end: read a problem's input text and print its answers."""

import argparse
import re
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from contestkit.arrays import (
    fill_maximum_subarray,
    kevin_can_transform,
    max_magnitude,
    nonzero_partition,
    party_sweets,
    reorder_for_max,
    scoring_subsequences,
)
from contestkit.brackets import bracket_walk
from contestkit.games import apples_winner, can_color_picture, lrc_vip
from contestkit.graphs import (
    disappearing_permutation,
    greetings,
    trapped_cells,
    tree_edge_weights,
)
from contestkit.number_theory import (
    congruence_solutions,
    lonely_numbers,
    max_frogs_caught,
    sum_product_pairs,
    weakened_common_divisor,
)
from contestkit.simple import (
    bobritto_bandito,
    chat_ban,
    dinner_time,
    min_jumps,
    not_acceptable,
    ping_pong,
    strange_functions,
)

_SPACE = re.compile(r"\s*")
_WORD = re.compile(r"\S+")


class _Reader:
    """Whitespace-separated reader over input text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip(self) -> None:
        self._pos = _SPACE.match(self._text, self._pos).end()

    def word(self) -> str:
        self._skip()
        match = _WORD.match(self._text, self._pos)
        if match is None:
            raise ValueError("unexpected end of input")
        self._pos = match.end()
        return match.group()

    def char(self) -> str:
        self._skip()
        if self._pos >= len(self._text):
            raise ValueError("unexpected end of input")
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def int(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def ints(self, count: int) -> list[int]:
        return [self.int() for _ in range(count)]


Handler = Callable[[_Reader], list[str]]


@dataclass(frozen=True)
class _Problem:
    solve: Handler
    multiple_cases: bool


PROBLEMS: dict[str, _Problem] = {}


def _problem(name: str, multiple_cases: bool = True) -> Callable[[Handler], Handler]:
    def register(handler: Handler) -> Handler:
        PROBLEMS[name] = _Problem(handler, multiple_cases)
        return handler

    return register


def _yes_no(flag: bool, yes: str = "Yes", no: str = "No") -> str:
    return yes if flag else no


def _join(values: Sequence[object]) -> str:
    return " ".join(str(v) for v in values)


@_problem("not-acceptable", multiple_cases=False)
def _not_acceptable(reader: _Reader) -> list[str]:
    a, b, c, d = reader.ints(4)
    return [_yes_no(not_acceptable(a, b, c, d))]


@_problem("lonely-numbers", multiple_cases=False)
def _lonely_numbers(reader: _Reader) -> list[str]:
    n = reader.int()
    return [str(v) for v in lonely_numbers(reader.ints(n))]


@_problem("weakened-common-divisor", multiple_cases=False)
def _weakened_common_divisor(reader: _Reader) -> list[str]:
    n = reader.int()
    pairs = [(reader.int(), reader.int()) for _ in range(n)]
    result = weakened_common_divisor(pairs)
    return ["-1" if result is None else str(result)]


@_problem("trapped-cells")
def _trapped_cells(reader: _Reader) -> list[str]:
    n, m = reader.ints(2)
    grid = ["".join(reader.char() for _ in range(m)) for _ in range(n)]
    return [str(trapped_cells(grid))]


@_problem("kevin-and-numbers")
def _kevin_and_numbers(reader: _Reader) -> list[str]:
    n, m = reader.ints(2)
    a = reader.ints(n)
    b = reader.ints(m)
    return [_yes_no(kevin_can_transform(a, b))]


@_problem("anu-function", multiple_cases=False)
def _anu_function(reader: _Reader) -> list[str]:
    n = reader.int()
    return [_join(reorder_for_max(reader.ints(n)))]


@_problem("color-the-picture")
def _color_the_picture(reader: _Reader) -> list[str]:
    n, m, k = reader.ints(3)
    return [_yes_no(can_color_picture(n, m, reader.ints(k)))]


@_problem("nonzero-sum")
def _nonzero_sum(reader: _Reader) -> list[str]:
    n = reader.int()
    segments = nonzero_partition(reader.ints(n))
    if segments is None:
        return ["-1"]
    return [str(len(segments)), *(f"{start} {end}" for start, end in segments)]


@_problem("lrc-vip")
def _lrc_vip(reader: _Reader) -> list[str]:
    n = reader.int()
    groups = lrc_vip(reader.ints(n))
    if groups is None:
        return ["No"]
    return ["Yes", _join(groups)]


@_problem("apples-in-boxes")
def _apples_in_boxes(reader: _Reader) -> list[str]:
    n, k = reader.ints(2)
    return [apples_winner(reader.ints(n), k)]


@_problem("maximum-subarray-sum")
def _maximum_subarray_sum(reader: _Reader) -> list[str]:
    n, k = reader.ints(2)
    mask = reader.word()
    filled = fill_maximum_subarray(k, mask, reader.ints(n))
    if filled is None:
        return ["No"]
    return ["Yes", _join(filled)]


@_problem("dinner-time")
def _dinner_time(reader: _Reader) -> list[str]:
    n, m, p, q = reader.ints(4)
    return [_yes_no(dinner_time(n, m, p, q), "YES", "NO")]


@_problem("congruence-equation", multiple_cases=False)
def _congruence_equation(reader: _Reader) -> list[str]:
    a, b, p, x = reader.ints(4)
    return [str(congruence_solutions(a, b, p, x))]


@_problem("party-sweets", multiple_cases=False)
def _party_sweets(reader: _Reader) -> list[str]:
    n, m = reader.ints(2)
    boys = reader.ints(n)
    girls = reader.ints(m)
    total = party_sweets(boys, girls)
    return ["-1" if total is None else str(total)]


@_problem("scoring-subsequences")
def _scoring_subsequences(reader: _Reader) -> list[str]:
    n = reader.int()
    return [_join(scoring_subsequences(reader.ints(n)))]


@_problem("bracket-walk", multiple_cases=False)
def _bracket_walk(reader: _Reader) -> list[str]:
    _, q = reader.ints(2)
    s = reader.word()
    return [_yes_no(flag, "YES", "NO") for flag in bracket_walk(s, reader.ints(q))]


@_problem("tree-edge-weights")
def _tree_edge_weights(reader: _Reader) -> list[str]:
    n = reader.int()
    parents = reader.ints(n)
    order = reader.ints(n)
    weights = tree_edge_weights(parents, order)
    return ["-1" if weights is None else _join(weights)]


@_problem("sum-and-product")
def _sum_and_product(reader: _Reader) -> list[str]:
    n = reader.int()
    values = reader.ints(n)
    q = reader.int()
    queries = [(reader.int(), reader.int()) for _ in range(q)]
    return [_join(sum_product_pairs(values, queries))]


@_problem("bobritto-bandito")
def _bobritto_bandito(reader: _Reader) -> list[str]:
    n, k, l, r = reader.ints(4)
    return [_join(bobritto_bandito(n, k, l, r))]


@_problem("frogs")
def _frogs(reader: _Reader) -> list[str]:
    n = reader.int()
    return [str(max_frogs_caught(reader.ints(n)))]


@_problem("greetings")
def _greetings(reader: _Reader) -> list[str]:
    n = reader.int()
    intervals = [(reader.int(), reader.int()) for _ in range(n)]
    return [str(greetings(intervals))]


@_problem("chat-ban")
def _chat_ban(reader: _Reader) -> list[str]:
    n, k = reader.ints(2)
    return [str(chat_ban(n, k))]


@_problem("disappearing-permutation")
def _disappearing_permutation(reader: _Reader) -> list[str]:
    n = reader.int()
    permutation = reader.ints(n)
    order = reader.ints(n)
    return [_join(disappearing_permutation(permutation, order))]


@_problem("strange-functions")
def _strange_functions(reader: _Reader) -> list[str]:
    return [str(strange_functions(reader.word()))]


@_problem("jumps")
def _jumps(reader: _Reader) -> list[str]:
    return [str(min_jumps(reader.int()))]


@_problem("ping-pong")
def _ping_pong(reader: _Reader) -> list[str]:
    a, b = reader.ints(2)
    return [_join(ping_pong(a, b))]


@_problem("magnitude")
def _magnitude(reader: _Reader) -> list[str]:
    n = reader.int()
    return [str(max_magnitude(reader.ints(n)))]


def run(problem: str, text: str) -> str:
    """Solve ``problem`` on the input ``text`` and return the output text.

    Problems that take several test cases expect their count first.
    """
    entry = PROBLEMS.get(problem)
    if entry is None:
        raise ValueError(f"unknown problem {problem!r}")
    reader = _Reader(text)
    cases = reader.int() if entry.multiple_cases else 1
    if cases < 0:
        raise ValueError(f"test case count must be non-negative, got {cases}")
    lines: list[str] = []
    for _ in range(cases):
        lines.extend(entry.solve(reader))
    return "".join(line + "\n" for line in lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point: solve the named problem on a file or standard input."""
    parser = argparse.ArgumentParser(
        prog="contestkit", description="Solve a contest problem from its input text."
    )
    parser.add_argument("problem", choices=sorted(PROBLEMS))
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)
    try:
        if args.input is None:
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        output = run(args.problem, text)
    except (OSError, ValueError, IndexError) as error:
        print(f"contestkit: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())