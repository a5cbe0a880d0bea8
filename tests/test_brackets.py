import pytest

from contestkit.brackets import BracketWalk, bracket_walk


def test_odd_length_never_walkable():
    assert bracket_walk("(()", [1, 2, 3, 1]) == [False] * 4


def test_odd_length_left_unchanged():
    walk = BracketWalk("(()")
    walk.flip(2)
    assert str(walk) == "(()"


def test_flip_changes_string():
    walk = BracketWalk("()")
    walk.flip(1)
    assert str(walk) == "))"


def test_two_flips_restore_string():
    walk = BracketWalk("(()(")
    walk.flip(3)
    walk.flip(3)
    assert str(walk) == "(()("


def test_short_string_walkability():
    assert bracket_walk("()", [1, 1]) == [False, True]


def test_open_pair_before_close_pair():
    assert bracket_walk("(()(", [4]) == [True]


def test_only_close_pairs():
    assert bracket_walk("())(", [4]) == [False]


def test_leading_close_is_not_walkable():
    walk = BracketWalk("(())")
    assert walk.flip(1) is False


def test_function_matches_class():
    s = "(())()(("
    queries = [8, 7, 2, 5, 1, 1, 6]
    walk = BracketWalk(s)
    assert bracket_walk(s, queries) == [walk.flip(q) for q in queries]


def test_length():
    assert len(BracketWalk("(())")) == len("(())")


def test_position_out_of_range():
    walk = BracketWalk("()")
    with pytest.raises(IndexError):
        walk.flip(3)
    with pytest.raises(IndexError):
        walk.flip(0)


def test_rejects_non_bracket():
    with pytest.raises(ValueError):
        BracketWalk("(a)")