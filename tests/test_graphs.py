from math import comb

import pytest

from contestkit.graphs import (
    disappearing_permutation,
    greetings,
    trapped_cells,
    tree_edge_weights,
)


def _cells(grid):
    return sum(len(row) for row in grid)


def test_trapped_all_escape():
    assert trapped_cells(["UUU"]) == 0


def test_trapped_facing_pair():
    grid = ["RL"]
    assert trapped_cells(grid) == _cells(grid)


def test_trapped_all_free_cells():
    grid = ["??", "??"]
    assert trapped_cells(grid) == _cells(grid)


def test_trapped_lone_free_cell_escapes():
    assert trapped_cells(["?"]) == 0


def test_trapped_visited_neighbour_counts_as_trapped():
    assert trapped_cells(["U", "U"]) == 1


def test_trapped_empty_grid():
    assert trapped_cells([]) == 0


def test_trapped_bounded_by_cell_count():
    grid = ["DRL?", "UU?L", "RRRD"]
    assert 0 <= trapped_cells(grid) <= _cells(grid)


def test_trapped_rejects_bad_character():
    with pytest.raises(ValueError):
        trapped_cells(["DX"])


def test_trapped_rejects_ragged_grid():
    with pytest.raises(ValueError):
        trapped_cells(["DD", "D"])


def _distances(parents, weights):
    n = len(parents)
    dist = {}

    def resolve(v):
        if v in dist:
            return dist[v]
        p = parents[v - 1]
        dist[v] = 0 if p == v else resolve(p) + weights[v - 1]
        return dist[v]

    for v in range(1, n + 1):
        resolve(v)
    return dist


def test_tree_weights_root_is_zero():
    parents = [2, 2, 2]
    weights = tree_edge_weights(parents, [2, 3, 1])
    assert weights[1] == 0


def test_tree_weights_impossible():
    assert tree_edge_weights([1, 1], [2, 1]) is None


def test_tree_weights_length_mismatch():
    with pytest.raises(ValueError):
        tree_edge_weights([1, 1], [1])


def test_tree_weights_bad_order():
    with pytest.raises(ValueError):
        tree_edge_weights([1, 1], [1, 1])


def test_disappearing_identity():
    n = 5
    identity = list(range(1, n + 1))
    assert disappearing_permutation(identity, identity[::-1]) == identity


def test_disappearing_single_cycle():
    perm = [2, 3, 1]
    assert disappearing_permutation(perm, [2, 1, 3]) == [len(perm)] * len(perm)


def test_disappearing_invariants():
    perm = [4, 1, 5, 2, 3, 6]
    answers = disappearing_permutation(perm, [6, 1, 3, 2, 5, 4])
    assert answers == sorted(answers)
    assert answers[-1] == len(perm)


def test_disappearing_rejects_non_permutation():
    with pytest.raises(ValueError):
        disappearing_permutation([1, 1], [1, 2])


def test_greetings_disjoint():
    assert greetings([(1, 2), (3, 4), (5, 6)]) == 0


def test_greetings_fully_nested():
    n = 6
    intervals = [(i, 2 * n - i) for i in range(n)]
    assert greetings(intervals) == comb(n, 2)


def test_greetings_order_independent():
    intervals = [(2, 9), (1, 5), (3, 4), (6, 10), (7, 8)]
    assert greetings(intervals) == greetings(list(reversed(intervals)))


def test_greetings_empty():
    assert greetings([]) == 0