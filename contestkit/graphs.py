"""Grid and graph problem solvers: walks, trees, permutation cycles and intervals."""

from typing import Optional, Sequence

from sortedcontainers import SortedSet

_STEPS = {"D": (1, 0), "R": (0, 1), "U": (-1, 0), "L": (0, -1)}
_FREE = "?"


def trapped_cells(grid: Sequence[str]) -> int:
    """Count the cells of a labyrinth from which the witch keeps the hero trapped.

    Each cell holds a direction D, R, U, L or a free cell '?'. Cells are walked
    in row-major order; a walk stops with "escapes" when it leaves the grid and
    with "trapped" when it reaches a free or already visited cell.
    """
    rows = len(grid)
    if rows == 0:
        return 0
    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("all grid rows must have the same length")
    for row in grid:
        for ch in row:
            if ch != _FREE and ch not in _STEPS:
                raise ValueError(f"unexpected grid character {ch!r}")

    def inside(r: int, c: int) -> bool:
        return 0 <= r < rows and 0 <= c < cols

    visited = [[False] * cols for _ in range(rows)]
    escapes = [[True] * cols for _ in range(rows)]

    for start_row in range(rows):
        for start_col in range(cols):
            if visited[start_row][start_col]:
                continue
            path: list[tuple[int, int]] = []
            r, c = start_row, start_col
            while True:
                visited[r][c] = True
                cell = grid[r][c]
                if cell == _FREE:
                    if any(inside(r + dr, c + dc) for dr, dc in _STEPS.values()):
                        escapes[r][c] = False
                    # A free cell only ever starts a walk, so nothing precedes it.
                    break
                dr, dc = _STEPS[cell]
                nr, nc = r + dr, c + dc
                if not inside(nr, nc):
                    outcome = True
                elif not visited[nr][nc] and grid[nr][nc] != _FREE:
                    path.append((r, c))
                    r, c = nr, nc
                    continue
                else:
                    outcome = False
                escapes[r][c] = outcome
                for pr, pc in path:
                    escapes[pr][pc] = outcome
                break

    return sum(not flag for row in escapes for flag in row)


def tree_edge_weights(parents: Sequence[int], order: Sequence[int]) -> Optional[list[int]]:
    """Assign edge weights so that vertices sorted by root distance follow ``order``.

    ``parents[i - 1]`` is the parent of vertex i (the root is its own parent) and
    ``order`` is a permutation of 1..n. The weight of the edge into vertex i is
    returned at position i - 1, the root getting 0. Returns None when impossible.
    """
    n = len(parents)
    if len(order) != n:
        raise ValueError("parents and order must have the same length")
    if sorted(order) != list(range(1, n + 1)):
        raise ValueError("order must be a permutation of 1..n")
    if any(not 1 <= p <= n for p in parents):
        raise ValueError("parents must name vertices 1..n")
    rank = [0] * (n + 1)
    for position, vertex in enumerate(order, start=1):
        rank[vertex] = position
    vertices = range(1, n + 1)
    if any(rank[parents[v - 1]] > rank[v] for v in vertices):
        return None
    return [rank[v] - rank[parents[v - 1]] for v in vertices]


def disappearing_permutation(permutation: Sequence[int], order: Sequence[int]) -> list[int]:
    """Return, after each removal in ``order``, the fewest operations to restore the permutation.

    Removing an element breaks its whole cycle, so the answer is the total
    length of the cycles touched so far.
    """
    n = len(permutation)
    if sorted(permutation) != list(range(1, n + 1)):
        raise ValueError("permutation must contain 1..n exactly once")
    if any(not 1 <= value <= n for value in order):
        raise ValueError("order must name positions 1..n")
    visited = [False] * (n + 1)
    broken = 0
    answers = []
    for start in order:
        position = start
        while not visited[position]:
            visited[position] = True
            position = permutation[position - 1]
            broken += 1
        answers.append(broken)
    return answers


def greetings(intervals: Sequence[tuple[int, int]]) -> int:
    """Count the pairs of people whose walks meet: intervals nested in one another."""
    ends: SortedSet = SortedSet()
    meetings = 0
    for _, end in sorted(intervals):
        meetings += len(ends) - ends.bisect_left(end)
        ends.add(end)
    return meetings