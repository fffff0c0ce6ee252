"""Grid and graph problems: islands, course ordering, rotting oranges, word search."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator, Sequence

_STEPS = ((1, 0), (-1, 0), (0, -1), (0, 1))


def _neighbours(i: int, j: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for di, dj in _STEPS:
        ni, nj = i + di, j + dj
        if 0 <= ni < rows and 0 <= nj < cols:
            yield ni, nj


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count groups of ``'1'`` cells joined horizontally or vertically."""
    if not grid:
        return 0
    rows, cols = len(grid), len(grid[0])
    seen: set[tuple[int, int]] = set()
    count = 0
    for i in range(rows):
        for j in range(cols):
            if grid[i][j] != "1" or (i, j) in seen:
                continue
            count += 1
            seen.add((i, j))
            stack = [(i, j)]
            while stack:
                ci, cj = stack.pop()
                for cell in _neighbours(ci, cj, rows, cols):
                    if cell not in seen and grid[cell[0]][cell[1]] == "1":
                        seen.add(cell)
                        stack.append(cell)
    return count


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Tell whether all courses can be taken; ``[a, b]`` means ``b`` comes before ``a``."""
    waiting = [0] * num_courses
    unlocks: defaultdict[int, list[int]] = defaultdict(list)
    for course, prerequisite in prerequisites:
        for index in (course, prerequisite):
            if not 0 <= index < num_courses:
                raise ValueError(f"course {index} is outside 0..{num_courses - 1}")
        waiting[course] += 1
        unlocks[prerequisite].append(course)
    ready = [course for course, count in enumerate(waiting) if count == 0]
    taken = 0
    while ready:
        course = ready.pop()
        taken += 1
        for follower in unlocks[course]:
            waiting[follower] -= 1
            if waiting[follower] == 0:
                ready.append(follower)
    return taken == num_courses


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until no fresh orange (1) is left, or -1 if some never rot.

    Each minute every rotten orange (2) spoils its fresh neighbours.
    """
    if not grid:
        return 0
    state = [list(row) for row in grid]
    rows, cols = len(state), len(state[0])
    frontier = [(i, j) for i in range(rows) for j in range(cols) if state[i][j] == 2]
    fresh = sum(row.count(1) for row in state)
    minutes = 0
    while frontier:
        spread: list[tuple[int, int]] = []
        for i, j in frontier:
            for ni, nj in _neighbours(i, j, rows, cols):
                if state[ni][nj] == 1:
                    state[ni][nj] = 2
                    fresh -= 1
                    spread.append((ni, nj))
        if spread:
            minutes += 1
        frontier = spread
    return -1 if fresh else minutes


def word_puzzle(grid: Sequence[Sequence[str]], target: str) -> bool:
    """Tell whether ``target`` can be traced through adjacent cells, each used once."""
    if not target or not grid or not grid[0]:
        return False
    rows, cols = len(grid), len(grid[0])
    used: set[tuple[int, int]] = set()

    def trace(i: int, j: int, k: int) -> bool:
        if (i, j) in used or grid[i][j] != target[k]:
            return False
        if k == len(target) - 1:
            return True
        used.add((i, j))
        found = any(trace(ni, nj, k + 1) for ni, nj in _neighbours(i, j, rows, cols))
        used.discard((i, j))
        return found

    return any(trace(i, j, 0) for i in range(rows) for j in range(cols))