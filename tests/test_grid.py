import pytest

from algosuite.grid import can_finish, num_islands, oranges_rotting, word_puzzle

ISLANDS = [
    ["1", "1", "0", "0", "0"],
    ["1", "1", "0", "0", "0"],
    ["0", "0", "1", "0", "0"],
    ["0", "0", "0", "1", "1"],
]

BOARD = [
    ["A", "B", "C", "E"],
    ["S", "F", "C", "S"],
    ["A", "D", "E", "E"],
]


def _transpose(grid):
    return [list(column) for column in zip(*grid)]


def test_num_islands_example():
    assert num_islands(ISLANDS) == 3


def test_num_islands_transpose_invariant():
    assert num_islands(_transpose(ISLANDS)) == num_islands(ISLANDS)


def test_num_islands_extra_isolated_cell_adds_one():
    grid = [row + ["0", "1"] for row in ISLANDS]
    grid[1][-1] = "0"
    grid[2][-1] = "0"
    grid[3][-1] = "0"
    assert num_islands(grid) == num_islands(ISLANDS) + 1


def test_num_islands_full_grid_is_one_island():
    grid = [["1"] * 4 for _ in range(3)]
    assert num_islands(grid) == len(grid) // len(grid)


def test_num_islands_leaves_grid_alone():
    grid = [row[:] for row in ISLANDS]
    num_islands(grid)
    assert grid == ISLANDS


def test_num_islands_water_only_equals_empty():
    assert num_islands([["0", "0"], ["0", "0"]]) == num_islands([])


def test_can_finish_chain_and_cycle():
    chain = [[1, 0], [2, 1], [3, 2]]
    assert can_finish(4, chain)
    assert not can_finish(4, chain + [[0, 3]])


def test_can_finish_two_course_cycle():
    assert not can_finish(2, [[1, 0], [0, 1]])


def test_can_finish_without_prerequisites():
    assert can_finish(3, [])


def test_can_finish_self_dependency():
    assert not can_finish(1, [[0, 0]])


@pytest.mark.parametrize("pair", [[2, 0], [0, -1]])
def test_can_finish_rejects_unknown_course(pair):
    with pytest.raises(ValueError):
        can_finish(2, [pair])


def test_oranges_rotting_example():
    assert oranges_rotting([[2, 1, 1], [1, 1, 0], [0, 1, 1]]) == 4


def test_oranges_rotting_unreachable():
    assert oranges_rotting([[2, 1, 1], [0, 1, 1], [1, 0, 1]]) == -1


@pytest.mark.parametrize("fresh", [0, 1, 3, 6])
def test_oranges_rotting_row(fresh):
    assert oranges_rotting([[2] + [1] * fresh]) == fresh


def test_oranges_rotting_mirror_invariant():
    grid = [[2, 1, 1], [1, 1, 0], [0, 1, 1]]
    mirrored = [row[::-1] for row in grid]
    assert oranges_rotting(mirrored) == oranges_rotting(grid)


def test_oranges_rotting_leaves_grid_alone():
    grid = [[2, 1], [1, 1]]
    oranges_rotting(grid)
    assert grid == [[2, 1], [1, 1]]


def test_oranges_rotting_nothing_fresh_equals_empty():
    assert oranges_rotting([[0, 2, 0]]) == oranges_rotting([])


def test_word_puzzle_examples():
    assert word_puzzle(BOARD, "ABCCED")
    assert word_puzzle(BOARD, "SEE")
    assert not word_puzzle(BOARD, "ABCB")


@pytest.mark.parametrize("word", ["ABCCED", "SEE", "ABCB", "ASADFBCCEESE", "Z"])
def test_word_puzzle_reverse_invariant(word):
    assert word_puzzle(BOARD, word) == word_puzzle(BOARD, word[::-1])


def test_word_puzzle_single_letter():
    assert word_puzzle(BOARD, "F")
    assert not word_puzzle(BOARD, "Q")


def test_word_puzzle_empty_inputs():
    assert not word_puzzle(BOARD, "")
    assert not word_puzzle([], "A")


def test_word_puzzle_cell_not_reused():
    assert not word_puzzle([["A", "B"]], "ABA")
    assert word_puzzle([["A", "B", "A"]], "ABA")