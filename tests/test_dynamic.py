import pytest

from algosuite.dynamic import (
    climb_stairs,
    coin_change,
    generate,
    max_profit,
    num_squares,
    rob,
)


def test_climb_stairs_base_cases():
    assert climb_stairs(-1) == 0
    assert climb_stairs(0) == 1
    assert climb_stairs(1) == 1


@pytest.mark.parametrize("n", range(2, 25))
def test_climb_stairs_recurrence(n):
    assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)


def test_generate_shape_and_values():
    rows = generate(10)
    assert [len(row) for row in rows] == list(range(1, 11))
    for i, row in enumerate(rows):
        assert row[0] == row[-1] == 1
        assert sum(row) == 2**i
        assert row == row[::-1]
    for above, row in zip(rows, rows[1:]):
        for j in range(1, len(row) - 1):
            assert row[j] == above[j - 1] + above[j]


def test_generate_empty_and_negative():
    assert generate(0) == []
    with pytest.raises(ValueError):
        generate(-1)


def test_max_profit_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


def test_max_profit_invariants():
    falling = [9, 7, 4, 3, 1]
    assert max_profit(falling) == 0
    prices = [3, 8, 2, 6, 1, 4]
    assert 0 <= max_profit(prices) <= max(prices) - min(prices)
    rising = [1, 2, 5, 9]
    assert max_profit(rising) == rising[-1] - rising[0]
    assert max_profit([]) == 0


def test_rob_example():
    assert rob([2, 7, 9, 3, 1]) == 12


def test_rob_invariants():
    assert rob([6]) == 6
    nums = [4, 1, 2, 7, 5, 3, 1]
    total = rob(nums)
    assert max(nums) <= total <= sum(nums)
    assert total >= max(sum(nums[0::2]), sum(nums[1::2]))


def test_rob_empty_raises():
    with pytest.raises(ValueError):
        rob([])


def test_num_squares_example():
    assert num_squares(12) == 3


@pytest.mark.parametrize("root", range(1, 12))
def test_num_squares_perfect_square(root):
    assert num_squares(root * root) == 1


def test_num_squares_bounds():
    assert num_squares(0) == 0
    assert all(1 <= num_squares(n) <= 4 for n in range(1, 200))
    with pytest.raises(ValueError):
        num_squares(-1)


def test_coin_change_basic_cases():
    assert coin_change([1, 2, 5], 0) == 0
    assert coin_change([2], 3) == -1
    assert coin_change([5, 2], 5) == 1
    assert coin_change([1], 17) == 17


def test_coin_change_never_worse_with_more_coins():
    for amount in range(1, 40):
        fewer = coin_change([1, 3], amount)
        more = coin_change([1, 3, 4], amount)
        assert 0 < more <= fewer


def test_coin_change_invalid_input():
    with pytest.raises(ValueError):
        coin_change([1, 2], -1)
    with pytest.raises(ValueError):
        coin_change([-1, 2], 3)