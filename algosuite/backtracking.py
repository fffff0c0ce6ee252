"""Backtracking problems: letter combinations, combination sums, permutations, subsets."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

_KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def letter_combinations(digits: str) -> list[str]:
    """Return every string the phone digits ``2``-``9`` can spell.

    For each digit, the combinations starting with its last letter come first,
    followed by the others grouped by the rest of the string.
    """
    for digit in digits:
        if digit not in _KEYPAD:
            raise ValueError(f"digit {digit!r} has no letters; use 2-9")
    if not digits:
        return []
    combos = list(_KEYPAD[digits[-1]])
    for digit in reversed(digits[:-1]):
        letters = _KEYPAD[digit]
        combos = [letters[-1] + rest for rest in combos] + [
            letter + rest for rest in combos for letter in letters[:-1]
        ]
    return combos


def _combinations(
    candidates: Sequence[int], target: int, start: int, chosen: tuple[int, ...]
) -> Iterator[list[int]]:
    if start >= len(candidates):
        return
    if target == 0:
        yield list(chosen)
        return
    yield from _combinations(candidates, target, start + 1, chosen)
    value = candidates[start]
    if target - value >= 0:
        yield from _combinations(candidates, target - value, start, chosen + (value,))


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return every non-decreasing combination of candidates (reusable) summing to ``target``."""
    ordered = sorted(candidates)
    if any(value <= 0 for value in ordered):
        raise ValueError("candidates must be positive")
    return list(_combinations(ordered, target, 0, ()))


def permute(nums: Iterable[int]) -> list[list[int]]:
    """Return every ordering of ``nums``, generated by swapping in place."""
    work = list(nums)
    result: list[list[int]] = []

    def place(left: int) -> None:
        if left >= len(work):
            result.append(list(work))
            return
        for i in range(left, len(work)):
            work[left], work[i] = work[i], work[left]
            place(left + 1)
            work[left], work[i] = work[i], work[left]

    place(0)
    return result


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return every subset of ``nums``, built up from the last value backwards."""
    result: list[list[int]] = [[]]
    for value in reversed(nums):
        result += [subset + [value] for subset in result]
    return result