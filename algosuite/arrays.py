"""Array problems: sums, intervals, in-place rearrangements and searches."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import accumulate
from operator import xor


def _three_sum_pairs(nums: list[int], start: int, skip_duplicates: bool):
    """Yield triplets starting with ``nums[start - 1]`` using two pointers."""
    target = -nums[start - 1]
    left, right = start, len(nums) - 1
    while left < right:
        pair = nums[left] + nums[right]
        if pair > target:
            right -= 1
        elif pair < target:
            left += 1
        else:
            yield [nums[start - 1], nums[left], nums[right]]
            if skip_duplicates:
                while left + 1 < right and nums[left + 1] == nums[left]:
                    left += 1
                while right - 1 > left and nums[right - 1] == nums[right]:
                    right -= 1
            left += 1


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct sorted triplet summing to zero, skipping duplicates as it scans."""
    ordered = sorted(nums)
    result: list[list[int]] = []
    for i, num in enumerate(ordered):
        if i > 0 and num == ordered[i - 1]:
            continue
        result.extend(_three_sum_pairs(ordered, i + 1, skip_duplicates=True))
    return result


def three_sum_with_set(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct sorted triplet summing to zero, removing repeats with a set."""
    ordered = sorted(nums)
    seen: set[tuple[int, int, int]] = set()
    result: list[list[int]] = []
    for i in range(len(ordered)):
        for triplet in _three_sum_pairs(ordered, i + 1, skip_duplicates=False):
            key = tuple(triplet)
            if key not in seen:
                seen.add(key)
                result.append(triplet)
    return result


def max_sub_array(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane's method)."""
    if not nums:
        raise ValueError("nums must not be empty")
    running = 0
    best = nums[0]
    for num in nums:
        running = max(running + num, num)
        best = max(best, running)
    return best


def max_sub_array_quadratic(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run by trying every start."""
    if not nums:
        raise ValueError("nums must not be empty")
    return max(
        total for start in range(len(nums)) for total in accumulate(nums[start:])
    )


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching intervals, ordered by start."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals, key=lambda interval: interval[0]):
        if merged and merged[-1][1] >= start:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass."""
    low, i, high = 0, 0, len(nums) - 1
    while i <= high:
        if nums[i] == 0:
            nums[i], nums[low] = nums[low], nums[i]
            low += 1
            i += 1
        elif nums[i] == 2:
            nums[i], nums[high] = nums[high], nums[i]
            high -= 1
        else:
            i += 1


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other appears twice."""
    return reduce(xor, nums, 0)


def majority_element(nums: Iterable[int]) -> int:
    """Return the majority value by pairing off different values."""
    candidate = 0
    count = 0
    for num in nums:
        if count == 0 or candidate == num:
            candidate = num
            count += 1
        else:
            count -= 1
    if count == 0:
        raise ValueError("no value is left unpaired")
    return candidate


def _check_rotation(k: int) -> None:
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")


def rotate(nums: list[int], k: int) -> None:
    """Rotate the list right by ``k`` steps in place, building the result in a copy."""
    _check_rotation(k)
    if len(nums) <= 1 or k == 0:
        return
    k %= len(nums)
    nums[:] = nums[len(nums) - k:] + nums[: len(nums) - k]


def rotate_in_place(nums: list[int], k: int) -> None:
    """Rotate the list right by ``k`` steps, shifting one step at a time."""
    _check_rotation(k)
    if len(nums) <= 1 or k == 0:
        return
    for _ in range(k % len(nums)):
        nums.insert(0, nums.pop())


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or where it would be inserted."""
    return bisect_left(nums, target)


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of two values adding up to ``target``, or an empty list."""
    seen: dict[int, int] = {}
    for i, num in enumerate(nums):
        if target - num in seen:
            return [seen[target - num], i]
        seen.setdefault(num, i)
    return []


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of one another."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the k-th largest value (1-based), counting repeats."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    return heapq.nlargest(k, nums)[-1]


def can_jump(nums: Sequence[int]) -> bool:
    """Tell whether the last index can be reached from the first."""
    goal = len(nums) - 1
    for i in reversed(range(goal)):
        if nums[i] >= goal - i:
            goal = i
    return goal == 0


def max_area(height: Sequence[int]) -> int:
    """Return the most water two of the lines can hold between them."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def move_zeroes(nums: list[int]) -> None:
    """Move zeros to the end in place, keeping the order of the other values."""
    left = 0
    for right in range(len(nums)):
        if nums[right]:
            nums[left], nums[right] = nums[right], nums[left]
            left += 1


def move_zeroes_bubble(nums: list[int]) -> None:
    """Move zeros to the end in place by pushing each one to the back in turn."""
    for _ in range(nums.count(0)):
        nums.remove(0)
        nums.append(0)