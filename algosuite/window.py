"""Sliding-window problems over strings and sequences."""

from __future__ import annotations

from bisect import bisect_left, insort
from collections import Counter
from collections.abc import Sequence


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest run of ``s`` with no repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for i, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = i
        best = max(best, i - start + 1)
    return best


def contains_nearby_almost_duplicate(
    nums: Sequence[int], index_diff: int, value_diff: int
) -> bool:
    """Tell whether two positions at most ``index_diff`` apart hold values at most
    ``value_diff`` apart."""
    if index_diff < 0:
        raise ValueError(f"index_diff must not be negative, got {index_diff}")
    if value_diff < 0:
        raise ValueError(f"value_diff must not be negative, got {value_diff}")
    window: list[int] = []
    for i, num in enumerate(nums):
        pos = bisect_left(window, num - value_diff)
        if pos < len(window) and window[pos] <= num + value_diff:
            return True
        insort(window, num)
        if i >= index_diff:
            del window[bisect_left(window, nums[i - index_diff])]
    return False


def find_anagrams(s: str, p: str) -> list[int]:
    """Return every start index of ``s`` where an anagram of ``p`` begins."""
    if not p:
        raise ValueError("p must not be empty")
    width = len(p)
    if width > len(s):
        return []
    wanted = Counter(p)
    window = Counter(s[:width])
    starts = [0] if window == wanted else []
    for left in range(len(s) - width):
        leaving, entering = s[left], s[left + width]
        window[leaving] -= 1
        if window[leaving] == 0:
            del window[leaving]
        window[entering] += 1
        if window == wanted:
            starts.append(left + 1)
    return starts