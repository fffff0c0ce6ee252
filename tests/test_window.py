import pytest

from algosuite.window import (
    contains_nearby_almost_duplicate,
    find_anagrams,
    length_of_longest_substring,
)


def test_longest_substring_worked_example():
    assert length_of_longest_substring("abcabcbb") == 3


def test_longest_substring_empty():
    assert length_of_longest_substring("") == 0


def test_longest_substring_all_distinct_is_whole_string():
    text = "abcdefg"
    assert length_of_longest_substring(text) == len(text)


def test_longest_substring_single_repeated_char():
    assert length_of_longest_substring("bbbbbb") == 1


@pytest.mark.parametrize("text", ["pwwkew", "dvdf", "abba", "tmmzuxt", "aab"])
def test_longest_substring_invariant(text):
    length = length_of_longest_substring(text)
    windows = [text[i:i + length] for i in range(len(text) - length + 1)]
    assert any(len(set(w)) == length for w in windows)
    longer = [text[i:i + length + 1] for i in range(len(text) - length)]
    assert all(len(set(w)) <= length for w in longer)


def test_nearby_duplicate_exact_repeat_within_reach():
    assert contains_nearby_almost_duplicate([1, 2, 3, 1], 3, 0) is True


def test_nearby_duplicate_repeat_out_of_reach():
    assert contains_nearby_almost_duplicate([1, 2, 3, 1], 2, 0) is False


def test_nearby_duplicate_value_gap_too_large():
    assert contains_nearby_almost_duplicate([1, 5, 9, 1, 5, 9], 2, 3) is False


def test_nearby_duplicate_value_gap_allowed():
    assert contains_nearby_almost_duplicate([1, 5, 9], 1, 4) is True


def test_nearby_duplicate_zero_index_diff_never_matches():
    assert contains_nearby_almost_duplicate([7, 7, 7], 0, 10) is False


def test_nearby_duplicate_handles_huge_values():
    big = 2**31 - 1
    assert contains_nearby_almost_duplicate([-big - 1, big], 1, big) is False
    assert contains_nearby_almost_duplicate([-big - 1, big], 1, 2 * big + 1) is True


def test_nearby_duplicate_empty():
    assert contains_nearby_almost_duplicate([], 5, 5) is False


@pytest.mark.parametrize("index_diff, value_diff", [(-1, 0), (1, -1)])
def test_nearby_duplicate_negative_limits_raise(index_diff, value_diff):
    with pytest.raises(ValueError):
        contains_nearby_almost_duplicate([1, 2], index_diff, value_diff)


def test_find_anagrams_worked_example():
    assert find_anagrams("cbaebabacd", "abc") == [0, 6]


def test_find_anagrams_every_match_is_an_anagram():
    s, p = "abab", "ab"
    starts = find_anagrams(s, p)
    assert starts == [i for i in range(len(s) - 1) if sorted(s[i:i + 2]) == sorted(p)]
    assert all(sorted(s[i:i + len(p)]) == sorted(p) for i in starts)


def test_find_anagrams_pattern_longer_than_text():
    assert find_anagrams("ab", "abc") == []


def test_find_anagrams_whole_text():
    assert find_anagrams("listen", "silent") == [0]


def test_find_anagrams_empty_pattern_raises():
    with pytest.raises(ValueError):
        find_anagrams("abc", "")