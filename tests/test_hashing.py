from collections import Counter

import pytest

from dsakit.hashing import (
    count_distinct_integers,
    find_even_numbers,
    is_anagram,
    maximum_string_pairs,
    reverse_digits,
    two_sum,
    unique_occurrences,
)


@pytest.mark.parametrize(
    "s, t, expected",
    [
        ("anagram", "nagaram", True),
        ("rat", "car", False),
        ("ab", "abc", False),
        ("", "", True),
        ("aab", "abb", False),
    ],
)
def test_is_anagram(s, t, expected):
    assert is_anagram(s, t) is expected


def test_is_anagram_symmetric():
    assert is_anagram("listen", "silent") == is_anagram("silent", "listen")


def test_two_sum_indices_add_up():
    nums = [2, 7, 11, 15]
    result = two_sum(nums, 9)
    assert len(result) == 2
    i, j = result
    assert i < j
    assert nums[i] + nums[j] == 9


def test_two_sum_no_pair():
    assert two_sum([1, 2, 3], 100) == []


def test_two_sum_every_pair_is_valid():
    nums = [1, 4, 1, 4, 3]
    result = two_sum(nums, 5)
    assert len(result) % 2 == 0
    for i, j in zip(result[::2], result[1::2]):
        assert i < j
        assert nums[i] + nums[j] == 5


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 2, 1, 1, 3], True),
        ([1, 2], False),
        ([], True),
    ],
)
def test_unique_occurrences(values, expected):
    assert unique_occurrences(values) is expected


def test_find_even_numbers_properties():
    digits = [2, 1, 3, 0]
    result = find_even_numbers(digits)
    assert result == sorted(result)
    assert len(set(result)) == len(result)
    available = Counter(digits)
    for number in result:
        assert 100 <= number <= 999
        assert number % 2 == 0
        used = Counter(int(ch) for ch in str(number))
        assert all(available[d] >= c for d, c in used.items())
    assert 102 in result
    assert 320 in result


def test_find_even_numbers_respects_multiplicity():
    result = find_even_numbers([2, 2, 8, 8, 2])
    assert 222 in result
    assert 888 not in result


def test_find_even_numbers_no_even_digit():
    assert find_even_numbers([1, 3, 5]) == []


@pytest.mark.parametrize("n", [1, 12, 13, 14, 123456, 907])
def test_reverse_digits_round_trip(n):
    assert reverse_digits(reverse_digits(n)) == n


def test_reverse_digits_non_positive():
    assert reverse_digits(0) == 0
    assert reverse_digits(-12) == 0


def test_reverse_digits_drops_trailing_zero():
    assert reverse_digits(10) == reverse_digits(1)


def test_count_distinct_integers_source_example():
    assert count_distinct_integers([1, 12, 13, 10, 14, 7]) == 9


def test_count_distinct_integers_does_not_mutate():
    nums = [12, 21]
    count_distinct_integers(nums)
    assert nums == [12, 21]
    assert count_distinct_integers(nums) == len(set(nums))


def test_maximum_string_pairs():
    assert maximum_string_pairs(["cd", "ac", "dc", "ca", "zz"]) == 2


def test_maximum_string_pairs_none():
    assert maximum_string_pairs(["ab", "cd", "ef"]) == 0
    assert maximum_string_pairs([]) == 0