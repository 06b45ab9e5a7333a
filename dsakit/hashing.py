"""Problems solved with hash maps and hash sets."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` uses exactly the same characters as ``s``."""
    if len(s) != len(t):
        return False
    return Counter(s) == Counter(t)


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return index pairs whose values add up to ``target``, flattened.

    Each pair is the earlier index followed by the later one.  Every later
    position that completes a pair contributes one pair, in order.
    """
    seen: dict[int, int] = {}
    found: list[int] = []
    for index, value in enumerate(nums):
        remainder = target - value
        if remainder in seen:
            found.extend((seen[remainder], index))
        else:
            seen[value] = index
    return found


def unique_occurrences(values: Iterable[int]) -> bool:
    """Tell whether every distinct value occurs a different number of times."""
    counts = Counter(values).values()
    return len(set(counts)) == len(counts)


def find_even_numbers(digits: Iterable[int]) -> list[int]:
    """Return, in increasing order, the even three-digit numbers the digits can form."""
    available = Counter(digits)
    result: list[int] = []
    for number in range(100, 1000, 2):
        needed = Counter(int(ch) for ch in str(number))
        if all(available[digit] >= count for digit, count in needed.items()):
            result.append(number)
    return result


def reverse_digits(n: int) -> int:
    """Return the digits of a positive ``n`` reversed; zero for anything else."""
    if n <= 0:
        return 0
    return int(str(n)[::-1])


def count_distinct_integers(nums: Iterable[int]) -> int:
    """Count distinct values among the numbers and their digit reversals."""
    distinct: set[int] = set()
    for value in nums:
        distinct.add(value)
        distinct.add(reverse_digits(value))
    return len(distinct)


def maximum_string_pairs(words: Iterable[str]) -> int:
    """Count pairs of positions i < j where ``words[j]`` is ``words[i]`` reversed."""
    reversed_before: Counter[str] = Counter()
    pairs = 0
    for word in words:
        pairs += reversed_before[word]
        reversed_before[word[::-1]] += 1
    return pairs