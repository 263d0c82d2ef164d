"""Sorting exercises: records, points, words and plain number lists."""

from __future__ import annotations

from typing import Iterable

COUNTING_MIN = 1
COUNTING_MAX = 10000


def sort_members_by_age(members: Iterable[tuple[int, str]]) -> list[tuple[int, str]]:
    """Order ``(age, name)`` pairs by age, keeping sign-up order among equal ages."""
    return sorted(members, key=lambda member: member[0])


def counting_sort(numbers: Iterable[int]) -> list[int]:
    """Sort values between 1 and 10000 by counting how often each occurs."""
    counts = [0] * (COUNTING_MAX + 1)
    for number in numbers:
        if not COUNTING_MIN <= number <= COUNTING_MAX:
            raise ValueError(
                f"{number} is outside {COUNTING_MIN}..{COUNTING_MAX}"
            )
        counts[number] += 1
    return [
        value
        for value, times in enumerate(counts)
        if times
        for _ in range(times)
    ]


def sort_points(points: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Order ``(x, y)`` points by x, then by y."""
    return sorted(points, key=lambda point: (point[0], point[1]))


def sort_points_by_y(points: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Order ``(x, y)`` points by y, then by x."""
    return sorted(points, key=lambda point: (point[1], point[0]))


def sort_words(words: Iterable[str]) -> list[str]:
    """Drop duplicates and order words by length, then alphabetically."""
    return sorted(set(words), key=lambda word: (len(word), word))


def kth_largest(scores: Iterable[int], k: int) -> int:
    """The ``k``-th highest score, counting from 1."""
    ordered = sorted(scores, reverse=True)
    if not 1 <= k <= len(ordered):
        raise ValueError(f"k must be between 1 and {len(ordered)}")
    return ordered[k - 1]


def mean_and_median(values: Iterable[int]) -> tuple[int, int]:
    """Integer mean (truncated toward zero) and the middle value after sorting."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("need at least one value")
    total = sum(ordered)
    count = len(ordered)
    mean = abs(total) // count
    if total < 0:
        mean = -mean
    return mean, ordered[count // 2]


def unique_sorted(values: Iterable[int]) -> list[int]:
    """Distinct values in ascending order."""
    return sorted(set(values))


def sorted_numbers(values: Iterable[int]) -> list[int]:
    """All values in ascending order, duplicates kept."""
    return sorted(values)