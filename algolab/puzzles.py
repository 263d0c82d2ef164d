"""Small counting and brute-force puzzles."""

from __future__ import annotations

from itertools import combinations
from math import comb
from typing import Iterable, Sequence

GRADE_POINTS = {
    "A+": 4.5,
    "A0": 4.0,
    "B+": 3.5,
    "B0": 3.0,
    "C+": 2.5,
    "C0": 2.0,
    "D+": 1.5,
    "D0": 1.0,
    "F": 0.0,
}
PASS_GRADE = "P"

FULL_CHESS_SET = (1, 1, 2, 2, 2, 8)
"""King, queen, rooks, bishops, knights and pawns of one side."""


def is_palindrome(word: str) -> bool:
    """True when ``word`` reads the same backwards."""
    return word == word[::-1]


def _digit_sum(number: int) -> int:
    return sum(int(digit) for digit in str(number))


def smallest_generator(n: int) -> int:
    """Smallest ``m`` with ``m + digit_sum(m) == n``, or 0 when there is none."""
    return next(
        (m for m in range(1, n) if m + _digit_sum(m) == n),
        0,
    )


def diamond(n: int) -> str:
    """A diamond of stars ``2n - 1`` rows tall, one newline after each row."""
    if n < 1:
        raise ValueError("n must be at least 1")
    rows = []
    for row in range(1, 2 * n):
        indent = abs(n - row)
        rows.append(" " * indent + "*" * (2 * n - 1 - 2 * indent) + "\n")
    return "".join(rows)


def gpa(lines: Iterable[str]) -> float:
    """Credit-weighted grade average of ``subject credit grade`` lines.

    Courses graded ``P`` are left out of the average.
    """
    total_score = 0.0
    total_credits = 0.0
    for line in lines:
        parts = line.split()
        if len(parts) != 3:
            raise ValueError(f"expected 'subject credit grade', got {line!r}")
        _, credit_text, grade = parts
        if grade == PASS_GRADE:
            continue
        if grade not in GRADE_POINTS:
            raise ValueError(f"unknown grade {grade!r}")
        credit = float(credit_text)
        total_score += credit * GRADE_POINTS[grade]
        total_credits += credit
    if total_credits == 0:
        raise ValueError("no graded credits")
    return total_score / total_credits


def best_card_sum(cards: Sequence[int], limit: int) -> int:
    """Largest sum of three different cards not above ``limit``; 0 if none fits."""
    return max(
        (sum(trio) for trio in combinations(cards, 3) if sum(trio) <= limit),
        default=0,
    )


def missing_chess_pieces(counts: Sequence[int]) -> list[int]:
    """How many of each piece to add (negative: remove) for a complete set."""
    if len(counts) != len(FULL_CHESS_SET):
        raise ValueError(f"expected {len(FULL_CHESS_SET)} counts")
    return [full - have for full, have in zip(FULL_CHESS_SET, counts)]


def box_floors(n: int, width: int, number: int) -> int:
    """Boxes to lift to take out box ``number`` from a zigzag stack of ``n``.

    Boxes are stacked ``width`` per row, each row running the opposite way
    to the one below; the count includes the box itself.
    """
    if width < 1:
        raise ValueError("width must be at least 1")
    if not 1 <= number <= n:
        raise ValueError(f"box number must be between 1 and {n}")
    floors = 0
    while number <= n:
        floors += 1
        number += (width - 1 - (width + number - 1) % width) * 2 + 1
    return floors


def binomial(n: int, k: int) -> int:
    """Number of ways to choose ``k`` items out of ``n``."""
    if n < 0 or not 0 <= k <= n:
        raise ValueError("need 0 <= k <= n")
    return comb(n, k)