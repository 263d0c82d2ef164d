"""Binary search with a trace of each probe, and small comparison helpers."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence


@dataclass(frozen=True)
class Probe:
    """One step of a binary search.

    ``verdict`` is ``"less"`` when the target is below the middle value,
    ``"greater"`` when above, and ``"found"`` when equal.
    """

    left: int
    right: int
    mid: int
    verdict: str


@dataclass
class SearchTrace:
    """Every probe a search made and where the target was found, if anywhere."""

    probes: list[Probe] = field(default_factory=list)
    index: Optional[int] = None

    @property
    def found(self) -> bool:
        return self.index is not None


def binary_search(numbers: Sequence[int], target: int) -> SearchTrace:
    """Search the sorted ``numbers`` for ``target``, recording every probe."""
    trace = SearchTrace()
    left, right = 0, len(numbers) - 1
    while left <= right:
        mid = (left + right) // 2
        value = numbers[mid]
        if target < value:
            trace.probes.append(Probe(left, right, mid, "less"))
            right = mid - 1
        elif target > value:
            trace.probes.append(Probe(left, right, mid, "greater"))
            left = mid + 1
        else:
            trace.probes.append(Probe(left, right, mid, "found"))
            trace.index = mid
            break
    return trace


def sorted_contains(values: Iterable[int], target: int) -> bool:
    """Sort ``values`` and report whether ``target`` is among them."""
    ordered = sorted(values)
    pos = bisect_left(ordered, target)
    return pos < len(ordered) and ordered[pos] == target


def compare_strings(a: str, b: str) -> int:
    """Order strings by length, then character by character; return -1, 0 or 1."""
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    for ca, cb in zip(a, b):
        if ca != cb:
            return 1 if ca > cb else -1
    return 0