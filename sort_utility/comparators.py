"""Comparators follow one convention: a positive result means the first argument sorts first."""
from collections.abc import Callable
from typing import Any

Comparator = Callable[[Any, Any], int]


def natural(a, b) -> int:
    return (a > b) - (a < b)


def by_popularity(a, b) -> int:
    return a.popularity - b.popularity


class CountingComparator:
    """Wraps a comparator and counts how many times it is called."""

    def __init__(self, comparator: Comparator) -> None:
        self.comparator = comparator
        self.cnt = 0

    def __call__(self, a, b) -> int:
        self.cnt += 1
        return self.comparator(a, b)

    def reset(self) -> None:
        self.cnt = 0

    __slots__ = ["comparator", "cnt"]
