import logging
from collections.abc import MutableSequence
from typing import TypeVar

from ...comparators import Comparator
from ...errors import InvalidComparatorError
from ..SortingAlgorithm import SortingAlgorithm, SortType

T = TypeVar("T")

logger = logging.getLogger(__name__)


def quick_sort(array: MutableSequence[T], comparator: Comparator) -> None:
    """Sort `array` in place so that elements the comparator ranks as greater come first.

    The pivot is the middle element of each range. It is parked at the right end while both
    cursors sweep towards each other, then swapped into its final position.
    Equal elements end up in no particular order.
    """
    if not callable(comparator):
        raise InvalidComparatorError(comparator)

    def swap(a: int, b: int) -> None:
        if a != b:
            array[a], array[b] = array[b], array[a]

    def partition(i: int, j: int) -> int:
        pivot_idx = (i + j) // 2
        pivot = array[pivot_idx]
        swap(j, pivot_idx)
        l, r = i, j - 1

        if l == r:  # two elements
            if comparator(array[l], pivot) < 0:
                swap(l, j)
                return l
            return j

        while True:
            while l < j and comparator(array[l], pivot) > 0:
                l += 1
            while r > i and comparator(array[r], pivot) < 0:
                r -= 1
            if l >= r:
                break
            swap(l, r)
            l += 1
            r -= 1
        swap(l, j)
        return l

    def impl(i: int, j: int) -> None:
        if i < j:
            p = partition(i, j)
            impl(i, p - 1)
            impl(p + 1, j)

    logger.debug("quick sort on %d elements", len(array))
    impl(0, len(array) - 1)


def _quick_sort(arr: list, comparator: Comparator) -> list:
    quick_sort(arr, comparator)
    return arr


algorithm = SortingAlgorithm("quick sort", SortType.QUICKSORT, _quick_sort, in_place=True)
