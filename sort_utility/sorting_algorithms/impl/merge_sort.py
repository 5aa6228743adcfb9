import logging
from collections.abc import Sequence
from typing import TypeVar

from ...comparators import Comparator
from ...errors import InvalidComparatorError
from ..SortingAlgorithm import SortingAlgorithm, SortType

T = TypeVar("T")

logger = logging.getLogger(__name__)


def merge_sort(array: Sequence[T], comparator: Comparator) -> list[T]:
    """Return a new list holding the elements of `array` ordered by `comparator`.

    `array` itself is never modified. Elements the comparator ranks as greater come first,
    and equal elements keep their relative order.
    """
    if not callable(comparator):
        raise InvalidComparatorError(comparator)

    def merge(left: list[T], right: list[T]) -> list[T]:
        result = []
        l = r = 0
        while l < len(left) and r < len(right):
            # ties take the left element
            if comparator(left[l], right[r]) < 0:
                result.append(right[r])
                r += 1
            else:
                result.append(left[l])
                l += 1
        result.extend(left[l:])
        result.extend(right[r:])
        return result

    def impl(arr: Sequence[T]) -> list[T]:
        if len(arr) <= 1:
            return list(arr)
        mid = len(arr) // 2
        return merge(impl(arr[:mid]), impl(arr[mid:]))

    logger.debug("merge sort on %d elements", len(array))
    return impl(list(array))


algorithm = SortingAlgorithm("merge sort", SortType.MERGE_SORT, merge_sort)
