"""Recursive bucket sort over `popularity`, always with two buckets.

It is not optimized and serves as a reference only.
"""
import logging
from collections.abc import Sequence
from typing import Optional, TypeVar

from ...comparators import Comparator
from ...Series import RankedRecord
from ..SortingAlgorithm import SortingAlgorithm, SortType

R = TypeVar("R", bound=RankedRecord)

logger = logging.getLogger(__name__)


def bucket_sort(array: Sequence[R]) -> list[R]:
    """Return a new list holding the records of `array` from most to least popular."""

    def impl(arr: list[R]) -> list[R]:
        if len(arr) == 2:
            if arr[1].popularity > arr[0].popularity:
                arr[0], arr[1] = arr[1], arr[0]
            return arr
        if len(arr) < 2:
            return arr

        min_popularity = max_popularity = arr[0].popularity
        for record in arr:
            if record.popularity < min_popularity:
                min_popularity = record.popularity
            if record.popularity > max_popularity:
                max_popularity = record.popularity

        # at most two distinct values, there is no middle value to split on
        if min_popularity + 1 >= max_popularity:
            if min_popularity == max_popularity:
                return arr
            arr[:] = [x for x in arr if x.popularity != min_popularity] + [x for x in arr if x.popularity == min_popularity]
            return arr

        mid_popularity = (min_popularity + max_popularity) // 2
        first_bucket: list[R] = []
        second_bucket: list[R] = []
        for record in arr:
            if record.popularity > mid_popularity:
                first_bucket.append(record)
            else:
                second_bucket.append(record)

        first_bucket = impl(first_bucket)
        first_bucket.extend(impl(second_bucket))
        return first_bucket

    logger.debug("bucket sort on %d records", len(array))
    return impl(list(array))


def _bucket_sort(arr: list, _: Optional[Comparator] = None) -> list:
    return bucket_sort(arr)


algorithm = SortingAlgorithm("bucket sort", SortType.BUCKET_SORT, _bucket_sort, comparator_based=False)
