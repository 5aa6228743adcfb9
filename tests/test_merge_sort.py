import sys
from collections import deque
from itertools import pairwise, permutations
from random import Random

import pytest

from sort_utility import InvalidComparatorError, by_popularity, merge_sort, natural


class TestMergeSort:
    def test_example(self):
        assert merge_sort([3, 1, 2], natural) == [3, 2, 1]

    def test_empty_and_single(self):
        assert merge_sort([], natural) == []
        assert merge_sort([7], natural) == [7]

    def test_returns_new_list(self):
        arr = [1]
        assert merge_sort(arr, natural) is not arr

    def test_does_not_mutate_input(self, rng):
        arr = [rng.randint(-50, 50) for _ in range(200)]
        original = list(arr)
        result = merge_sort(arr, natural)
        assert arr == original
        assert result == sorted(original, reverse=True)

    def test_accepts_tuple(self):
        assert merge_sort((2, 5, 1), natural) == [5, 2, 1]

    def test_all_permutations(self):
        for perm in permutations(range(6)):
            assert merge_sort(perm, natural) == [5, 4, 3, 2, 1, 0]

    def test_idempotent(self, rng):
        arr = merge_sort([rng.randint(0, 9) for _ in range(100)], natural)
        assert merge_sort(arr, natural) == arr

    def test_equal_elements_kept_in_order(self, make_series):
        records = make_series([1, 2, 1, 2, 1])
        result = merge_sort(records, by_popularity)
        assert [x.title for x in result] == ["#1", "#3", "#0", "#2", "#4"]

    def test_order_invariant(self, rng, make_series):
        records = make_series([rng.randint(0, 20) for _ in range(300)])
        result = merge_sort(records, by_popularity)
        assert all(by_popularity(a, b) >= 0 for a, b in pairwise(result))
        assert sorted(id(x) for x in result) == sorted(id(x) for x in records)

    def test_ascending_comparator(self):
        assert merge_sort([3, 1, 2], lambda a, b: b - a) == [1, 2, 3]

    @pytest.mark.parametrize("comparator", [None, 42])
    def test_invalid_comparator(self, comparator):
        with pytest.raises(InvalidComparatorError):
            merge_sort([2, 1], comparator)

    def test_deque(self):
        arr = deque([3, 1, 2])
        assert merge_sort(arr, natural) == [3, 2, 1]
        assert arr == deque([3, 1, 2])

    @pytest.mark.parametrize(
        "comparator",
        [lambda a, b: 1, lambda a, b: -1, lambda a, b, r=Random(7): r.choice((-1, 0, 1))],
        ids=["always first", "always second", "random"],
    )
    def test_inconsistent_comparator_keeps_elements(self, comparator, rng):
        arr = [rng.randint(0, 50) for _ in range(300)]
        result = merge_sort(arr, comparator)
        assert sorted(result) == sorted(arr)

    def test_always_first_comparator_keeps_input_order(self):
        assert merge_sort([1, 3, 2, 5], lambda a, b: 1) == [1, 3, 2, 5]

    def test_recursion_depth_is_logarithmic(self):
        # deeper than the interpreter's recursion limit if depth were linear
        n = 5 * sys.getrecursionlimit()
        assert merge_sort(range(n), natural) == list(range(n - 1, -1, -1))
