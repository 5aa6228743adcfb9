from collections.abc import Callable, Generator, Iterable, Sequence
from enum import Enum
from itertools import permutations
from math import factorial
from random import Random
from typing import NamedTuple, Optional

from ..comparators import Comparator
from ..Config import MAX_N


class SortType(Enum):
    MERGE_SORT = 0
    QUICKSORT = 1
    BUCKET_SORT = 2


def _sampler(N: int, r: Optional[Random] = None) -> Generator[list[int], None, None]:
    r = Random() if r is None else r
    arr = list(range(N))
    while True:
        r.shuffle(arr)
        yield arr


class SortingAlgorithm(NamedTuple):
    name: str
    sort_type: SortType
    func: Callable[[list, Optional[Comparator]], list]
    in_place: bool = False
    comparator_based: bool = True
    max_N: int = MAX_N
    generator: Callable[[int], Iterable[Sequence[int]]] = lambda n: permutations(range(n))
    input_total: Callable[[int], int] = factorial
    sampler: Callable[[int, Optional[Random]], Generator[Sequence[int], None, None]] = _sampler
    validator: Callable[[Iterable[int]], bool] = lambda arr: all(i == v for i, v in enumerate(reversed(list(arr))))
