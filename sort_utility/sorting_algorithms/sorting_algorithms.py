from collections.abc import Iterable
from importlib import import_module
from pathlib import Path
from typing import Optional

from ..comparators import Comparator
from .SortingAlgorithm import SortingAlgorithm, SortType

sorting_algorithms: list[SortingAlgorithm] = []
for file in sorted((Path(__file__).parent / "impl").glob("*.py")):
    if file.stem.startswith("_"):
        continue
    module = import_module(f".{file.stem}", package=f"{__package__}.impl")
    sorting_algorithms.append(module.algorithm)
sorting_algorithms.sort(key=lambda x: x.sort_type.value)


def get_sorting_algorithm(sort_type: SortType) -> SortingAlgorithm:
    for sorting_algorithm in sorting_algorithms:
        if sorting_algorithm.sort_type is sort_type:
            return sorting_algorithm
    raise KeyError(sort_type)


def sort(array: Iterable, sort_type: SortType, comparator: Optional[Comparator] = None) -> list:
    """Return a new list with the elements of `array` ordered by the chosen algorithm.

    The caller's data is never mutated, not even for in-place algorithms: those run on a copy.
    Call `quick_sort` directly to sort a sequence in place.
    """
    sorting_algorithm = get_sorting_algorithm(sort_type)
    if sorting_algorithm.in_place or not isinstance(array, list):
        array = list(array)
    return sorting_algorithm.func(array, comparator)
