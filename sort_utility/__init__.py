from .comparators import Comparator, CountingComparator, by_popularity, natural
from .errors import InvalidComparatorError, InvalidSortingAlgorithmError
from .Series import RankedRecord, Series
from .sorting_algorithms.impl.bucket_sort import bucket_sort
from .sorting_algorithms.impl.merge_sort import merge_sort
from .sorting_algorithms.impl.quick_sort import quick_sort
from .sorting_algorithms.SortingAlgorithm import SortingAlgorithm, SortType
from .sorting_algorithms.sorting_algorithms import get_sorting_algorithm, sort

__version__ = "1.0.0"
