import argparse
import logging
from collections.abc import Sequence
from decimal import Decimal
from itertools import product
from math import log2, nan
from multiprocessing import Pool
from pathlib import Path
from random import Random
from time import thread_time
from typing import Optional

import numpy as np
import pandas as pd
import plotly.express as px
from tqdm import tqdm

from .comparators import CountingComparator, by_popularity
from .Config import *
from .errors import InvalidSortingAlgorithmError
from .Series import Series
from .sorting_algorithms.sorting_algorithms import sorting_algorithms
from .sorting_algorithms.SortingAlgorithm import SortingAlgorithm

logger = logging.getLogger(__name__)

COLUMNS = ("name", "N", "input", "lower bound", "best", "worst", "avg", "ratio", "ms")


def to_displayable_int(x: int) -> str:
    return str(x) if x < 1e9 else f"{Decimal(x):.2e}"


def get_operation_cnt(sorting_algorithm: SortingAlgorithm, N: int) -> tuple[float, float, float, float]:
    """Run `sorting_algorithm` over inputs of size `N` and return (best, worst, avg, avg_ms).

    best/worst/avg are comparator call counts, `nan` for algorithms that don't take a comparator.
    Every permutation is tried up to `max_N`, past that random samples are drawn for `MAX_SAMPLE_TIME_MS`.
    """
    cmp = CountingComparator(by_popularity)
    do_sample = N > sorting_algorithm.max_N
    r = Random(SAMPLE_SEED)
    operation_cnts = []
    elapsed = 0.0
    start_time = thread_time()
    for val_array in sorting_algorithm.sampler(N, r) if do_sample else sorting_algorithm.generator(N):
        array = [Series(f"#{i}", val) for i, val in enumerate(val_array)]
        cmp.reset()
        t = thread_time()
        result = sorting_algorithm.func(array, cmp)
        elapsed += thread_time() - t
        if len(result) != N or not sorting_algorithm.validator([x.popularity for x in result]):
            raise InvalidSortingAlgorithmError(sorting_algorithm.name)
        operation_cnts.append(cmp.cnt)
        if do_sample and int((thread_time() - start_time) * 1000) > MAX_SAMPLE_TIME_MS:
            break

    data = np.array(operation_cnts, dtype=np.int64)
    avg_ms = elapsed * 1000 / len(data)
    if not sorting_algorithm.comparator_based:
        return nan, nan, nan, avg_ms
    return int(data.min()), int(data.max()), float(data.mean()), avg_ms


def _work(args: tuple[int, int]) -> str:
    sorting_algorithm_idx, N = args
    sorting_algorithm = sorting_algorithms[sorting_algorithm_idx]
    best, worst, avg, avg_ms = get_operation_cnt(sorting_algorithm, N)
    input_total = sorting_algorithm.input_total(N)
    lower_bound = log2(input_total)
    ratio = nan if not lower_bound else avg / lower_bound
    return ",".join(map(str, (sorting_algorithm.name, N, to_displayable_int(input_total), lower_bound, best, worst, avg, ratio, avg_ms)))


def generate_statistics(Ns: Sequence[int] = STATISTICS_NS, result_path: Path = RESULT_PATH, processes: Optional[int] = None) -> None:
    tasks = list(product(range(len(sorting_algorithms)), Ns))
    logger.info("running %d tasks for %d sorting algorithms", len(tasks), len(sorting_algorithms))
    result_path.parent.mkdir(parents=True, exist_ok=True)
    with Pool(processes) as pool, open(result_path, "w") as f:
        f.write(",".join(COLUMNS) + "\n")
        for result in tqdm(pool.imap_unordered(_work, tasks), total=len(tasks)):
            f.write(result + "\n")
            f.flush()
    logger.info("statistics written to %s", result_path)


def split_path(result_path: Path, name: str) -> Path:
    return result_path.with_name(f"{result_path.stem}_{name.replace(' ', '_')}{result_path.suffix}")


def sort_result(result_path: Path = RESULT_PATH) -> pd.DataFrame:
    """Rewrite `result_path` ordered by algorithm and N, plus one `<stem>_<algorithm>.csv` per algorithm."""
    df = pd.read_csv(result_path).sort_values(["name", "N"], ignore_index=True)
    df.to_csv(result_path, index=False)
    for name, rows in df.groupby("name", sort=False):
        path = split_path(result_path, name)
        rows.drop(columns="name").to_csv(path, index=False)
        logger.debug("%d rows of %s written to %s", len(rows), name, path)
    return df


def plot_result(result_path: Path = RESULT_PATH) -> Path:
    df = pd.read_csv(result_path).dropna(subset=["avg"])
    fig = px.line(df, x="N", y="avg", color="name", markers=True, title="Average Comparison Count", labels={"avg": "Comparison Count"})
    html_path = result_path.with_suffix(".html")
    fig.write_html(html_path)
    logger.info("plot written to %s", html_path)
    return html_path


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Count comparisons and time each sorting algorithm over a range of input sizes.")
    parser.add_argument("--result", type=Path, default=RESULT_PATH, help="CSV file to write")
    parser.add_argument("--processes", type=int, default=None, help="worker processes (default: CPU count)")
    parser.add_argument("--plot", action="store_true", help="also write an HTML line chart next to the CSV")
    args = parser.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    generate_statistics(result_path=args.result, processes=args.processes)
    sort_result(args.result)
    if args.plot:
        plot_result(args.result)


if __name__ == "__main__":
    main()
