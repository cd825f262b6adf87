"""
Height benchmark for the balanced tree.

For every requested size the benchmark builds a tree, records its height next to the AVL bound and the time spent
inserting, then removes half of the keys and checks the tree is still ordered and balanced. The growth of the height
is fitted against log2(n + 2); for an AVL tree the slope stays below 1.44.

Usage:
    # Random keys, default sizes
    balancedtree-benchmark

    # Sequential keys (the worst case for an unbalanced tree) with a CSV report
    balancedtree-benchmark --sizes 1024 4096 16384 --sequential --output heights.csv
"""

import argparse
import csv
import logging
import math
import random
import time
from dataclasses import asdict, dataclass, fields
from typing import List, Optional, Sequence

from scipy.stats import linregress

from balancedtree.tree import BalancedTree, Helper

logger = logging.getLogger(__name__)

DEFAULT_SIZES = [16, 64, 256, 1024, 4096]


@dataclass
class HeightSample:
    """Measurements taken on one tree."""
    num_data: int
    height: int
    bound: int
    insert_time: float
    remove_time: float


def run_height_benchmark(sizes: Sequence[int], seed: Optional[int] = None,
                         sequential: bool = False) -> List[HeightSample]:
    """
    Build one tree per size and measure it.

    :param sizes: number of keys of each tree.
    :param seed: seed of the random key generator.
    :param sequential: insert 0, 1, ..., n - 1 instead of shuffled keys.
    :return: one HeightSample per size.
    """
    rng = random.Random(seed)
    samples = []

    for num_data in sizes:
        if num_data < 0:
            raise ValueError("Tree sizes must be non-negative.")

        keys = list(range(num_data)) if sequential else rng.sample(range(num_data * 10), num_data)

        start = time.perf_counter()
        tree = BalancedTree(keys)
        insert_time = time.perf_counter() - start

        sample_height = tree.height
        bound = Helper.max_avl_height(num_data)
        if sample_height > bound:
            raise RuntimeError(f"A tree of {num_data} keys reached height {sample_height}, above the bound {bound}.")

        # Remove every other key and check the tree survived.
        start = time.perf_counter()
        for key in keys[::2]:
            tree.remove(key=key)
        remove_time = time.perf_counter() - start

        if len(tree) != num_data - len(keys[::2]):
            raise RuntimeError(f"The tree holds {len(tree)} keys after removal, expected {num_data - len(keys[::2])}.")
        if not (Helper.is_bst(tree.root) and Helper.is_balanced(tree.root)):
            raise RuntimeError(f"The tree of {num_data} keys is no longer balanced after removal.")

        logger.info("n=%d height=%d bound=%d insert=%.4fs remove=%.4fs",
                    num_data, sample_height, bound, insert_time, remove_time)
        samples.append(HeightSample(
            num_data=num_data, height=sample_height, bound=bound, insert_time=insert_time, remove_time=remove_time
        ))

    return samples


def fit_height_growth(samples: Sequence[HeightSample]) -> float:
    """
    Fit height = a * log2(n + 2) + b over the samples.

    :param samples: the benchmark results.
    :return: the slope a.
    """
    if len({sample.num_data for sample in samples}) < 2:
        raise ValueError("At least two distinct tree sizes are required to fit the height growth.")

    result = linregress(
        [math.log(sample.num_data + 2, 2) for sample in samples],
        [sample.height for sample in samples]
    )
    return float(result.slope)


def write_csv(samples: Sequence[HeightSample], path: str) -> None:
    """Write the samples to a CSV file with one header row."""
    with open(path, "w", newline="") as file:
        writer = csv.DictWriter(file, fieldnames=[field.name for field in fields(HeightSample)])
        writer.writeheader()
        for sample in samples:
            writer.writerow(asdict(sample))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Measure the height of balanced trees of increasing size")
    parser.add_argument("--sizes", type=int, nargs="+", default=DEFAULT_SIZES,
                        help="Number of keys of each tree (default: 16 64 256 1024 4096)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducibility")
    parser.add_argument("--sequential", action="store_true",
                        help="Insert the keys in ascending order instead of shuffled")
    parser.add_argument("--output", type=str, default=None,
                        help="Output file for results (CSV format)")
    parser.add_argument("--verbose", action="store_true",
                        help="Log every rotation")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    samples = run_height_benchmark(sizes=args.sizes, seed=args.seed, sequential=args.sequential)

    print(f"{'n':>10} {'height':>8} {'bound':>8} {'insert (s)':>12} {'remove (s)':>12}")
    for sample in samples:
        print(f"{sample.num_data:>10} {sample.height:>8} {sample.bound:>8} "
              f"{sample.insert_time:>12.4f} {sample.remove_time:>12.4f}")

    if len({sample.num_data for sample in samples}) >= 2:
        print(f"Height grows as {fit_height_growth(samples):.3f} * log2(n + 2)")

    if args.output:
        write_csv(samples, args.output)
        logger.info("Results written to %s", args.output)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
