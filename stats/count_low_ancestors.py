"""Average number of low and high ancestors on zip-tree search paths.

For each search key, builds ``repetitions`` random trees from a shuffled
permutation of ``range(size)``, counts the ancestors with rank at most ``k``
on the search path and reports the averages.

Run from the repository root::

    python -m stats.count_low_ancestors --size 100000 --repetitions 1000 --k 1
"""

import argparse
import logging
import random
import time
from typing import List, Tuple

import numpy as np
from tqdm import tqdm

from stats.config import ExperimentConfig, configure_logging
from zip_trees.ancestors import DEFAULT_THRESHOLD, AncestorCounter
from zip_trees.rank_utils import RankSampler

logger = logging.getLogger(__name__)


def shuffled_keys(size: int, rng: random.Random) -> List[int]:
    """A random permutation of ``0 .. size - 1``."""
    keys = list(range(size))
    rng.shuffle(keys)
    return keys


def average_ancestors(
    size: int,
    repetitions: int,
    search_keys: List[int],
    k: int = DEFAULT_THRESHOLD,
    seed=None,
) -> Tuple[float, float]:
    """
    Average low and high ancestor counts over all ``search_keys`` and repetitions.

    Every search key gets its own set of ``repetitions`` fresh trees.
    """
    if any(not 0 <= key < size for key in search_keys):
        raise ValueError(f"search keys must lie in [0, {size}), got {search_keys}")

    py_rng = random.Random(seed)
    sampler = RankSampler(seed)

    low_per_key = []
    high_per_key = []
    for search_key in tqdm(search_keys, desc="Search keys"):
        lows = np.empty(repetitions)
        highs = np.empty(repetitions)
        for i in tqdm(range(repetitions), desc=f"key={search_key}", leave=False):
            tree = AncestorCounter(sampler, threshold=k)
            for key in shuffled_keys(size, py_rng):
                tree.insert(key)
            result = tree.count_ancestors(search_key)
            lows[i] = result.low
            highs[i] = result.high
        low_per_key.append(lows.mean())
        high_per_key.append(highs.mean())
        logger.debug("key=%d: low=%.4f high=%.4f", search_key, low_per_key[-1], high_per_key[-1])

    return float(np.mean(low_per_key)), float(np.mean(high_per_key))


if __name__ == "__main__":
    defaults = ExperimentConfig.from_env()

    parser = argparse.ArgumentParser(description="Count low/high ancestors in random zip-trees.")
    parser.add_argument("--size", type=int, default=100_000, help="Number of keys per tree.")
    parser.add_argument("--repetitions", type=int, default=defaults.repetitions, help="Trees per search key.")
    parser.add_argument("--k", type=int, default=DEFAULT_THRESHOLD, help="Rank threshold for counted ancestors.")
    parser.add_argument("--first-key", type=int, default=9000, help="First search key.")
    parser.add_argument("--key-step", type=int, default=10_000, help="Distance between search keys.")
    parser.add_argument("--num-keys", type=int, default=9, help="Number of search keys.")
    parser.add_argument("--seed", type=int, default=defaults.seed, help="Random seed for reproducibility.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=defaults.log_level,
        help="Set the logging level (default: INFO)",
    )
    args = parser.parse_args()

    configure_logging(args.log_level, "ancestor_logs")

    search_keys = [args.first_key + i * args.key_step for i in range(args.num_keys)]
    t0 = time.perf_counter()
    low, high = average_ancestors(args.size, args.repetitions, search_keys, k=args.k, seed=args.seed)

    logger.info(f"n = {args.size}; repetitions = {args.repetitions}; keys = {search_keys}")
    logger.info(f"Number of low ancestors:  {low:.4f}")
    logger.info(f"Number of high ancestors: {high:.4f}")
    logger.info(f"k: {args.k}")
    logger.info("Execution time: %.3f seconds", time.perf_counter() - t0)
