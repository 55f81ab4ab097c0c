"""Height and search-cost statistics for the zip-tree variants.

Run from the repository root::

    python -m stats.stats_zip_tree --sizes 1000 10000 --repetitions 100
"""

import argparse
import logging
import math
import random
import time
from statistics import mean
from typing import Dict, List

import numpy as np
from tqdm import tqdm

from stats.config import ExperimentConfig, configure_logging
from zip_trees.base import ZipTreeBase
from zip_trees.factory import TREE_VARIANTS, create_zip_tree
from zip_trees.invariants import assert_tree_invariants_raise
from zip_trees.rank_utils import RankSampler
from zip_trees.tree_stats import tree_stats_

logger = logging.getLogger(__name__)


def random_zip_tree(variant: str, keys: List[int], sampler: RankSampler) -> ZipTreeBase:
    """Build a tree of the given variant by inserting ``keys`` in order."""
    tree = create_zip_tree(variant, sampler=sampler)
    tree_insert = tree.insert
    for key in keys:
        tree_insert(key)
    return tree


def repeated_experiment(
    size: int,
    repetitions: int,
    variants: List[str],
    seed=None,
    searches: int = 100,
) -> Dict[str, Dict[str, float]]:
    """
    Builds ``repetitions`` random trees of ``size`` shuffled distinct keys per variant.

    Every variant sees the same key permutations and rank seeds, so the
    heights of the baseline and the recursive variant are identical and the
    optimized variant is compared on equal terms. Returns the averages per
    variant and logs a summary table.
    """
    t_all_0 = time.perf_counter()
    py_rng = random.Random(seed)
    seed_seq = np.random.SeedSequence(seed)

    heights = {v: [] for v in variants}
    comparisons = {v: [] for v in variants}
    max_ranks = {v: [] for v in variants}
    build_times = {v: [] for v in variants}

    for child_seed in tqdm(seed_seq.spawn(repetitions), desc=f"n={size}", unit="tree", leave=False):
        keys = list(range(size))
        py_rng.shuffle(keys)
        probes = py_rng.sample(keys, k=min(searches, size))
        rank_seed = int(child_seed.generate_state(1)[0])

        for variant in variants:
            t0 = time.perf_counter()
            tree = random_zip_tree(variant, keys, RankSampler(rank_seed))
            build_times[variant].append(time.perf_counter() - t0)

            stats = tree_stats_(tree)
            assert_tree_invariants_raise(tree, stats)

            heights[variant].append(stats.height)
            max_ranks[variant].append(stats.rank)
            comparisons[variant].append(mean(tree.lookup(k).comparisons for k in probes))

    log_n = math.log2(size) if size > 1 else 1.0
    header = f"{'Variant':<12} {'Height':>10} {'(Var)':>10} {'H/log2(n)':>10} {'Cmp/search':>11} {'Max rank':>9} {'Build(s)':>10}"
    sep_line = "-" * len(header)
    logger.info(header)
    logger.info(sep_line)

    summary = {}
    for variant in variants:
        h = np.asarray(heights[variant], dtype=float)
        row = {
            "height": float(h.mean()),
            "height_var": float(h.var()),
            "height_amp": float(h.mean() / log_n),
            "comparisons": float(np.mean(comparisons[variant])),
            "max_rank": float(np.mean(max_ranks[variant])),
            "build_time": float(np.mean(build_times[variant])),
        }
        summary[variant] = row
        logger.info(
            f"{variant:<12} {row['height']:10.2f} {'(' + format(row['height_var'], '.2f') + ')':>10} "
            f"{row['height_amp']:10.3f} {row['comparisons']:11.2f} {row['max_rank']:9.2f} {row['build_time']:10.4f}"
        )

    logger.info(sep_line)
    logger.info("Execution time: %.3f seconds", time.perf_counter() - t_all_0)
    return summary


if __name__ == "__main__":
    defaults = ExperimentConfig.from_env()

    parser = argparse.ArgumentParser(description="Run height statistics experiments for zip-trees.")
    parser.add_argument("--sizes", type=int, nargs="+", default=defaults.sizes, help="List of tree sizes to test.")
    parser.add_argument(
        "--variants", nargs="+", choices=sorted(TREE_VARIANTS), default=defaults.variants, help="Tree variants to compare."
    )
    parser.add_argument("--repetitions", type=int, default=defaults.repetitions, help="Number of trees per size.")
    parser.add_argument("--seed", type=int, default=defaults.seed, help="Random seed for reproducibility.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=defaults.log_level,
        help="Set the logging level (default: INFO)",
    )
    args = parser.parse_args()

    config = ExperimentConfig(
        seed=args.seed,
        sizes=args.sizes,
        variants=args.variants,
        repetitions=args.repetitions,
        log_level=args.log_level,
    )
    configure_logging(config.log_level, "zip_tree_logs")

    for n in config.sizes:
        logger.info("")
        logger.info(
            f"---------------- NOW RUNNING EXPERIMENT: n = {n}, repetitions = {config.repetitions} ----------------"
        )
        repeated_experiment(size=n, repetitions=config.repetitions, variants=config.variants, seed=config.seed)
