"""Tests for geometric rank sampling."""

import unittest
from collections import Counter

import numpy as np

from zip_trees.rank_utils import DEFAULT_P, RankSampler, geom_sample


class TestRankSampler(unittest.TestCase):

    def test_same_seed_same_ranks(self):
        a = RankSampler(seed=7)
        b = RankSampler(seed=7)
        self.assertEqual([a.sample() for _ in range(100)], [b.sample() for _ in range(100)])

    def test_different_seeds_differ(self):
        a = RankSampler(seed=1).sample_many(200)
        b = RankSampler(seed=2).sample_many(200)
        self.assertNotEqual(a, b)

    def test_reseed_restarts_stream(self):
        sampler = RankSampler(seed=3)
        first = [sampler.sample() for _ in range(30)]
        sampler.reseed(3)
        self.assertEqual([sampler.sample() for _ in range(30)], first)
        self.assertEqual(sampler.seed, 3)

    def test_ranks_are_non_negative_ints(self):
        sampler = RankSampler(seed=11)
        for rank in [sampler.sample() for _ in range(500)] + sampler.sample_many(500):
            self.assertIsInstance(rank, int)
            self.assertGreaterEqual(rank, 0)

    def test_geometric_half_distribution(self):
        ranks = RankSampler(seed=123).sample_many(20_000)
        self.assertAlmostEqual(float(np.mean(ranks)), 1.0, delta=0.05)
        counts = Counter(ranks)
        self.assertAlmostEqual(counts[0] / len(ranks), 0.5, delta=0.03)
        self.assertAlmostEqual(counts[1] / len(ranks), 0.25, delta=0.03)

    def test_scalar_draws_follow_distribution(self):
        sampler = RankSampler(seed=321)
        ranks = [sampler.sample() for _ in range(20_000)]
        self.assertAlmostEqual(sum(ranks) / len(ranks), 1.0, delta=0.05)

    def test_geom_sample_with_other_p(self):
        rng = np.random.default_rng(5)
        ranks = [geom_sample(rng, 0.75) for _ in range(20_000)]
        # mean number of heads before the first tail is p / (1 - p)
        self.assertAlmostEqual(sum(ranks) / len(ranks), 3.0, delta=0.15)

    def test_invalid_arguments(self):
        for p in (0.0, 1.0, -0.5, 2):
            with self.subTest(p=p), self.assertRaises(ValueError):
                RankSampler(p=p)
        with self.assertRaises(ValueError):
            RankSampler(seed=1).sample_many(-1)
        self.assertEqual(RankSampler(seed=1).sample_many(0), [])

    def test_defaults(self):
        sampler = RankSampler()
        self.assertIsNone(sampler.seed)
        self.assertEqual(sampler.p, DEFAULT_P)
        self.assertIn("RankSampler", repr(sampler))


if __name__ == "__main__":
    unittest.main()
