#!/usr/bin/env python3
"""
Unit tests for the PlushGen random source.

These tests verify seeding, the four sampling operations, state replay,
context-scoped defaults and independent per-worker sources.
"""

import unittest
from concurrent.futures import ThreadPoolExecutor

from plushgen import (
    RandomSource, InvalidArgument, get_random_source, set_random_source, using_random_source
)


class TestRandomSource(unittest.TestCase):
    """Test cases for RandomSource sampling."""

    def setUp(self):
        """Set up test fixtures."""
        self.rng = RandomSource(12345)

    def test_uniform_float_range(self):
        """Floats fall in [0, 1)."""
        for _ in range(1000):
            value = self.rng.uniform_float()
            self.assertIsInstance(value, float)
            self.assertGreaterEqual(value, 0.0)
            self.assertLess(value, 1.0)

    def test_uniform_int_range(self):
        """Integers fall in [0, n) and cover the range."""
        seen = set()
        for _ in range(500):
            value = self.rng.uniform_int(5)
            self.assertIsInstance(value, int)
            self.assertIn(value, range(5))
            seen.add(value)
        self.assertEqual(seen, set(range(5)))

    def test_uniform_int_rejects_non_integer_bound(self):
        """uniform_int(n) fails for float or bool bounds."""
        for n in (2.5, 3.0, True):
            with self.subTest(n=n):
                with self.assertRaises(InvalidArgument):
                    self.rng.uniform_int(n)

    def test_uniform_int_rejects_non_positive_bound(self):
        """uniform_int(n) fails for n <= 0."""
        for n in (0, -1):
            with self.subTest(n=n):
                with self.assertRaises(InvalidArgument):
                    self.rng.uniform_int(n)

    def test_choice(self):
        """choice returns an element of the sequence."""
        pool = ['a', 'b', 'c']
        for _ in range(100):
            self.assertIn(self.rng.choice(pool), pool)

    def test_choice_rejects_empty_sequence(self):
        """choice on an empty sequence fails with InvalidArgument."""
        with self.assertRaises(InvalidArgument):
            self.rng.choice([])
        # Also usable as a plain ValueError
        with self.assertRaises(ValueError):
            self.rng.choice(())

    def test_shuffle_returns_new_permutation(self):
        """shuffle leaves its input alone and returns a permutation."""
        original = list(range(20))
        data = list(original)
        shuffled = self.rng.shuffle(data)

        self.assertEqual(data, original)
        self.assertIsNot(shuffled, data)
        self.assertEqual(sorted(shuffled), original)

    def test_same_seed_same_sequence(self):
        """Two sources with the same seed produce the same draws."""
        a = RandomSource(7)
        b = RandomSource(7)
        draws_a = [a.uniform_float() for _ in range(10)] + [a.uniform_int(100) for _ in range(10)]
        draws_b = [b.uniform_float() for _ in range(10)] + [b.uniform_int(100) for _ in range(10)]
        self.assertEqual(draws_a, draws_b)

    def test_different_seeds_differ(self):
        """Different seeds give different sequences."""
        a = [RandomSource(1).uniform_float() for _ in range(5)]
        b = [RandomSource(2).uniform_float() for _ in range(5)]
        self.assertNotEqual(a, b)

    def test_state_replay(self):
        """Restoring a saved state replays the same draws."""
        state = self.rng.get_state()
        first = [self.rng.uniform_float() for _ in range(5)]
        self.rng.set_state(state)
        second = [self.rng.uniform_float() for _ in range(5)]
        self.assertEqual(first, second)


class TestSpawn(unittest.TestCase):
    """Test cases for deriving per-worker sources."""

    def test_spawn_is_reproducible(self):
        """A seeded parent spawns the same children every time."""
        children_a = RandomSource(99).spawn(3)
        children_b = RandomSource(99).spawn(3)
        for a, b in zip(children_a, children_b):
            self.assertEqual([a.uniform_float() for _ in range(5)],
                             [b.uniform_float() for _ in range(5)])

    def test_spawned_children_are_independent(self):
        """Sibling sources produce different streams."""
        children = RandomSource(99).spawn(4)
        streams = [tuple(c.uniform_float() for _ in range(5)) for c in children]
        self.assertEqual(len(set(streams)), 4)

    def test_spawn_rejects_zero(self):
        """spawn(0) fails with InvalidArgument."""
        with self.assertRaises(InvalidArgument):
            RandomSource(1).spawn(0)

    def test_parallel_workers_are_reproducible(self):
        """Workers with their own sources give the same results regardless of scheduling."""
        def work(source):
            return [source.uniform_int(1000) for _ in range(200)]

        def run():
            sources = RandomSource(2024).spawn(4)
            with ThreadPoolExecutor(max_workers=4) as pool:
                return list(pool.map(work, sources))

        self.assertEqual(run(), run())


class TestContextSource(unittest.TestCase):
    """Test cases for the context-scoped default source."""

    def test_default_is_stable_within_context(self):
        """get_random_source returns the same instance on repeated calls."""
        self.assertIs(get_random_source(), get_random_source())

    def test_using_random_source_restores_previous(self):
        """The scoped binding is undone on exit."""
        before = get_random_source()
        scoped = RandomSource(5)
        with using_random_source(scoped) as bound:
            self.assertIs(bound, scoped)
            self.assertIs(get_random_source(), scoped)
        self.assertIs(get_random_source(), before)

    def test_set_random_source(self):
        """set_random_source rebinds the context default."""
        before = get_random_source()
        replacement = RandomSource(6)
        try:
            set_random_source(replacement)
            self.assertIs(get_random_source(), replacement)
        finally:
            set_random_source(before)


if __name__ == '__main__':
    unittest.main()
