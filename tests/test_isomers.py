# -*- coding: ascii -*-
"""
Tests for isomer classification and deduplication.

Expected counts come from an independent brute-force partition of all bit
strings into orbits of the 180 degree rotation, computed on plain strings
without the package's transform functions.
"""

import unittest
from itertools import product

from optisomer.configuration import MAX_CENTERS, Configuration, canonical_key
from optisomer.dedupe import ObservedSet
from optisomer.isomers import EnumConfig, QAStats, classify, enumerate_isomers, enumerate_with_stats
from optisomer.symmetry import canonical_partner, reverse


def _rotate(text):
    return ''.join('1' if ch == '0' else '0' for ch in reversed(text))


def _brute_force_orbits(n):
    orbits = set()
    for bits in product('01', repeat=n):
        text = ''.join(bits)
        orbits.add(frozenset((text, _rotate(text))))
    return orbits


def _keys(isomers):
    return [canonical_key(isomer.configuration) for isomer in isomers]


class TestSmallScenarios(unittest.TestCase):

    def test_one_center_collapses_to_one_isomer(self):
        isomers = list(enumerate_isomers(EnumConfig(centers=1)))
        self.assertEqual(len(isomers), 1)
        isomer = isomers[0]
        self.assertEqual(canonical_key(isomer.configuration), '0')
        self.assertEqual(canonical_key(isomer.partner), '1')
        self.assertEqual(canonical_key(isomer.inverted), '1')
        self.assertFalse(isomer.dyad)
        self.assertTrue(isomer.achiral)

    def test_two_centers(self):
        isomers = list(enumerate_isomers(EnumConfig(centers=2)))
        self.assertEqual(len(isomers), len(_brute_force_orbits(2)))
        self.assertEqual(_keys(isomers), ['00', '10', '01'])
        self.assertEqual([(i.dyad, i.achiral) for i in isomers],
                         [(False, True), (True, False), (True, False)])
        self.assertEqual([i.index for i in isomers], [1, 2, 3])

    def test_three_centers(self):
        isomers = list(enumerate_isomers(EnumConfig(centers=3)))
        self.assertEqual(_keys(isomers), ['000', '100', '010', '001'])
        self.assertEqual([canonical_key(i.partner) for i in isomers], ['111', '110', '101', '011'])
        self.assertEqual([i.achiral for i in isomers], [True, False, True, False])
        self.assertFalse(any(i.dyad for i in isomers))

    def test_zero_centers(self):
        isomers = list(enumerate_isomers(EnumConfig(centers=0)))
        self.assertEqual(len(isomers), 1)
        self.assertEqual(isomers[0].configuration, Configuration(()))
        self.assertTrue(isomers[0].dyad)
        self.assertTrue(isomers[0].achiral)


class TestProperties(unittest.TestCase):

    def test_count_matches_brute_force_orbits(self):
        for n in range(0, 11):
            with self.subTest(n=n):
                isomers = list(enumerate_isomers(EnumConfig(centers=n)))
                self.assertEqual(len(isomers), len(_brute_force_orbits(n)))

    def test_one_representative_per_orbit(self):
        for n in range(1, 9):
            keys = _keys(enumerate_isomers(EnumConfig(centers=n)))
            covered = [orbit for orbit in _brute_force_orbits(n) if orbit & set(keys)]
            self.assertEqual(len(covered), len(keys))
            for orbit in covered:
                self.assertEqual(len(orbit & set(keys)), 1)

    def test_first_member_in_generation_order_is_reported(self):
        for n in range(1, 9):
            for isomer in enumerate_isomers(EnumConfig(centers=n)):
                partner_value = int(canonical_key(isomer.partner)[::-1] or '0', 2)
                self.assertGreaterEqual(partner_value + 1, isomer.index)

    def test_flags(self):
        for n in range(0, 9):
            for isomer in enumerate_isomers(EnumConfig(centers=n)):
                self.assertEqual(isomer.partner, canonical_partner(isomer.configuration))
                self.assertEqual(isomer.dyad, isomer.configuration == isomer.partner)
                self.assertEqual(isomer.achiral, isomer.configuration == reverse(isomer.configuration))

    def test_deterministic(self):
        first = list(enumerate_isomers(EnumConfig(centers=7)))
        second = list(enumerate_isomers(EnumConfig(centers=7)))
        self.assertEqual(first, second)

    def test_key_policies_agree(self):
        for n in range(0, 9):
            text = list(enumerate_isomers(EnumConfig(centers=n, key_policy='text')))
            index = list(enumerate_isomers(EnumConfig(centers=n, key_policy='index')))
            self.assertEqual(text, index)


class TestErrors(unittest.TestCase):

    def test_overflow_before_any_output(self):
        with self.assertRaises(OverflowError):
            enumerate_isomers(EnumConfig(centers=MAX_CENTERS + 1))

    def test_custom_limit(self):
        with self.assertRaises(OverflowError):
            enumerate_isomers(EnumConfig(centers=6, max_centers=5))

    def test_negative_centers(self):
        with self.assertRaises(ValueError):
            enumerate_isomers(EnumConfig(centers=-1))

    def test_unknown_key_policy(self):
        with self.assertRaises(ValueError):
            enumerate_isomers(EnumConfig(centers=2, key_policy='smiles'))


class TestClassify(unittest.TestCase):

    def test_commits_original_not_partner(self):
        observed = ObservedSet()
        config = Configuration.from_string('100')
        isomer = classify(2, config, observed)
        self.assertIsNotNone(isomer)
        self.assertIn(config, observed)
        self.assertNotIn(Configuration.from_string('110'), observed)

    def test_partner_suppressed(self):
        observed = ObservedSet()
        classify(2, Configuration.from_string('100'), observed)
        qa_bus = {}
        self.assertIsNone(classify(4, Configuration.from_string('110'), observed, qa_bus=qa_bus))
        self.assertEqual(qa_bus['rotational_duplicates'], 1)
        self.assertEqual(len(observed), 1)


class TestStats(unittest.TestCase):

    def test_enumerate_with_stats(self):
        isomers, stats = enumerate_with_stats(EnumConfig(centers=4))
        self.assertEqual(len(isomers), 10)
        self.assertEqual(stats['generated'], 16)
        self.assertEqual(stats['emitted'], 10)
        self.assertEqual(stats['rotational_duplicates'], 6)
        self.assertEqual(stats['dyads'], sum(1 for i in isomers if i.dyad))
        self.assertEqual(stats['achiral'], sum(1 for i in isomers if i.achiral))
        self.assertEqual(stats['chiral'], stats['emitted'] - stats['achiral'])

    def test_generated_equals_emitted_plus_duplicates(self):
        for n in range(0, 9):
            stats = QAStats()
            list(enumerate_isomers(EnumConfig(centers=n), stats=stats))
            self.assertEqual(stats.generated, 1 << n)
            self.assertEqual(stats.generated, stats.emitted + stats.rotational_duplicates)

    def test_from_dict(self):
        cfg = EnumConfig.from_dict({
            'centers': 5,
            'dedup': {'key_policy': 'index'},
            'limits': {'max_centers': 12, 'warn_centers': 10},
        })
        self.assertEqual(cfg.centers, 5)
        self.assertEqual(cfg.key_policy, 'index')
        self.assertEqual(cfg.max_centers, 12)
        self.assertEqual(cfg.warn_centers, 10)

    def test_from_dict_defaults(self):
        cfg = EnumConfig.from_dict({})
        self.assertEqual(cfg.centers, 4)
        self.assertEqual(cfg.key_policy, 'text')
        self.assertEqual(cfg.max_centers, MAX_CENTERS)


if __name__ == '__main__':
    unittest.main()
