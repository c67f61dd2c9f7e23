"""
╔══════════════════════════════════════════════════════════════════════════════╗
║            CURVATURE ENGINE TEST SUITE                                       ║
║        Testing Structural Matrices and the Curvature Track                   ║
╚══════════════════════════════════════════════════════════════════════════════╝

Tests validate:
1. Matrix shapes, lookups and the roll registry
2. Curvature track length and defined range
3. Shared cumulative twist gives identical tracks
4. A homopolymer gives a constant curvature track
"""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import dataclasses
import unittest
import numpy as np
from Engines.curvature import (
    CurvatureEngine,
    DEFAULT_MATRICES,
    StructuralMatrices,
    ROLL_ACTIVATED,
    ROLL_STATIONARY,
    TILT,
    TWIST,
    cumulative_twist,
    matrix_lookup,
    triplet_index,
)
from Utilities.core.sequence_context import encode_sequence


class TestStructuralMatrices(unittest.TestCase):
    """Test suite for the built-in matrices"""

    def test_shapes(self):
        for matrix in (TWIST, TILT, ROLL_STATIONARY, ROLL_ACTIVATED):
            self.assertEqual(matrix.shape, (4, 4, 4))

    def test_uniform_twist_and_zero_tilt(self):
        self.assertTrue(np.all(TWIST == 0.598647428))
        self.assertTrue(np.all(TILT == 0.0))

    def test_lookup(self):
        """Test literal triplet lookups against known entries"""
        self.assertAlmostEqual(matrix_lookup("AAA", ROLL_STATIONARY), 0.0633)
        self.assertAlmostEqual(matrix_lookup("ATA", ROLL_STATIONARY), 6.2734)
        self.assertAlmostEqual(matrix_lookup("CCC", ROLL_STATIONARY), 5.827)
        self.assertAlmostEqual(matrix_lookup("GAA", ROLL_ACTIVATED), 5.1)
        self.assertAlmostEqual(matrix_lookup("tga", ROLL_ACTIVATED), 10.0)

    def test_lookup_rejects_bad_triplets(self):
        for triplet in ("AA", "AAAA", "ANA"):
            with self.assertRaises(ValueError):
                matrix_lookup(triplet, TWIST)

    def test_matrices_read_only(self):
        with self.assertRaises(ValueError):
            ROLL_STATIONARY[0, 0, 0] = 1.0

    def test_default_bundle(self):
        """Test every field is built by a factory and the defaults are the built-in matrices"""
        for f in dataclasses.fields(StructuralMatrices):
            self.assertIs(f.default, dataclasses.MISSING)
        matrices = StructuralMatrices()
        self.assertIs(matrices.twist, TWIST)
        self.assertIs(matrices.tilt, TILT)
        self.assertIs(matrices.roll('roll_activated'), ROLL_ACTIVATED)
        override = StructuralMatrices(tilt=np.zeros((4, 4, 4)))
        self.assertIs(override.twist, TWIST)

    def test_unknown_roll_key(self):
        with self.assertRaises(ValueError):
            DEFAULT_MATRICES.roll('roll_unknown')

    def test_triplet_index_matches_lookup(self):
        codes = encode_sequence("GTCA")
        flat = ROLL_STATIONARY.ravel()[triplet_index(codes)]
        self.assertAlmostEqual(flat[0], matrix_lookup("GTC", ROLL_STATIONARY))
        self.assertAlmostEqual(flat[1], matrix_lookup("TCA", ROLL_STATIONARY))


class TestCurvatureEngine(unittest.TestCase):
    """Test suite for CurvatureEngine"""

    def setUp(self):
        self.engine = CurvatureEngine('roll_stationary')
        rng = np.random.default_rng(11)
        self.sequence = "".join(rng.choice(list("ACGT"), size=400))

    def test_track_length_and_defined_range(self):
        """Test the track covers [c + s1, n - c - s1) and nothing else"""
        codes = encode_sequence(self.sequence)
        track = self.engine.compute(codes)
        n = len(codes)
        self.assertEqual(track.length, n - 15 - 6)
        positions = track.positions()
        self.assertEqual(int(positions[0]), 21)
        self.assertEqual(int(positions[-1]), n - 22)
        self.assertEqual(track.count_defined(), n - 2 * 21)
        self.assertTrue(np.all(track.values[positions] >= 0))

    def test_short_sequences_are_empty(self):
        """Test sequences too short for full window support give no track"""
        for n in (0, 1, 2, 30, 42):
            track = self.engine.compute(encode_sequence("ACGT" * 11)[:n])
            self.assertEqual(track.length, 0, f"length {n}")
        self.assertEqual(self.engine.compute(encode_sequence("ACGT" * 11)[:43]).count_defined(), 1)

    def test_shared_twist(self):
        """Test a precomputed cumulative twist gives the same track"""
        codes = encode_sequence(self.sequence)
        twist_sum = cumulative_twist(codes, DEFAULT_MATRICES)
        a = self.engine.compute(codes)
        b = self.engine.compute(codes, twist_sum)
        np.testing.assert_array_equal(a.values, b.values)

    def test_variants_differ(self):
        codes = encode_sequence(self.sequence)
        stat = self.engine.compute(codes)
        act = CurvatureEngine('roll_activated').compute(codes)
        self.assertEqual(stat.length, act.length)
        self.assertFalse(np.allclose(stat.values[21:], act.values[21:]))

    def test_homopolymer_is_flat(self):
        """Test 300 identical bases give a constant curvature track"""
        track = self.engine.compute(encode_sequence("A" * 300))
        values = track.values[track.positions()]
        self.assertEqual(len(values), 300 - 42)
        self.assertTrue(np.allclose(values, values[0], rtol=0, atol=1e-9))

    def test_audit(self):
        codes = encode_sequence(self.sequence)
        self.engine.compute(codes)
        audit = self.engine.get_audit_info()
        self.assertTrue(audit['invoked'])
        self.assertEqual(audit['input_length'], len(codes))
        self.assertEqual(audit['positions_defined'], len(codes) - 42)
        self.assertEqual(self.engine.get_statistics()['parameters']['roll_matrix'], 'roll_stationary')


if __name__ == '__main__':
    unittest.main()
