"""
╔══════════════════════════════════════════════════════════════════════════════╗
║            SYMMETRY OF CURVATURE TEST SUITE                                  ║
║        Testing SymmetryEngine and SmoothingEngine                            ║
╚══════════════════════════════════════════════════════════════════════════════╝

Tests validate:
1. Perfect mirror symmetry gets the sentinel score 100
2. Local-minimum weighting and the 0.01 rise threshold
3. Mean divides by the curvature track length
4. Scores are unchanged when the profile is reflected around the dyad
5. Nucleosome-width running sum of scores
"""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest
import numpy as np
from Engines.symmetry import SymmetryEngine, SmoothingEngine
from Utilities.core.position_track import PositionTrack

TRACK_LENGTH = 400
FIRST_DEFINED = 21


def profile_track(profile, length=TRACK_LENGTH, first=FIRST_DEFINED):
    """Curvature track with ``profile(i)`` on [first, length)."""
    return PositionTrack.from_mapping({i: profile(i) for i in range(first, length)}, length)


def v_shape(center, left_slope, right_slope, base=1.0):
    def profile(i):
        if i < center:
            return base + left_slope * (center - i)
        return base + right_slope * (i - center)
    return profile


class TestSymmetryEngine(unittest.TestCase):
    """Test suite for SymmetryEngine"""

    def setUp(self):
        self.engine = SymmetryEngine()

    def test_dyad_range(self):
        """Test dyads run over [win, L - win)"""
        curvature = profile_track(lambda i: float(i % 7))
        dyads = self.engine.dyad_positions(curvature)
        self.assertEqual(int(dyads[0]), 101)
        self.assertEqual(int(dyads[-1]), TRACK_LENGTH - 102)
        symcurv, _ = self.engine.compute(curvature)
        self.assertEqual(symcurv.length, TRACK_LENGTH - 101)
        self.assertEqual(symcurv.count_defined(), TRACK_LENGTH - 202)

    def test_perfect_symmetry_sentinel(self):
        """Test sum == 0 gives 100 even where the weight is 0"""
        symcurv, _ = self.engine.compute(profile_track(v_shape(150, 0.1, 0.1)))
        self.assertEqual(symcurv.get(150), 100.0)
        self.assertEqual(symcurv.get(151), 0.0)
        self.assertEqual(symcurv.get(149), 0.0)

        flat, _ = self.engine.compute(profile_track(lambda i: 2.0))
        values = flat.values[flat.positions()]
        self.assertTrue(np.all(values == 100.0))

    def test_weighted_local_minimum(self):
        """Test score = (1 / sum) * (1 / rise) at a sharp asymmetric minimum"""
        symcurv, _ = self.engine.compute(profile_track(v_shape(200, 0.2, 0.1)))
        asym = sum(abs(0.1 * k - 0.2 * k) for k in range(51))
        expected = (1.0 / asym) * (1.0 / 0.3)
        self.assertAlmostEqual(symcurv.get(200), expected, places=9)
        # not a minimum elsewhere
        self.assertEqual(symcurv.get(190), 0.0)

    def test_shallow_minimum_gets_no_weight(self):
        """Test a minimum with rise below 0.01 scores 0"""
        symcurv, _ = self.engine.compute(profile_track(v_shape(200, 0.003, 0.002)))
        self.assertEqual(symcurv.get(200), 0.0)

    def test_mean_uses_track_length(self):
        """Test the mean divides by the curvature track length, absent positions included"""
        symcurv, mean = self.engine.compute(profile_track(v_shape(150, 0.1, 0.1)))
        self.assertAlmostEqual(mean, 100.0 / TRACK_LENGTH)

    def test_reflection_invariance(self):
        """Test mirroring the profile around a dyad leaves its score unchanged"""
        forward, _ = self.engine.compute(profile_track(v_shape(200, 0.25, 0.05)))
        mirrored, _ = self.engine.compute(profile_track(v_shape(200, 0.05, 0.25)))
        self.assertGreater(forward.get(200), 0.0)
        self.assertAlmostEqual(forward.get(200), mirrored.get(200), places=12)

    def test_short_track(self):
        """Test a track shorter than two windows has no dyads"""
        symcurv, mean = self.engine.compute(profile_track(lambda i: 1.0, length=202))
        self.assertEqual(symcurv.length, 0)
        self.assertEqual(mean, 0.0)
        symcurv, mean = self.engine.compute(PositionTrack.empty())
        self.assertEqual(symcurv.length, 0)
        self.assertEqual(mean, 0.0)

    def test_step(self):
        engine = SymmetryEngine(symcurv_step=10)
        symcurv, _ = engine.compute(profile_track(lambda i: float(i % 5)))
        self.assertEqual(symcurv.positions().tolist(), list(range(101, TRACK_LENGTH - 101, 10)))


class TestSmoothingEngine(unittest.TestCase):
    """Test suite for SmoothingEngine"""

    def test_running_sum(self):
        symcurv = PositionTrack.from_mapping({150: 100.0, 160: 0.5})
        smoothed = SmoothingEngine().compute(symcurv)
        self.assertEqual(smoothed.length, symcurv.length + 1)
        self.assertIsNone(smoothed.get(0))
        self.assertEqual(smoothed.get(76), 0.0)
        self.assertEqual(smoothed.get(77), 100.0)
        self.assertEqual(smoothed.get(87), 100.5)
        self.assertEqual(smoothed.get(symcurv.length), 100.5)
        self.assertEqual(smoothed.count_defined(), symcurv.length)

    def test_is_a_sum_not_an_average(self):
        symcurv = PositionTrack.from_mapping({i: 1.0 for i in range(100, 400)})
        smoothed = SmoothingEngine().compute(symcurv)
        self.assertEqual(smoothed.get(250), 147.0)

    def test_empty(self):
        self.assertEqual(SmoothingEngine().compute(PositionTrack.empty()).length, 0)


if __name__ == '__main__':
    unittest.main()
