"""DNA curvature engine: integrated helical path from trinucleotide roll/twist/tilt."""

# IMPORTS
import logging
from typing import Dict, Any, Optional, Tuple

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from ..base.base_engine import BaseTrackEngine
from .matrices import DEFAULT_MATRICES, StructuralMatrices
from Utilities.config.analysis import SYMCURV_CONFIG
from Utilities.core.position_track import PositionTrack

logger = logging.getLogger(__name__)

# TUNABLE PARAMETERS
CURVE_STEP = SYMCURV_CONFIG['curve_step']; CURVE_SCALE = SYMCURV_CONFIG['curve_scale']
CURVE_STEP_ONE = SYMCURV_CONFIG['curve_step_one']; CURVE_STEP_TWO = SYMCURV_CONFIG['curve_step_two']


def triplet_index(codes: np.ndarray) -> np.ndarray:
    """Flat 0..63 matrix index of every 3-mer window (n - 2 windows)."""
    c = np.asarray(codes, dtype=np.intp)
    return c[:-2] * 16 + c[1:-1] * 4 + c[2:]


def cumulative_twist(codes: np.ndarray,
                     matrices: StructuralMatrices = DEFAULT_MATRICES) -> np.ndarray:
    """
    Running twist angle T_j over all 3-mer windows.

    Not reduced modulo 2*pi; the angle grows monotonically and goes
    straight into sin/cos. Shared by every roll variant of a record.
    """
    return np.cumsum(matrices.twist.ravel()[triplet_index(codes)])


class CurvatureEngine(BaseTrackEngine):
    """
    Curvature track for one roll matrix.

    Steps:
        1. per-window deltas dx = roll*sin(T) + tilt*sin(T - pi/2) (dy with cos)
        2. coordinates x[j+1] = x[j] + dx[j], x[0] = 0
        3. centrally weighted rolling average, half-weight edge samples
        4. curvature[l] = scale * |avg[l + step] - avg[l - step]|
    """

    SCORE_REFERENCE = 'Munteanu et al. 1998'

    def __init__(self, roll_key: str = 'roll_stationary',
                 matrices: StructuralMatrices = DEFAULT_MATRICES,
                 curve_step: int = CURVE_STEP, curve_scale: float = CURVE_SCALE,
                 curve_step_one: int = CURVE_STEP_ONE, curve_step_two: int = CURVE_STEP_TWO):
        super().__init__()
        self.roll_key = roll_key
        self.matrices = matrices
        self.roll = matrices.roll(roll_key)
        self.curve_step = curve_step
        self.curve_scale = curve_scale
        self.curve_step_one = curve_step_one
        self.curve_step_two = curve_step_two

    def get_engine_name(self) -> str:
        return f"Curvature[{self.roll_key}]"

    def get_parameters(self) -> Dict[str, Any]:
        return {
            'roll_matrix': self.roll_key,
            'curve_step': self.curve_step,
            'curve_scale': self.curve_scale,
            'curve_step_one': self.curve_step_one,
            'curve_step_two': self.curve_step_two,
        }

    def valid_range(self, sequence_length: int) -> Tuple[int, int]:
        """Half-open range [lo, hi) of positions with full window support."""
        margin = self.curve_step + self.curve_step_one
        return margin, sequence_length - margin

    def coordinates(self, codes: np.ndarray,
                    twist_sum: Optional[np.ndarray] = None) -> Tuple[np.ndarray, np.ndarray]:
        """Integrated (x, y) path; n - 1 points for n >= 2."""
        windows = triplet_index(codes)
        if twist_sum is None:
            twist_sum = cumulative_twist(codes, self.matrices)
        roll = self.roll.ravel()[windows]
        tilt = self.matrices.tilt.ravel()[windows]
        phase = twist_sum - np.pi / 2.0
        dx = roll * np.sin(twist_sum) + tilt * np.sin(phase)
        dy = roll * np.cos(twist_sum) + tilt * np.cos(phase)
        x = np.concatenate(([0.0], np.cumsum(dx)))
        y = np.concatenate(([0.0], np.cumsum(dy)))
        return x, y

    def rolling_average(self, coord: np.ndarray, sequence_length: int) -> np.ndarray:
        """
        Centrally weighted average at k in [step_one, n - step_one).

        (2*step_two + 1) full samples plus the two samples at
        +/-(step_one - 1) divided by step_two/2, normalised by
        2*(step_one - 1). With the defaults: 9 samples + 2 half samples over 10.
        """
        s1, s2 = self.curve_step_one, self.curve_step_two
        averaged = np.full(len(coord), np.nan)
        lo, hi = s1, sequence_length - s1
        if hi <= lo:
            return averaged

        k = np.arange(lo, hi)
        inner = sliding_window_view(coord, 2 * s2 + 1).sum(axis=1)[k - s2]
        edge_weight = s2 / 2.0
        total = inner + coord[k + s1 - 1] / edge_weight + coord[k - s1 + 1] / edge_weight
        averaged[k] = total / ((s1 - 1) * 2)
        return averaged

    def compute(self, codes: np.ndarray,
                twist_sum: Optional[np.ndarray] = None) -> PositionTrack:
        """
        Curvature track for an encoded sequence.

        Args:
            codes: Encoded sequence (A=0, T=1, G=2, C=3)
            twist_sum: Optional precomputed :func:`cumulative_twist`

        Returns:
            PositionTrack of length n - step - step_one (0 if nothing is defined)
        """
        n = len(codes)
        self._reset_audit(n)
        lo, hi = self.valid_range(n)
        if hi <= lo:
            self._record_audit(0, 0)
            return PositionTrack.empty()

        x, y = self.coordinates(codes, twist_sum)
        x_avg = self.rolling_average(x, n)
        y_avg = self.rolling_average(y, n)

        step = self.curve_step
        l = np.arange(lo, hi)
        dx = x_avg[l + step] - x_avg[l - step]
        dy = y_avg[l + step] - y_avg[l - step]

        values = np.full(hi, np.nan)
        values[l] = np.sqrt(dx ** 2 + dy ** 2) * self.curve_scale

        self._record_audit(hi - lo, hi - lo)
        return PositionTrack(values)
