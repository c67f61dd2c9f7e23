"""Nucleosome-width running sum of SymCurv scores (diagnostic track)."""

# IMPORTS
from typing import Dict, Any

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from ..base.base_engine import BaseTrackEngine
from Utilities.config.analysis import SYMCURV_CONFIG
from Utilities.core.position_track import PositionTrack

# TUNABLE PARAMETERS
SMOOTHING_HALF_WINDOW = SYMCURV_CONFIG['smoothing_half_window']


class SmoothingEngine(BaseTrackEngine):
    """
    Sum (not average) of SymCurv scores over [i - 73, i + 73] for i = 1..S.

    Absent and out-of-range entries contribute nothing. The result feeds
    reporting only; call generation works on the unsmoothed track.
    """

    def __init__(self, half_window: int = SMOOTHING_HALF_WINDOW):
        super().__init__()
        self.half_window = half_window

    def get_engine_name(self) -> str:
        return "SmoothedSymCurv"

    def get_parameters(self) -> Dict[str, Any]:
        return {'window': 2 * self.half_window + 1}

    def compute(self, symcurv: PositionTrack) -> PositionTrack:
        size = symcurv.length
        self._reset_audit(size)
        if size == 0:
            self._record_audit(0, 0)
            return PositionTrack.empty()

        h = self.half_window
        padded = np.concatenate((np.zeros(h), symcurv.filled(0.0), np.zeros(h + 1)))
        sums = sliding_window_view(padded, 2 * h + 1).sum(axis=1)

        # sums[i] is centred on position i for i = 0..size; position 0 is not reported
        values = sums[:size + 1].copy()
        values[0] = np.nan

        self._record_audit(size, size)
        return PositionTrack(values)
