"""Symmetry of curvature (SymCurv) engine: mirrored curvature around local minima."""

# IMPORTS
import logging
from typing import Dict, Any, Tuple

import numpy as np

from ..base.base_engine import BaseTrackEngine
from Utilities.config.analysis import (
    SYMCURV_CONFIG,
    PERFECT_SYMMETRY_SCORE,
    MIN_LOCAL_MINIMUM_RISE,
)
from Utilities.core.position_track import PositionTrack

logger = logging.getLogger(__name__)

# TUNABLE PARAMETERS
SYMCURV_WIN = SYMCURV_CONFIG['symcurv_win']; SYMCURV_STEP = SYMCURV_CONFIG['symcurv_step']


class SymmetryEngine(BaseTrackEngine):
    """
    Score = (1 / sum) * weight, where

        sum    = sum_{k=0}^{win//2} |curv[d+k] - curv[d-k]|
        weight = 1 / rise at a strict local curvature minimum with
                 rise = (curv[d-1] - curv[d]) + (curv[d+1] - curv[d]) >= 0.01,
                 otherwise 0

    A zero sum (perfect mirror symmetry) gets the sentinel 100 whatever the
    weight. Dyads run from ``win`` to ``len(curvature) - win`` with stride
    ``step`` and must have their mirrored window on defined curvature.
    """

    SCORE_REFERENCE = 'Nikolaou et al. 2010'

    def __init__(self, symcurv_win: int = SYMCURV_WIN, symcurv_step: int = SYMCURV_STEP):
        super().__init__()
        self.symcurv_win = symcurv_win
        self.symcurv_step = symcurv_step

    def get_engine_name(self) -> str:
        return "SymCurv"

    def get_parameters(self) -> Dict[str, Any]:
        return {'symcurv_win': self.symcurv_win, 'symcurv_step': self.symcurv_step}

    @property
    def half_window(self) -> int:
        return self.symcurv_win // 2

    def dyad_positions(self, curvature: PositionTrack) -> np.ndarray:
        """Admissible dyads for a curvature track, ascending."""
        defined = curvature.positions()
        if len(defined) == 0:
            return np.zeros(0, dtype=np.intp)
        first, last = int(defined[0]), int(defined[-1])
        half = max(self.half_window, 1)
        dyads = np.arange(self.symcurv_win, curvature.length - self.symcurv_win,
                          self.symcurv_step, dtype=np.intp)
        keep = (dyads - half >= first) & (dyads + half <= last)
        return dyads[keep]

    def compute(self, curvature: PositionTrack) -> Tuple[PositionTrack, float]:
        """
        SymCurv track and its mean.

        The mean divides by the full curvature track length (leading absent
        positions included), not by the number of scored dyads.

        Returns:
            (track, mean); the track length is last dyad + 1 (0 if none)
        """
        self._reset_audit(curvature.length)
        dyads = self.dyad_positions(curvature)
        if len(dyads) == 0:
            self._record_audit(0, 0)
            return PositionTrack.empty(), 0.0

        curv = curvature.values
        asym = np.zeros(len(dyads))
        for k in range(self.half_window + 1):
            asym += np.abs(curv[dyads + k] - curv[dyads - k])

        center = curv[dyads]
        left = curv[dyads - 1]
        right = curv[dyads + 1]
        rise = (left - center) + (right - center)
        is_minimum = (center < left) & (center < right) & (rise >= MIN_LOCAL_MINIMUM_RISE)
        with np.errstate(divide='ignore', invalid='ignore'):
            weight = np.where(is_minimum, 1.0 / rise, 0.0)
            scores = np.where(asym != 0, (1.0 / asym) * weight, PERFECT_SYMMETRY_SCORE)

        for dyad in dyads[asym == 0]:
            logger.debug(f"Symmetry component is 0 for local position {int(dyad)}")

        values = np.full(int(dyads[-1]) + 1, np.nan)
        values[dyads] = scores

        mean = float(np.sum(scores)) / curvature.length
        self._record_audit(len(dyads), len(dyads))
        return PositionTrack(values), mean
