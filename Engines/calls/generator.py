"""Overlapping nucleosome call generation from a SymCurv track."""

# IMPORTS
from dataclasses import dataclass
from typing import Dict, Any, List

from ..base.base_engine import BaseTrackEngine
from Utilities.config.analysis import SYMCURV_CONFIG, MAX_REPORTED_SCORE
from Utilities.core.position_track import PositionTrack

# TUNABLE PARAMETERS
CALL_HALF_SIZE = SYMCURV_CONFIG['call_half_size']


@dataclass(frozen=True)
class NucleosomeCall:
    """
    Candidate nucleosome centred on a dyad (local coordinates).

    ``score`` keeps full precision for ranking; ``reported_score`` is the
    value written to outputs, clamped to 100.
    """
    dyad: int
    score: float
    start: int
    end: int
    variant: str = 'stationary'

    @property
    def reported_score(self) -> float:
        return min(self.score, MAX_REPORTED_SCORE)

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    def to_dict(self, offset: int = 0) -> Dict[str, Any]:
        return {
            'Dyad': self.dyad + offset,
            'Start': self.start + offset,
            'End': self.end + offset,
            'Raw_Score': self.score,
            'Score': self.reported_score,
            'Variant': self.variant,
        }


class CallGenerator(BaseTrackEngine):
    """
    Emit a call for every dyad with score > 0 whose interval
    [dyad - h, dyad + h] satisfies dyad - h > 0 and dyad + h < n.
    Calls come out in ascending dyad order, which is their discovery order.
    """

    def __init__(self, half_size: int = CALL_HALF_SIZE):
        super().__init__()
        self.half_size = half_size

    def get_engine_name(self) -> str:
        return "CallGenerator"

    def get_parameters(self) -> Dict[str, Any]:
        return {'half_size': self.half_size}

    def generate(self, symcurv: PositionTrack, sequence_length: int,
                 variant: str = 'stationary') -> List[NucleosomeCall]:
        self._reset_audit(sequence_length)
        h = self.half_size
        calls = []
        scanned = 0
        for dyad, score in symcurv.items():
            scanned += 1
            if score > 0 and dyad - h > 0 and dyad + h < sequence_length:
                calls.append(NucleosomeCall(dyad, score, dyad - h, dyad + h, variant))
        self._record_audit(scanned, len(calls))
        return calls
