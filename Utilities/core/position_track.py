"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ PositionTrack - Sparse Position-Indexed Numeric Track                        │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

DESCRIPTION:
    Curvature, SymCurv and smoothed SymCurv values are stored as float64
    arrays indexed by local sequence position.  Positions a stage cannot
    compute (no full window support) hold ``NaN`` so that "absent" is never
    confused with a genuine score of 0.0.

    The array length is meaningful: it is one past the last position the
    producing stage can define (0 when it defines nothing).  The symmetry
    engine uses the curvature track length both as its dyad bound and as the
    denominator of the track mean.
"""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

import numpy as np


class PositionTrack:
    """
    Position-indexed float track with NaN marking absent entries.

    Parameters
    ----------
    values : array-like
        Track values; copied to a read-only float64 array.
    """

    __slots__ = ("values",)

    def __init__(self, values) -> None:
        arr = np.array(values, dtype=np.float64)
        arr.setflags(write=False)
        self.values: np.ndarray = arr

    @classmethod
    def empty(cls) -> "PositionTrack":
        return cls(np.zeros(0, dtype=np.float64))

    @classmethod
    def from_mapping(cls, mapping, length: Optional[int] = None) -> "PositionTrack":
        """Build a track from ``{position: value}``; length defaults to max position + 1."""
        if length is None:
            length = (max(mapping) + 1) if mapping else 0
        values = np.full(length, np.nan)
        for pos, value in mapping.items():
            values[pos] = value
        return cls(values)

    @property
    def length(self) -> int:
        return len(self.values)

    @property
    def defined_mask(self) -> np.ndarray:
        return ~np.isnan(self.values)

    def positions(self) -> np.ndarray:
        """Local positions holding a value, ascending."""
        return np.flatnonzero(self.defined_mask)

    def count_defined(self) -> int:
        return int(np.count_nonzero(self.defined_mask))

    def get(self, position: int) -> Optional[float]:
        """Value at ``position`` or ``None`` when absent / out of range."""
        if 0 <= position < self.length:
            value = self.values[position]
            if not np.isnan(value):
                return float(value)
        return None

    def items(self) -> Iterator[Tuple[int, float]]:
        for pos in self.positions():
            yield int(pos), float(self.values[pos])

    def filled(self, fill: float = 0.0) -> np.ndarray:
        """Writable copy with absent entries replaced by ``fill``."""
        return np.where(self.defined_mask, self.values, fill)

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        return f"PositionTrack(length={self.length:,}, defined={self.count_defined():,})"
