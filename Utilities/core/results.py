"""
Result containers produced by the SymCurv scanner.

One ``VariantResult`` per roll variant, grouped per input record in a
``RecordResult``. Both are plain containers; formatting lives in
``Utilities.export.track_exporter``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from Engines.calls.generator import NucleosomeCall
from Utilities.core.position_track import PositionTrack
from Utilities.core.sequence_context import SequenceContext


@dataclass
class VariantResult:
    """Every track and call list computed with one roll matrix."""
    variant: str
    label: str
    curvature: PositionTrack
    symcurv: PositionTrack
    symcurv_mean: float
    smoothed: PositionTrack
    calls: List[NucleosomeCall] = field(default_factory=list)
    selected: List[NucleosomeCall] = field(default_factory=list)

    def summary(self) -> Dict[str, Any]:
        return {
            'Variant': self.variant,
            'Curvature_Positions': self.curvature.count_defined(),
            'SymCurv_Positions': self.symcurv.count_defined(),
            'SymCurv_Mean': self.symcurv_mean,
            'Overlapping_Calls': len(self.calls),
            'Non_Overlapping_Calls': len(self.selected),
        }


@dataclass
class RecordResult:
    """Per-record output: the encoded context plus one result per variant."""
    context: SequenceContext
    variants: Dict[str, VariantResult] = field(default_factory=dict)
    processing_time: float = 0.0

    @property
    def label(self) -> str:
        return self.context.label

    @property
    def offset(self) -> int:
        return self.context.offset

    @property
    def strand(self) -> str:
        return self.context.strand

    @property
    def length(self) -> int:
        return self.context.length

    def variant(self, name: str) -> VariantResult:
        if name not in self.variants:
            raise KeyError(f"No result for variant '{name}'. Available: {sorted(self.variants)}")
        return self.variants[name]

    def summary(self) -> Dict[str, Any]:
        row = {
            'Sequence_Name': self.label,
            'Offset': self.offset,
            'Strand': self.strand,
            'Length': self.length,
            'Processing_Time': self.processing_time,
        }
        for name, result in self.variants.items():
            row[f'{name}_mean'] = result.symcurv_mean
            row[f'{name}_calls'] = len(result.calls)
            row[f'{name}_selected'] = len(result.selected)
        return row
