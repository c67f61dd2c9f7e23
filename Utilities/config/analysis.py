"""
Analysis configuration for SymCurvFinder.

This module contains the pipeline parameters:
- Curvature integration and smoothing steps
- Symmetry (SymCurv) window
- Nucleosome call geometry
- Greedy non-overlapping selection
- Roll variant registry

PARAMETER GLOSSARY
------------------
curve_step_one  = 6        Outer half-span of the weighted rolling average;
                           edge samples sit at +/-(curve_step_one - 1)
curve_step_two  = 4        Inner half-span (2*4+1 full-weight samples)
curve_step      = 15       Curvature is measured between averaged points
                           15 bp either side of a position
curve_scale     = 0.33335  Scale applied to the curvature distance
symcurv_win     = 101      Full symmetry window (mirrored half-window = 50)
symcurv_step    = 1        Dyad stride
call_half_size  = 73       Call interval is [dyad-73, dyad+73] (147 bp)
smoothing_half_window = 73 Running sum over one nucleosome length
min_linker_size = 30       Greedy spacer between accepted dyads
nucleosome_size = 147      Greedy footprint

The greedy selector rejects a dyad closer than
min_linker_size + nucleosome_size = 177 bp to an already accepted dyad.
"""

from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Optional

# ==================== PIPELINE PARAMETERS ====================
SYMCURV_CONFIG = {
    # Curvature engine
    'curve_step_one': 6,
    'curve_step_two': 4,
    'curve_step': 15,
    'curve_scale': 0.33335,

    # Symmetry engine
    'symcurv_win': 101,
    'symcurv_step': 1,

    # Smoothing stage (diagnostic only)
    'smoothing_half_window': 73,

    # Call generator / greedy selector
    'call_half_size': 73,
    'min_linker_size': 30,
    'nucleosome_size': 147,

    # Batch execution
    'max_workers': None,             # None = auto-detect CPU count
}

# ==================== SCORING CONSTANTS ====================
# Sentinel assigned when the mirrored curvature difference sums to exactly 0
PERFECT_SYMMETRY_SCORE = 100.0
# Reported call scores are clamped to this ceiling
MAX_REPORTED_SCORE = 100.0
# Minimum combined rise around a curvature minimum to receive a weight
MIN_LOCAL_MINIMUM_RISE = 0.01

# ==================== ROLL VARIANTS ====================
# Each variant runs the full pipeline with its own roll matrix; twist and
# tilt are shared. 'label' is the GFF feature type used for its calls and
# 'file_tag' names its call files (out_init_calls_<tag>.gff).
ROLL_VARIANTS = {
    'stationary': {'matrix': 'roll_stationary', 'label': 'stat_nucleosome', 'file_tag': 'nuc'},
    'activated': {'matrix': 'roll_activated', 'label': 'act_nucleosome', 'file_tag': 'dnase'},
}
DEFAULT_VARIANTS = ('stationary', 'activated')


@dataclass(frozen=True)
class SymCurvParameters:
    """Validated, immutable parameter set for one pipeline run."""
    curve_step_one: int = SYMCURV_CONFIG['curve_step_one']
    curve_step_two: int = SYMCURV_CONFIG['curve_step_two']
    curve_step: int = SYMCURV_CONFIG['curve_step']
    curve_scale: float = SYMCURV_CONFIG['curve_scale']
    symcurv_win: int = SYMCURV_CONFIG['symcurv_win']
    symcurv_step: int = SYMCURV_CONFIG['symcurv_step']
    smoothing_half_window: int = SYMCURV_CONFIG['smoothing_half_window']
    call_half_size: int = SYMCURV_CONFIG['call_half_size']
    min_linker_size: int = SYMCURV_CONFIG['min_linker_size']
    nucleosome_size: int = SYMCURV_CONFIG['nucleosome_size']
    variants: tuple = DEFAULT_VARIANTS

    def __post_init__(self):
        self.validate()

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]] = None, **overrides) -> "SymCurvParameters":
        """
        Build parameters from a config dict (unknown keys ignored) plus overrides.

        ``None`` overrides are skipped so argparse namespaces can be passed through.
        """
        known = {f.name for f in fields(cls)}
        merged = {k: v for k, v in (config or SYMCURV_CONFIG).items() if k in known}
        merged.update({k: v for k, v in overrides.items() if k in known and v is not None})
        if 'variants' in merged:
            merged['variants'] = tuple(merged['variants'])
        return cls(**merged)

    def validate(self) -> None:
        """Raise ValueError on any out-of-range parameter."""
        for name in ('curve_step_one', 'curve_step_two', 'curve_step', 'symcurv_win',
                     'symcurv_step', 'smoothing_half_window', 'call_half_size',
                     'nucleosome_size'):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

        if not 0.0 <= self.curve_scale <= 1.0:
            raise ValueError(f"curve_scale must be between 0 and 1, got {self.curve_scale}")

        # Full-weight samples must stay inside the half-weighted edges
        if self.curve_step_two > self.curve_step_one - 2:
            raise ValueError(
                f"curve_step_two ({self.curve_step_two}) must be at most "
                f"curve_step_one - 2 ({self.curve_step_one - 2})"
            )

        if not isinstance(self.min_linker_size, int) or self.min_linker_size < 0:
            raise ValueError(f"min_linker_size must be a non-negative integer, got {self.min_linker_size!r}")

        if not self.variants:
            raise ValueError("At least one roll variant is required")
        unknown = [v for v in self.variants if v not in ROLL_VARIANTS]
        if unknown:
            raise ValueError(f"Unknown roll variant(s) {unknown}. Use {sorted(ROLL_VARIANTS)}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
