"""
Configuration modules for SymCurvFinder.

This package contains all configuration constants including:
- analysis: Pipeline parameters, scoring constants and roll variants
- matrix_loader: Optional YAML override of the structural matrices
"""

from .analysis import (
    SYMCURV_CONFIG,
    ROLL_VARIANTS,
    DEFAULT_VARIANTS,
    PERFECT_SYMMETRY_SCORE,
    MAX_REPORTED_SCORE,
    MIN_LOCAL_MINIMUM_RISE,
    SymCurvParameters,
)

__all__ = [
    'SYMCURV_CONFIG',
    'ROLL_VARIANTS',
    'DEFAULT_VARIANTS',
    'PERFECT_SYMMETRY_SCORE',
    'MAX_REPORTED_SCORE',
    'MIN_LOCAL_MINIMUM_RISE',
    'SymCurvParameters',
]
