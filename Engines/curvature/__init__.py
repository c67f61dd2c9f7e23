"""
Curvature Module
Dr. Venkata Rajesh Yella | 2025.1 | MIT License

Estimates DNA curvature from trinucleotide roll, twist and tilt parameters.
"""

from .engine import CurvatureEngine, cumulative_twist, triplet_index
from .matrices import (
    DEFAULT_MATRICES,
    ROLL_ACTIVATED,
    ROLL_STATIONARY,
    TILT,
    TWIST,
    StructuralMatrices,
    matrix_lookup,
)

__all__ = [
    'CurvatureEngine',
    'cumulative_twist',
    'triplet_index',
    'DEFAULT_MATRICES',
    'ROLL_ACTIVATED',
    'ROLL_STATIONARY',
    'TILT',
    'TWIST',
    'StructuralMatrices',
    'matrix_lookup',
]
