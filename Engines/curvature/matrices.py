"""
Structural Parameter Matrices
Dr. Venkata Rajesh Yella | 2025.1 | MIT License

Trinucleotide-indexed helical parameters used by the curvature engine.
Every matrix is a 4x4x4 array indexed by the encoded symbols of a 3-mer
window in A, T, G, C order (A=0, T=1, G=2, C=3).

Roll angles are the definitive parameter (Munteanu et al. 1998):
    - stationary: roll values for nucleosome-bound DNA
    - activated:  roll values measured by DNase I digestion
Twist is uniform and tilt is all zero, but both stay structurally present.
"""

from dataclasses import dataclass, field
from typing import Dict

import numpy as np

MATRIX_SHAPE = (4, 4, 4)
TRIPLET_SIZE = 3
TWIST_ANGLE = 0.598647428


def _frozen(values) -> np.ndarray:
    matrix = np.array(values, dtype=np.float64)
    if matrix.shape != MATRIX_SHAPE:
        raise ValueError(f"Structural matrix must have shape {MATRIX_SHAPE}, got {matrix.shape}")
    matrix.setflags(write=False)
    return matrix


TWIST = _frozen(np.full(MATRIX_SHAPE, TWIST_ANGLE))

TILT = _frozen(np.zeros(MATRIX_SHAPE))

ROLL_STATIONARY = _frozen([
    [
        [0.0633, 0.3500, 4.6709, 2.64115],
        [6.2734, 0.3500, 7.7171, 4.44325],
        [4.8884, 3.9232, 5.0523, 6.8829],
        [5.4903, 3.9232, 5.3055, 5.3055],
    ],
    [
        [4.6709, 6.2734, 5.00295, 5.0673],
        [4.6709, 0.0633, 4.7618, 4.0633],
        [7.7000, 5.4903, 3.05865, 6.75525],
        [7.7000, 4.8884, 7.07195, 4.9907],
    ],
    [
        [4.0633, 4.44325, 5.9806, 5.51645],
        [5.0673, 2.64115, 6.62555, 5.51645],
        [4.9907, 5.3055, 5.89135, 9.0823],
        [6.75525, 6.8829, 5.89135, 9.0823],
    ],
    [
        [4.7618, 7.7171, 6.8996, 6.62555],
        [5.00295, 4.6709, 6.8996, 5.9806],
        [7.07195, 5.3055, 3.869, 5.9000],
        [3.05865, 5.0523, 3.869, 5.827],
    ],
])

ROLL_ACTIVATED = _frozen([
    [
        [0.1, 0.0, 4.2, 1.6],
        [9.7, 0.0, 8.7, 3.6],
        [6.5, 2.0, 4.7, 6.3],
        [5.8, 2.0, 5.2, 5.2],
    ],
    [
        [7.3, 9.7, 7.8, 6.4],
        [7.3, 0.1, 6.2, 5.1],
        [10.0, 5.8, 0.7, 7.5],
        [10.0, 6.5, 5.8, 6.2],
    ],
    [
        [5.1, 3.6, 6.6, 5.6],
        [6.4, 1.6, 6.8, 5.6],
        [6.2, 5.2, 5.7, 8.2],
        [7.5, 6.3, 4.3, 8.2],
    ],
    [
        [6.2, 8.7, 9.6, 6.8],
        [7.8, 4.2, 9.6, 6.6],
        [5.8, 5.2, 3.0, 4.3],
        [0.7, 4.7, 3.0, 5.7],
    ],
])


@dataclass(frozen=True, eq=False)
class StructuralMatrices:
    """
    Read-only bundle of the matrices consumed by the curvature engine.

    Attributes:
        twist: Twist angle per 3-mer (radians)
        tilt: Tilt per 3-mer
        rolls: Mapping of roll matrix key ('roll_stationary', 'roll_activated') to matrix
    """
    twist: np.ndarray = field(default_factory=lambda: TWIST)
    tilt: np.ndarray = field(default_factory=lambda: TILT)
    rolls: Dict[str, np.ndarray] = field(default_factory=lambda: {
        'roll_stationary': ROLL_STATIONARY,
        'roll_activated': ROLL_ACTIVATED,
    })

    def roll(self, key: str) -> np.ndarray:
        if key not in self.rolls:
            raise ValueError(f"Unknown roll matrix '{key}'. Available: {sorted(self.rolls)}")
        return self.rolls[key]


DEFAULT_MATRICES = StructuralMatrices()


def matrix_lookup(triplet: str, matrix: np.ndarray) -> float:
    """
    Look up the value for a literal trinucleotide, e.g. ``matrix_lookup("AAT", TWIST)``.

    Raises:
        ValueError: if ``triplet`` is not exactly three of A, T, G, C
    """
    order = 'ATGC'
    triplet = triplet.upper()
    if len(triplet) != TRIPLET_SIZE or any(base not in order for base in triplet):
        raise ValueError(f"Triplet must be three of A/T/G/C, got '{triplet}'")
    i, j, k = (order.index(base) for base in triplet)
    return float(matrix[i, j, k])
