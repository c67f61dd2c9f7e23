"""
Structural matrix overrides from YAML.

Example file (every key optional; omitted keys keep the built-in values)::

    twist:            [[[...4 values...], ...4 rows...], ...4 blocks...]
    roll_stationary:  [[[...]]]

Each matrix is a nested 4x4x4 list indexed by the first, second and third
base of a 3-mer window in A, T, G, C order.
"""

import logging
import os
from typing import Any, Dict, Optional

import numpy as np
import yaml

from Engines.curvature.matrices import DEFAULT_MATRICES, MATRIX_SHAPE, StructuralMatrices

logger = logging.getLogger(__name__)

MATRIX_KEYS = ('twist', 'tilt', 'roll_stationary', 'roll_activated')


def _as_matrix(name: str, values: Any) -> np.ndarray:
    try:
        matrix = np.array(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Matrix '{name}' must contain only numbers: {e}") from e
    if matrix.shape != MATRIX_SHAPE:
        raise ValueError(f"Matrix '{name}' must have shape {MATRIX_SHAPE}, got {matrix.shape}")
    if not np.all(np.isfinite(matrix)):
        raise ValueError(f"Matrix '{name}' contains non-finite values")
    matrix.setflags(write=False)
    return matrix


def matrices_from_dict(data: Optional[Dict[str, Any]],
                       base: StructuralMatrices = DEFAULT_MATRICES) -> StructuralMatrices:
    """
    Overlay matrices from a mapping onto ``base``.

    Raises:
        ValueError: on unknown keys, wrong shape or non-numeric entries
    """
    if not data:
        return base
    if not isinstance(data, dict):
        raise ValueError(f"Matrix file must contain a mapping, got {type(data).__name__}")

    unknown = sorted(set(data) - set(MATRIX_KEYS))
    if unknown:
        raise ValueError(f"Unknown matrix key(s) {unknown}. Allowed: {list(MATRIX_KEYS)}")

    twist = _as_matrix('twist', data['twist']) if 'twist' in data else base.twist
    tilt = _as_matrix('tilt', data['tilt']) if 'tilt' in data else base.tilt
    rolls = dict(base.rolls)
    for key in ('roll_stationary', 'roll_activated'):
        if key in data:
            rolls[key] = _as_matrix(key, data[key])

    logger.info(f"Loaded structural matrix override(s): {', '.join(k for k in MATRIX_KEYS if k in data)}")
    return StructuralMatrices(twist=twist, tilt=tilt, rolls=rolls)


def load_matrices(path: str) -> StructuralMatrices:
    """Load a YAML matrix file; raises FileNotFoundError if it does not exist."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Matrix file not found: {path}")
    with open(path, 'r') as f:
        data = yaml.safe_load(f)
    return matrices_from_dict(data)
