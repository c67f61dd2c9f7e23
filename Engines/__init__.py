"""
Consolidated SymCurv Pipeline Engines Module
Dr. Venkata Rajesh Yella | 2025.1 | MIT License

Re-exports every pipeline stage so callers can import from one place.

Contains 5 engine classes built on BaseTrackEngine:
CurvatureEngine, SymmetryEngine, SmoothingEngine, CallGenerator, GreedySelector
"""

# Import base engine
from Engines.base.base_engine import BaseTrackEngine

# Import all engine classes from submodules
from Engines.curvature.engine import CurvatureEngine
from Engines.symmetry.engine import SymmetryEngine
from Engines.symmetry.smoothing import SmoothingEngine
from Engines.calls.generator import CallGenerator, NucleosomeCall
from Engines.calls.greedy import GreedySelector

__all__ = [
    "BaseTrackEngine",
    "CurvatureEngine",
    "SymmetryEngine",
    "SmoothingEngine",
    "CallGenerator",
    "NucleosomeCall",
    "GreedySelector",
]

__version__ = "2025.1"
__author__ = "Dr. Venkata Rajesh Yella"
