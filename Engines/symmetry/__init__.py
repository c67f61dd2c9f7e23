"""
Symmetry of Curvature Module
Dr. Venkata Rajesh Yella | 2025.1 | MIT License

Scores candidate dyads by the bilateral symmetry of the curvature profile
around local curvature minima, plus a nucleosome-width running sum.
"""

from .engine import SymmetryEngine
from .smoothing import SmoothingEngine

__all__ = ['SymmetryEngine', 'SmoothingEngine']
