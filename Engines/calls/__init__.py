"""
Nucleosome Call Module
Dr. Venkata Rajesh Yella | 2025.1 | MIT License

Turns a SymCurv track into overlapping candidate calls and greedily packs
them into a non-overlapping set.
"""

from .generator import CallGenerator, NucleosomeCall
from .greedy import GreedySelector, select_non_overlapping

__all__ = ['CallGenerator', 'NucleosomeCall', 'GreedySelector', 'select_non_overlapping']
