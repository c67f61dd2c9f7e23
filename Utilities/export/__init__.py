"""Tabular and GFF export of SymCurv results"""

from .track_exporter import (
    curvature_dataframe,
    symcurv_dataframe,
    smoothed_dataframe,
    aggregate_dataframe,
    calls_dataframe,
    calls_to_gff,
    export_results,
)

__all__ = [
    'curvature_dataframe',
    'symcurv_dataframe',
    'smoothed_dataframe',
    'aggregate_dataframe',
    'calls_dataframe',
    'calls_to_gff',
    'export_results',
]
