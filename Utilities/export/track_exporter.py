"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ Track Exporter - Tabular and GFF Output for SymCurv Results                  │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

All positions are written as local position + record offset. Track files are
tab-separated without a header, one row per defined position:

    out_curv.dat           label, position, base, curvature per variant
    out_symcurv.dat        label, position, SymCurv per variant
    out_symcurv_avr.dat    label, position, smoothed SymCurv per variant
    out_symcurv_aggr.dat   label:offset:strand:L, SymCurv mean per variant

Calls are written as GFF-like lines with the score clamped to 100:

    out_init_calls_<tag>.gff   overlapping calls, ascending dyad
    out_fin_calls_<tag>.gff    non-overlapping calls, ascending dyad
"""
# ═══════════════════════════════════════════════════════════════════════════════
# IMPORTS
# ═══════════════════════════════════════════════════════════════════════════════
import os
import logging
from typing import List, Dict, Iterable

import numpy as np
import pandas as pd

from Engines.calls.generator import NucleosomeCall
from Utilities.config.analysis import ROLL_VARIANTS
from Utilities.core.position_track import PositionTrack
from Utilities.core.results import RecordResult

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# OUTPUT FILE NAMES
# ═══════════════════════════════════════════════════════════════════════════════
CURVATURE_FILE = 'out_curv.dat'
SYMCURV_FILE = 'out_symcurv.dat'
AGGREGATE_FILE = 'out_symcurv_aggr.dat'
SMOOTHED_FILE = 'out_symcurv_avr.dat'
OVERLAPPING_CALLS_FILE = 'out_init_calls_{tag}.gff'
NON_OVERLAPPING_CALLS_FILE = 'out_fin_calls_{tag}.gff'

GFF_COLUMNS = ['seqid', 'source', 'feature', 'start', 'end', 'score', 'strand', 'frame', 'sequence']
GFF_SOURCE = 'evidence'


def _track_frame(result: RecordResult, tracks: Dict[str, PositionTrack],
                 include_base: bool = False) -> pd.DataFrame:
    """Rows for every position defined in any of ``tracks``, ascending."""
    length = max((t.length for t in tracks.values()), default=0)
    defined = np.zeros(length, dtype=bool)
    for track in tracks.values():
        defined[:track.length] |= track.defined_mask
    positions = np.flatnonzero(defined)

    frame = pd.DataFrame({
        'Sequence_Name': result.label,
        'Position': positions + result.offset,
    })
    if include_base:
        frame['Base'] = np.array(list(result.context.bases), dtype='<U1')[positions]
    for name, track in tracks.items():
        padded = np.full(length, np.nan)
        padded[:track.length] = track.values
        frame[name] = padded[positions]
    return frame


def curvature_dataframe(result: RecordResult) -> pd.DataFrame:
    """Curvature per variant with the scored base at each position."""
    return _track_frame(result, {n: v.curvature for n, v in result.variants.items()}, include_base=True)


def symcurv_dataframe(result: RecordResult) -> pd.DataFrame:
    return _track_frame(result, {n: v.symcurv for n, v in result.variants.items()})


def smoothed_dataframe(result: RecordResult) -> pd.DataFrame:
    return _track_frame(result, {n: v.smoothed for n, v in result.variants.items()})


def aggregate_dataframe(results: Iterable[RecordResult]) -> pd.DataFrame:
    """
    One row per record: ``label:offset:strand:L`` and the SymCurv mean per variant.

    L is the curvature track length, i.e. the denominator of the means.
    """
    rows = []
    for result in results:
        curvature_length = max((v.curvature.length for v in result.variants.values()), default=0)
        row = {'Record': f"{result.label}:{result.offset}:{result.strand}:{curvature_length}"}
        for name, variant in result.variants.items():
            row[name] = variant.symcurv_mean
        rows.append(row)
    return pd.DataFrame(rows)


def calls_dataframe(calls: Iterable[NucleosomeCall], result: RecordResult) -> pd.DataFrame:
    """GFF-style table of calls, ascending by dyad."""
    rows = []
    for call in sorted(calls, key=lambda c: c.dyad):
        rows.append({
            'seqid': result.label,
            'source': GFF_SOURCE,
            'feature': ROLL_VARIANTS[call.variant]['label'],
            'start': call.start + result.offset,
            'end': call.end + result.offset,
            'score': call.reported_score,
            'strand': '+',
            'frame': '.',
            'sequence': result.context.bases[call.start:call.end + 1],
        })
    return pd.DataFrame(rows, columns=GFF_COLUMNS)


def calls_to_gff(calls: Iterable[NucleosomeCall], result: RecordResult) -> str:
    """
    Render calls as tab-separated GFF-like lines (no header).

    Example:
        >>> print(calls_to_gff(result.variant('stationary').selected, result))
        chrI    evidence    stat_nucleosome    1201    1347    0.0123    +    .    ACGT...
    """
    frame = calls_dataframe(calls, result)
    if frame.empty:
        return ''
    return frame.to_csv(sep='\t', header=False, index=False)


def _append(frame: pd.DataFrame, path: str) -> None:
    if not frame.empty:
        frame.to_csv(path, sep='\t', header=False, index=False, mode='a')


def export_results(results: List[RecordResult], out_dir: str) -> Dict[str, str]:
    """
    Write every output file for ``results`` into ``out_dir``.

    Files are truncated first, then each record appends its rows in input
    order. Returns a mapping of output kind to path.
    """
    os.makedirs(out_dir, exist_ok=True)
    variants = []
    for result in results:
        for name in result.variants:
            if name not in variants:
                variants.append(name)

    paths = {
        'curvature': os.path.join(out_dir, CURVATURE_FILE),
        'symcurv': os.path.join(out_dir, SYMCURV_FILE),
        'aggregate': os.path.join(out_dir, AGGREGATE_FILE),
        'smoothed': os.path.join(out_dir, SMOOTHED_FILE),
    }
    for name in variants:
        tag = ROLL_VARIANTS[name]['file_tag']
        paths[f'{name}_overlapping'] = os.path.join(out_dir, OVERLAPPING_CALLS_FILE.format(tag=tag))
        paths[f'{name}_non_overlapping'] = os.path.join(out_dir, NON_OVERLAPPING_CALLS_FILE.format(tag=tag))

    for path in paths.values():
        open(path, 'w').close()

    for result in results:
        _append(curvature_dataframe(result), paths['curvature'])
        _append(symcurv_dataframe(result), paths['symcurv'])
        _append(smoothed_dataframe(result), paths['smoothed'])
        for name, variant in result.variants.items():
            _append(calls_dataframe(variant.calls, result), paths[f'{name}_overlapping'])
            _append(calls_dataframe(variant.selected, result), paths[f'{name}_non_overlapping'])

    _append(aggregate_dataframe(results), paths['aggregate'])
    logger.info(f"Wrote {len(paths)} output files for {len(results)} record(s) to {out_dir}")
    return paths
