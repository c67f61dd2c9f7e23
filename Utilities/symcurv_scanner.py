"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ SymCurvScanner - Sequence-Based Nucleosome Positioning Suite                 │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘
"""
# ═══════════════════════════════════════════════════════════════════════════════
# IMPORTS
# ═══════════════════════════════════════════════════════════════════════════════
import os
import time
import logging
from typing import List, Dict, Any, Optional, Iterable
from concurrent.futures import ProcessPoolExecutor
from concurrent.futures.process import BrokenProcessPool

logger = logging.getLogger(__name__)

from Engines import CurvatureEngine, SymmetryEngine, SmoothingEngine, CallGenerator, GreedySelector
from Engines.curvature import DEFAULT_MATRICES, StructuralMatrices, cumulative_twist
from Utilities.config.analysis import SYMCURV_CONFIG, ROLL_VARIANTS, SymCurvParameters
from Utilities.core.sequence_context import SequenceContext, SequenceRecord, FORWARD_STRAND
from Utilities.core.results import RecordResult, VariantResult
from Utilities.fasta_reader import parse_fasta, read_fasta_file

# ═══════════════════════════════════════════════════════════════════════════════
# TUNABLE PARAMETERS
# ═══════════════════════════════════════════════════════════════════════════════
__version__ = "2025.1"; __author__ = "Dr. Venkata Rajesh Yella"
MAX_WORKERS = SYMCURV_CONFIG['max_workers']
# ═══════════════════════════════════════════════════════════════════════════════


class SymCurvScanner:
    """
    Runs the full pipeline for one record at a time.

    Encoding and the cumulative twist are computed once per record and shared
    by every roll variant; each variant then gets its own curvature, SymCurv,
    smoothed track and call lists. Engines only hold parameters, so one
    scanner can be reused for any number of records.
    """

    def __init__(self, params: Optional[SymCurvParameters] = None,
                 matrices: StructuralMatrices = DEFAULT_MATRICES):
        self.params = params or SymCurvParameters()
        self.matrices = matrices
        p = self.params
        self.curvature_engines = {
            name: CurvatureEngine(ROLL_VARIANTS[name]['matrix'], matrices, p.curve_step,
                                  p.curve_scale, p.curve_step_one, p.curve_step_two)
            for name in p.variants
        }
        self.symmetry = SymmetryEngine(p.symcurv_win, p.symcurv_step)
        self.smoothing = SmoothingEngine(p.smoothing_half_window)
        self.call_generator = CallGenerator(p.call_half_size)
        self.selector = GreedySelector(p.min_linker_size, p.nucleosome_size)

    def analyze_record(self, record: SequenceRecord) -> RecordResult:
        """Run every configured roll variant on one record."""
        start_time = time.time()
        context = SequenceContext.from_record(record)
        if context.length == 0:
            logger.warning(f"Empty sequence provided for {record.label}")

        twist_sum = cumulative_twist(context.codes, self.matrices)
        result = RecordResult(context)
        for name, engine in self.curvature_engines.items():
            curvature = engine.compute(context.codes, twist_sum)
            symcurv, mean = self.symmetry.compute(curvature)
            smoothed = self.smoothing.compute(symcurv)
            calls = self.call_generator.generate(symcurv, context.length, name)
            selected = self.selector.select(calls)
            result.variants[name] = VariantResult(
                variant=name,
                label=ROLL_VARIANTS[name]['label'],
                curvature=curvature,
                symcurv=symcurv,
                symcurv_mean=mean,
                smoothed=smoothed,
                calls=calls,
                selected=selected,
            )

        result.processing_time = time.time() - start_time
        counts = ", ".join(
            f"{name}: {len(v.calls)} calls / {len(v.selected)} non-overlapping"
            for name, v in result.variants.items()
        )
        logger.info(f"{context.label} ({context.length:,} bp, {context.strand}) -> {counts} "
                    f"in {result.processing_time:.2f}s")
        return result

    def analyze_sequence(self, sequence: str, sequence_name: str = "sequence",
                         offset: int = 0, strand: str = FORWARD_STRAND) -> RecordResult:
        return self.analyze_record(SequenceRecord(sequence_name, offset, strand, sequence))

    def get_engine_info(self) -> Dict[str, Any]:
        engines = list(self.curvature_engines.values()) + [
            self.symmetry, self.smoothing, self.call_generator, self.selector
        ]
        return {
            'version': __version__,
            'parameters': self.params.to_dict(),
            'engines': [engine.get_statistics() for engine in engines],
        }


def analyze_sequence(sequence: str, sequence_name: str = "sequence", offset: int = 0,
                     strand: str = FORWARD_STRAND, params: Optional[SymCurvParameters] = None,
                     matrices: StructuralMatrices = DEFAULT_MATRICES) -> RecordResult:
    return SymCurvScanner(params, matrices).analyze_sequence(sequence, sequence_name, offset, strand)


def _analyze_record_worker(record: SequenceRecord, params: SymCurvParameters,
                           matrices: StructuralMatrices) -> RecordResult:
    """Module-level so ProcessPoolExecutor can pickle it."""
    return SymCurvScanner(params, matrices).analyze_record(record)


def analyze_records(records: Iterable[SequenceRecord], params: Optional[SymCurvParameters] = None,
                    matrices: StructuralMatrices = DEFAULT_MATRICES) -> List[RecordResult]:
    scanner = SymCurvScanner(params, matrices)
    return [scanner.analyze_record(record) for record in records]


def analyze_records_parallel(records: Iterable[SequenceRecord],
                             params: Optional[SymCurvParameters] = None,
                             matrices: StructuralMatrices = DEFAULT_MATRICES,
                             num_processes: Optional[int] = MAX_WORKERS) -> List[RecordResult]:
    """
    Analyze records in worker processes, one record per task.

    Results come back in input order. Falls back to sequential processing
    when a process pool cannot be used; errors raised by the analysis itself
    are propagated.
    """
    records = list(records)
    params = params or SymCurvParameters()
    if not records:
        return []
    num_processes = num_processes or min(os.cpu_count() or 1, len(records))
    if num_processes <= 1 or len(records) == 1:
        return analyze_records(records, params, matrices)

    try:
        with ProcessPoolExecutor(max_workers=num_processes) as executor:
            futures = [executor.submit(_analyze_record_worker, record, params, matrices)
                       for record in records]
            results = [future.result() for future in futures]
        logger.info(f"Parallel analysis completed: {len(records)} records using {num_processes} processes")
        return results
    except (OSError, BrokenProcessPool) as e:
        logger.warning(f"ProcessPoolExecutor failed ({e}), falling back to sequential processing")
        return analyze_records(records, params, matrices)


def analyze_fasta(fasta_content: str, params: Optional[SymCurvParameters] = None,
                  matrices: StructuralMatrices = DEFAULT_MATRICES,
                  num_processes: Optional[int] = 1) -> List[RecordResult]:
    return analyze_records_parallel(parse_fasta(fasta_content), params, matrices, num_processes)


def analyze_file(filename: str, params: Optional[SymCurvParameters] = None,
                 matrices: StructuralMatrices = DEFAULT_MATRICES,
                 num_processes: Optional[int] = MAX_WORKERS) -> List[RecordResult]:
    if not os.path.exists(filename): raise FileNotFoundError(f"File not found: {filename}")
    return analyze_records_parallel(read_fasta_file(filename), params, matrices, num_processes)
