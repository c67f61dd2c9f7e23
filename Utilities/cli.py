"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ symcurv - Command Line Entry Point                                           │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

USAGE::

    symcurv genome.fa SYMCURV_OUT --processes 4
    symcurv genome.fa SYMCURV_OUT --matrices my_matrices.yaml --verbose

Exit codes: 0 on success, 1 when the analysis fails, 2 on invalid arguments.
"""
# ═══════════════════════════════════════════════════════════════════════════════
# IMPORTS
# ═══════════════════════════════════════════════════════════════════════════════
import argparse
import logging
import sys
import time
from typing import List, Optional

import yaml

from Engines.curvature import DEFAULT_MATRICES
from Utilities.config.analysis import SYMCURV_CONFIG, SymCurvParameters
from Utilities.config.matrix_loader import load_matrices
from Utilities.export.track_exporter import export_results
from Utilities.symcurv_scanner import analyze_file, __version__

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {number}")
    return number


def _unit_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number, got '{value}'")
    if not 0.0 <= number <= 1.0:
        raise argparse.ArgumentTypeError(f"must be between 0 and 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='symcurv',
        description="Predict nucleosome positions from DNA curvature symmetry (SymCurv)"
    )
    parser.add_argument('input', help='FASTA file; headers may be >title:offset:strand')
    parser.add_argument('output', help='Directory for the output files')
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log per-stage debug information'
    )
    parser.add_argument(
        '--matrices',
        metavar='YAML',
        help='YAML file overriding twist, tilt, roll_stationary and/or roll_activated'
    )
    parser.add_argument(
        '--curve-step', type=_positive_int, default=SYMCURV_CONFIG['curve_step'],
        help='Distance between averaged points used for curvature (default: %(default)s)'
    )
    parser.add_argument(
        '--curve-scale', type=_unit_float, default=SYMCURV_CONFIG['curve_scale'],
        help='Scale applied to the curvature distance, 0-1 (default: %(default)s)'
    )
    parser.add_argument(
        '--curve-step-one', type=_positive_int, default=SYMCURV_CONFIG['curve_step_one'],
        help='Outer half-span of the rolling average (default: %(default)s)'
    )
    parser.add_argument(
        '--curve-step-two', type=_positive_int, default=SYMCURV_CONFIG['curve_step_two'],
        help='Inner half-span of the rolling average (default: %(default)s)'
    )
    parser.add_argument(
        '--symcurv-win', type=_positive_int, default=SYMCURV_CONFIG['symcurv_win'],
        help='Full symmetry window (default: %(default)s)'
    )
    parser.add_argument(
        '--symcurv-step', type=_positive_int, default=SYMCURV_CONFIG['symcurv_step'],
        help='Dyad stride (default: %(default)s)'
    )
    parser.add_argument(
        '--min-linker-size', type=_non_negative_int, default=SYMCURV_CONFIG['min_linker_size'],
        help='Minimum linker between non-overlapping calls (default: %(default)s)'
    )
    parser.add_argument(
        '--processes', type=_positive_int, default=None,
        help='Worker processes for multi-record files (default: CPU count)'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s: %(message)s'
    )

    if args.curve_step_two > args.curve_step_one - 2:
        parser.error(
            f"--curve-step-two ({args.curve_step_two}) must be at most "
            f"--curve-step-one - 2 ({args.curve_step_one - 2})"
        )

    start = time.time()
    try:
        params = SymCurvParameters.from_config(**vars(args))
        matrices = load_matrices(args.matrices) if args.matrices else DEFAULT_MATRICES
        results = analyze_file(args.input, params, matrices, args.processes)
        export_results(results, args.output)
    except (ValueError, OSError, yaml.YAMLError) as e:
        logger.error(f"{e}")
        return 1

    logger.info(f"Run complete in {time.time() - start:.2f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())
