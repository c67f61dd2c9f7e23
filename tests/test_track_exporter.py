"""
╔══════════════════════════════════════════════════════════════════════════════╗
║            TRACK EXPORTER TEST SUITE                                         ║
║        Testing DataFrame Builders, GFF Lines and Output Files                ║
╚══════════════════════════════════════════════════════════════════════════════╝
"""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import random
import shutil
import tempfile
import unittest
import pandas as pd
from Engines.calls import NucleosomeCall
from Utilities.core.sequence_context import SequenceRecord
from Utilities.export.track_exporter import (
    aggregate_dataframe,
    calls_dataframe,
    calls_to_gff,
    curvature_dataframe,
    export_results,
    smoothed_dataframe,
    symcurv_dataframe,
)
from Utilities.symcurv_scanner import SymCurvScanner

SEQUENCE = "".join(random.Random(31).choice("ACGT") for _ in range(600))


class TestTrackExporter(unittest.TestCase):
    """Test suite for the exporter functions"""

    @classmethod
    def setUpClass(cls):
        scanner = SymCurvScanner()
        cls.result = scanner.analyze_record(SequenceRecord("chrX", 1000, "+", SEQUENCE))
        cls.short = scanner.analyze_record(SequenceRecord("tiny", 0, "-", "ACGTACGT"))

    def test_curvature_dataframe(self):
        frame = curvature_dataframe(self.result)
        self.assertEqual(list(frame.columns), ['Sequence_Name', 'Position', 'Base', 'stationary', 'activated'])
        self.assertEqual(len(frame), 600 - 42)
        self.assertEqual(frame['Position'].iloc[0], 1021)
        self.assertEqual(frame['Base'].iloc[0], SEQUENCE[21])
        self.assertFalse(frame[['stationary', 'activated']].isna().any().any())

    def test_symcurv_dataframe(self):
        frame = symcurv_dataframe(self.result)
        self.assertEqual(frame['Position'].tolist(), [p + 1000 for p in range(101, 600 - 21 - 101)])

    def test_smoothed_dataframe(self):
        frame = smoothed_dataframe(self.result)
        size = self.result.variant('stationary').symcurv.length
        self.assertEqual(frame['Position'].tolist(), [p + 1000 for p in range(1, size + 1)])

    def test_aggregate_dataframe(self):
        frame = aggregate_dataframe([self.result, self.short])
        self.assertEqual(frame['Record'].tolist(), ["chrX:1000:+:579", "tiny:0:-:0"])
        self.assertAlmostEqual(frame['stationary'].iloc[0], self.result.variant('stationary').symcurv_mean)
        self.assertEqual(frame['activated'].iloc[1], 0.0)

    def test_empty_record_frames(self):
        self.assertTrue(curvature_dataframe(self.short).empty)
        self.assertTrue(symcurv_dataframe(self.short).empty)
        self.assertEqual(calls_to_gff([], self.short), '')

    def test_gff_line(self):
        calls = [NucleosomeCall(200, 250.0, 127, 273, 'activated'), NucleosomeCall(100, 0.5, 27, 173)]
        frame = calls_dataframe(calls, self.result)
        self.assertEqual(frame['start'].tolist(), [1027, 1127])
        line = calls_to_gff(calls, self.result).splitlines()[1]
        fields = line.split('\t')
        self.assertEqual(fields[:8], ['chrX', 'evidence', 'act_nucleosome', '1127', '1273', '100.0', '+', '.'])
        self.assertEqual(fields[8], SEQUENCE[127:274])
        self.assertEqual(len(fields[8]), 147)


class TestExportResults(unittest.TestCase):
    """Test suite for export_results"""

    def setUp(self):
        self.out_dir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.out_dir)
        scanner = SymCurvScanner()
        self.results = [
            scanner.analyze_record(SequenceRecord("a", 0, "+", SEQUENCE)),
            scanner.analyze_record(SequenceRecord("b", 50, "-", SEQUENCE[:400])),
        ]

    def test_writes_all_files(self):
        paths = export_results(self.results, os.path.join(self.out_dir, 'SYMCURV_OUT'))
        names = sorted(os.path.basename(p) for p in paths.values())
        self.assertEqual(names, sorted([
            'out_curv.dat', 'out_symcurv.dat', 'out_symcurv_aggr.dat', 'out_symcurv_avr.dat',
            'out_init_calls_nuc.gff', 'out_init_calls_dnase.gff',
            'out_fin_calls_nuc.gff', 'out_fin_calls_dnase.gff',
        ]))
        for path in paths.values():
            self.assertTrue(os.path.exists(path))

        curv = pd.read_csv(paths['curvature'], sep='\t', header=None)
        self.assertEqual(len(curv), (600 - 42) + (400 - 42))
        self.assertEqual(curv[0].unique().tolist(), ['a', 'b'])

        aggr = pd.read_csv(paths['aggregate'], sep='\t', header=None)
        self.assertEqual(aggr[0].tolist(), ['a:0:+:579', 'b:50:-:379'])

        selected = self.results[0].variant('stationary').selected
        with open(paths['stationary_non_overlapping']) as f:
            lines = [line for line in f.read().splitlines() if line.startswith('a\t')]
        self.assertEqual(len(lines), len(selected))

    def test_rerun_truncates(self):
        out = os.path.join(self.out_dir, 'out')
        export_results(self.results, out)
        paths = export_results(self.results[:1], out)
        aggr = pd.read_csv(paths['aggregate'], sep='\t', header=None)
        self.assertEqual(len(aggr), 1)


if __name__ == '__main__':
    unittest.main()
