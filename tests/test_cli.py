"""
╔══════════════════════════════════════════════════════════════════════════════╗
║            COMMAND LINE TEST SUITE                                           ║
║        Testing the symcurv Entry Point                                       ║
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
import numpy as np
import yaml
from Utilities.cli import build_parser, main

SEQUENCE = "".join(random.Random(5).choice("ACGT") for _ in range(450))


class TestCommandLine(unittest.TestCase):
    """Test suite for Utilities.cli"""

    def setUp(self):
        self.work_dir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.work_dir)
        self.fasta = os.path.join(self.work_dir, 'input.fa')
        with open(self.fasta, 'w') as f:
            f.write(f">chrIII:200:+\n{SEQUENCE}\n>chrIII:900:-\n{SEQUENCE[:300]}\n")
        self.out_dir = os.path.join(self.work_dir, 'SYMCURV_OUT')

    def test_run(self):
        self.assertEqual(main([self.fasta, self.out_dir, '--processes', '1']), 0)
        self.assertEqual(len(os.listdir(self.out_dir)), 8)
        with open(os.path.join(self.out_dir, 'out_symcurv_aggr.dat')) as f:
            records = [line.split('\t')[0] for line in f.read().splitlines()]
        self.assertEqual(records, ['chrIII:200:+:429', 'chrIII:900:-:279'])

    def test_parameter_flags(self):
        args = build_parser().parse_args([self.fasta, self.out_dir, '--curve-step', '10',
                                          '--symcurv-win', '51', '--min-linker-size', '0'])
        self.assertEqual(args.curve_step, 10)
        self.assertEqual(args.symcurv_win, 51)
        self.assertEqual(args.min_linker_size, 0)
        self.assertEqual(main([self.fasta, self.out_dir, '--curve-step', '10', '--processes', '1']), 0)
        with open(os.path.join(self.out_dir, 'out_symcurv_aggr.dat')) as f:
            self.assertTrue(f.readline().startswith('chrIII:200:+:434'))

    def test_invalid_arguments_exit_2(self):
        for argv in (
            [self.fasta, self.out_dir, '--curve-scale', '2'],
            [self.fasta, self.out_dir, '--curve-step', '0'],
            [self.fasta, self.out_dir, '--symcurv-win', 'wide'],
            [self.fasta, self.out_dir, '--curve-step-two', '5'],
        ):
            with self.assertRaises(SystemExit) as ctx:
                main(argv)
            self.assertEqual(ctx.exception.code, 2)

    def test_missing_input_exit_1(self):
        self.assertEqual(main([os.path.join(self.work_dir, 'missing.fa'), self.out_dir]), 1)

    def test_bad_matrix_file_exit_1(self):
        matrices = os.path.join(self.work_dir, 'matrices.yaml')
        with open(matrices, 'w') as f:
            yaml.safe_dump({'twist': np.zeros((4, 4)).tolist()}, f)
        self.assertEqual(main([self.fasta, self.out_dir, '--matrices', matrices]), 1)

    def test_matrix_override(self):
        matrices = os.path.join(self.work_dir, 'matrices.yaml')
        with open(matrices, 'w') as f:
            yaml.safe_dump({'roll_activated': np.full((4, 4, 4), 3.0).tolist()}, f)
        self.assertEqual(main([self.fasta, self.out_dir, '--matrices', matrices, '--processes', '1']), 0)

    def test_version(self):
        with self.assertRaises(SystemExit) as ctx:
            main(['--version'])
        self.assertEqual(ctx.exception.code, 0)


if __name__ == '__main__':
    unittest.main()
