"""
Utilities package for SymCurvFinder.

Contains utility modules for:
- Configuration (config/)
- Core data types (core/)
- Export utilities (export/)
- Main scanner API (symcurv_scanner.py)
- FASTA ingestion (fasta_reader.py)
- Command line entry point (cli.py)
"""
