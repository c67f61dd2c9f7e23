"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ SequenceContext - Encoded Sequence Shared by Both Roll Variants              │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

DESCRIPTION:
    Encapsulates one input record with all one-time preprocessing applied.

    The raw nucleotide text is uppercased and every character outside ACGT
    is coerced to ``A``. This is a modelling simplification of SymCurv, not
    a validation step. The minus strand is then turned into its reverse
    complement and the result is mapped to the ordinal alphabet
    A=0, T=1, G=2, C=3.

    A single ``SequenceContext`` is built per record and shared by the
    stationary and activated pipelines, so encoding happens exactly once.

USAGE::

    from Utilities.core.sequence_context import SequenceRecord, SequenceContext

    record = SequenceRecord("chrI", 1000, "-", "acgtN")
    ctx = SequenceContext.from_record(record)
    print(ctx.bases)   # "TACGT"
    print(ctx.codes)   # [1 0 3 2 1]
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

# Ordinal alphabet used to index the structural matrices
SYMBOLS = "ATGC"
FORWARD_STRAND = "+"
REVERSE_STRAND = "-"
VALID_STRANDS = (FORWARD_STRAND, REVERSE_STRAND)

# Fast ASCII -> symbol lookup; everything unknown maps to A (0)
_ASCII_TO_CODE = np.zeros(256, dtype=np.int8)
for _code, _base in enumerate(SYMBOLS):
    _ASCII_TO_CODE[ord(_base)] = _code
    _ASCII_TO_CODE[ord(_base.lower())] = _code

_CODE_TO_ASCII = np.frombuffer(SYMBOLS.encode("ascii"), dtype=np.uint8)
_REVCOMP_TABLE = str.maketrans("ACGTacgt", "TGCAtgca")


@dataclass(frozen=True)
class SequenceRecord:
    """
    One input record as handed over by the ingestion layer.

    Attributes:
        label: Sequence identifier carried into every output row
        offset: Genomic coordinate added to local positions
        strand: '+' for forward, '-' to analyse the reverse complement
        sequence: Raw nucleotide text
    """
    label: str
    offset: int = 0
    strand: str = FORWARD_STRAND
    sequence: str = ""

    def __post_init__(self):
        if self.strand not in VALID_STRANDS:
            raise ValueError(f"Strand must be '+' or '-', got {self.strand!r}")
        if self.offset < 0:
            raise ValueError(f"Offset must be non-negative, got {self.offset}")


def reverse_complement(seq: str) -> str:
    """
    Reverse complement of a DNA string.

    Example:
        >>> reverse_complement("ATCG")
        'CGAT'
    """
    return seq.translate(_REVCOMP_TABLE)[::-1]


def encode_sequence(sequence: str, strand: str = FORWARD_STRAND) -> np.ndarray:
    """
    Map a nucleotide string to a read-only ``int8`` array of symbol codes.

    Non-ACGT characters (any case) become A before anything else happens, so
    on the minus strand an ``N`` ends up as ``T``.

    Args:
        sequence: Raw nucleotide text (whitespace is not stripped here)
        strand: '+' or '-'

    Returns:
        Array of codes in 0..3, same length as ``sequence``
    """
    if strand not in VALID_STRANDS:
        raise ValueError(f"Strand must be '+' or '-', got {strand!r}")

    if not sequence:
        codes = np.zeros(0, dtype=np.int8)
    else:
        raw = np.frombuffer(sequence.encode("ascii", errors="replace"), dtype=np.uint8)
        codes = _ASCII_TO_CODE[raw]
    if strand == REVERSE_STRAND:
        # A<->T and G<->C are 0<->1 and 2<->3
        codes = (codes ^ 1)[::-1]
    codes = np.ascontiguousarray(codes, dtype=np.int8)
    codes.setflags(write=False)
    return codes


def decode_sequence(codes: np.ndarray) -> str:
    """Inverse of :func:`encode_sequence` for an already oriented array."""
    if len(codes) == 0:
        return ""
    return _CODE_TO_ASCII[np.asarray(codes, dtype=np.intp)].tobytes().decode("ascii")


class SequenceContext:
    """
    Encoded, strand-oriented record shared across both roll variants.

    Attributes
    ----------
    label : str
        Sequence identifier passed through from the record.
    offset : int
        Genomic offset added to every reported position.
    strand : str
        Strand the record was read from.
    codes : np.ndarray
        Read-only ``int8`` array of symbol codes.
    bases : str
        Decoded ``codes``; the normalised sequence that was actually scored.
    length : int
        Number of positions (cached).
    """

    __slots__ = ("label", "offset", "strand", "codes", "bases", "length")

    def __init__(
        self,
        sequence: str,
        label: str = "sequence",
        offset: int = 0,
        strand: str = FORWARD_STRAND,
    ) -> None:
        self.label: str = label
        self.offset: int = offset
        self.strand: str = strand
        self.codes: np.ndarray = encode_sequence(sequence, strand)
        self.bases: str = decode_sequence(self.codes)
        self.length: int = len(self.codes)

    @classmethod
    def from_record(cls, record: SequenceRecord) -> "SequenceContext":
        return cls(record.sequence, record.label, record.offset, record.strand)

    def __repr__(self) -> str:
        return (
            f"SequenceContext(label={self.label!r}, offset={self.offset}, "
            f"strand={self.strand!r}, length={self.length:,})"
        )

    def __len__(self) -> int:
        return self.length
