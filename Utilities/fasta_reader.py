"""
FASTA ingestion for SymCurvFinder.

Headers of the form ``>title:offset:strand`` (e.g. ``>chrII:10500:-``) carry
the genomic offset and strand of the record; any other header is used as the
title with offset 0 on the ``+`` strand. Lines starting with ``#`` are
comments.
"""

import logging
import os
from typing import Iterator, List, Tuple

from Utilities.core.sequence_context import SequenceRecord, VALID_STRANDS, FORWARD_STRAND

logger = logging.getLogger(__name__)


def parse_header(header: str, default_name: str = "sequence") -> Tuple[str, int, str]:
    """
    Split a FASTA header line into (title, offset, strand).

    Example:
        >>> parse_header(">chrII:10500:-")
        ('chrII', 10500, '-')
        >>> parse_header(">my sequence")
        ('my sequence', 0, '+')
    """
    text = header[1:].strip() if header.startswith('>') else header.strip()
    parts = text.rsplit(':', 2)
    if len(parts) == 3 and parts[2] in VALID_STRANDS and parts[1].isdigit() and parts[0]:
        return parts[0], int(parts[1]), parts[2]
    return (text or default_name), 0, FORWARD_STRAND


def parse_fasta_streaming(fasta_content: str) -> Iterator[SequenceRecord]:
    """
    Yield one :class:`SequenceRecord` per FASTA entry, in file order.

    Whitespace inside sequence lines is removed; case and non-ACGT
    characters are left for the encoder. Entries with an empty sequence are
    still yielded so the caller can report them.
    """
    title = None
    current_seq = []
    sequence_counter = 0

    for line in fasta_content.splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue

        if line.startswith('>'):
            if title is not None:
                yield SequenceRecord(title[0], title[1], title[2], ''.join(current_seq))
            sequence_counter += 1
            title = parse_header(line, f"sequence_{sequence_counter}")
            current_seq = []
        else:
            if title is None:
                sequence_counter += 1
                title = (f"sequence_{sequence_counter}", 0, FORWARD_STRAND)
            current_seq.append(''.join(line.split()))

    if title is not None:
        yield SequenceRecord(title[0], title[1], title[2], ''.join(current_seq))


def parse_fasta(fasta_content: str) -> List[SequenceRecord]:
    """Parse FASTA text into a list of records (see :func:`parse_fasta_streaming`)."""
    return list(parse_fasta_streaming(fasta_content))


def read_fasta_file(filename: str) -> List[SequenceRecord]:
    """
    Read a FASTA file into records.

    Raises:
        FileNotFoundError: if ``filename`` does not exist
    """
    if not os.path.exists(filename):
        raise FileNotFoundError(f"FASTA file not found: {filename}")
    with open(filename, 'r') as f:
        content = f.read()
    records = parse_fasta(content)
    logger.info(f"Read {len(records)} record(s) from {filename}")
    return records
