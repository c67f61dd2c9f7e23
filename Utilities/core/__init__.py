"""Core modules for SymCurvFinder"""

from .sequence_context import (
    SequenceContext,
    SequenceRecord,
    encode_sequence,
    decode_sequence,
    reverse_complement,
)
from .position_track import PositionTrack

__all__ = [
    'SequenceContext',
    'SequenceRecord',
    'encode_sequence',
    'decode_sequence',
    'reverse_complement',
    'PositionTrack',
]
