"""Decoding subsystem for slot-tagger.

Turns per-token label probabilities back into slot spans: decoding,
validity filtering, candidate building and merging.
"""

from slot_tagger.decoding.candidate import find_entity, make_slot
from slot_tagger.decoding.decoder import decode, decode_matrix
from slot_tagger.decoding.merger import combine_slots, extend_slot
from slot_tagger.decoding.validity import is_valid_slot_tag

__all__ = [
    "combine_slots",
    "decode",
    "decode_matrix",
    "extend_slot",
    "find_entity",
    "is_valid_slot_tag",
    "make_slot",
]
