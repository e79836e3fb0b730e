"""Tag subsystem for slot-tagger.

BIO tag types and the label string wire format shared by the encoder
and the decoder.
"""

from slot_tagger.tags.labels import (
    ANY_QUALIFIER,
    OUTSIDE_LABEL,
    format_label,
    is_label,
    parse_label,
)
from slot_tagger.tags.types import BIO, ParsedLabel, TagResult

__all__ = [
    "ANY_QUALIFIER",
    "BIO",
    "OUTSIDE_LABEL",
    "ParsedLabel",
    "TagResult",
    "format_label",
    "is_label",
    "parse_label",
]
