"""slot-tagger: BIO label codec for slot filling.

Encodes slot-annotated utterances into per-token BIO labels (with an
entity qualifier) for training a sequence-labeling model, and decodes the
model's per-token label probabilities back into slot spans.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("slot-tagger")
except PackageNotFoundError:
    __version__ = "0.0.0"

from slot_tagger.config import SlotTaggerConfig, resolve_config, validate_overrides
from slot_tagger.decoding import combine_slots, decode, decode_matrix, is_valid_slot_tag, make_slot
from slot_tagger.encoding import Utterance, encode, encode_sequence, encode_utterance
from slot_tagger.exceptions import (
    ConfigValidationError,
    LabelFormatError,
    SlotTaggerError,
    UndefinedTagError,
)
from slot_tagger.extractor import SlotExtractor
from slot_tagger.models import (
    ExtractedEntity,
    IntentDefinition,
    Sequence,
    Slot,
    SlotDefinition,
    SlotEntity,
    Token,
)
from slot_tagger.tags import BIO, TagResult, format_label, parse_label

__all__ = [
    "BIO",
    "ConfigValidationError",
    "ExtractedEntity",
    "IntentDefinition",
    "LabelFormatError",
    "Sequence",
    "Slot",
    "SlotDefinition",
    "SlotEntity",
    "SlotExtractor",
    "SlotTaggerConfig",
    "SlotTaggerError",
    "TagResult",
    "Token",
    "UndefinedTagError",
    "Utterance",
    "__version__",
    "combine_slots",
    "decode",
    "decode_matrix",
    "encode",
    "encode_sequence",
    "encode_utterance",
    "format_label",
    "is_valid_slot_tag",
    "make_slot",
    "parse_label",
    "resolve_config",
    "validate_overrides",
]
