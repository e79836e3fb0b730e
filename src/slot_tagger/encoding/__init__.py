"""Encoding subsystem for slot-tagger.

Turns slot-annotated utterances into per-token BIO labels for training
a sequence-labeling model.
"""

from slot_tagger.encoding.encoder import encode, encode_sequence, encode_utterance
from slot_tagger.encoding.utterance import SlotOccurrence, Utterance, UtteranceToken

__all__ = [
    "SlotOccurrence",
    "Utterance",
    "UtteranceToken",
    "encode",
    "encode_sequence",
    "encode_utterance",
]
