"""Diagnostic logging subsystem for slot-tagger.

Provides immutable per-token decoding records and a configurable logger
that supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from slot_tagger.logging.logger import DecodingLogger
from slot_tagger.logging.types import TokenDecodingRecord

__all__ = [
    "DecodingLogger",
    "TokenDecodingRecord",
]
