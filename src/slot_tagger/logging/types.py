"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TokenDecodingRecord:
    """Immutable record of one token going through slot decoding.

    Attributes:
        token_index: Position of the token in the utterance.
        token_text: Token surface text, whitespace marker stripped.
        intent_name: Intent whose slots are being extracted.
        tag: Decoded BIO tag value (``"o"``, ``"B"`` or ``"I"``), or empty
            when no tag could be decoded.
        slot_name: Decoded slot name (empty for OUT).
        probability: Raw probability of the winning label.
        is_valid: Whether the tag passed the validity filter.
        action: What the merger did: ``"new"``, ``"extend"``, ``"replace"``,
            ``"keep"``, ``"skip"`` or ``"undefined"``.
        entity_bound: Whether the resulting accumulated slot is entity-bound.
        threshold: Acceptance threshold in force.
        elapsed_ms: Time spent on this token (milliseconds).
    """

    # Token
    token_index: int
    token_text: str
    intent_name: str

    # Decoder
    tag: str
    slot_name: str
    probability: float

    # Filter and merger
    is_valid: bool
    action: str
    entity_bound: bool

    # Config snapshot
    threshold: float

    # Timing
    elapsed_ms: float
