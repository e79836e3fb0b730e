"""Domain models shared by the encoder and the decoder.

Tokens and utterances are produced by an external tokenizer, entities by an
external entity recognizer and intent definitions by an external catalog.
All models are immutable; the decoder builds new values instead of mutating.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# Leading-whitespace marker emitted by the tokenizer in place of a space.
SPACE = "▁"


@dataclass(frozen=True, slots=True)
class Token:
    """One token of an utterance.

    Attributes:
        value: Raw surface form. May start with a whitespace marker (a
            literal whitespace character or ``SPACE``) when the token was
            preceded by a space in the original text.
        canonical: Normalized form of the token.
        offset: Character offset of ``value`` within the utterance.
        slot: Slot name the token is annotated with (training only).
        matched_entities: Identifiers of entities matched over the slot span
            the token belongs to (training only).
    """

    value: str
    canonical: str = ""
    offset: int = 0
    slot: str | None = None
    matched_entities: tuple[str, ...] = ()

    @property
    def has_leading_space(self) -> bool:
        return bool(self.value) and (self.value[0] == SPACE or self.value[0].isspace())

    @property
    def text(self) -> str:
        """Surface form without the leading whitespace marker."""
        return self.value[1:] if self.has_leading_space else self.value

    @property
    def start(self) -> int:
        return self.offset + (len(self.value) - len(self.text))

    @property
    def end(self) -> int:
        return self.offset + len(self.value)


@dataclass(frozen=True, slots=True)
class Sequence:
    """A pre-tagged utterance, as stored in a training set."""

    canonical: str
    intent: str
    tokens: tuple[Token, ...]


@dataclass(frozen=True, slots=True)
class SlotEntity:
    """Entity descriptor attached to an entity-bound slot."""

    type: str
    meta: Mapping[str, Any] = field(default_factory=dict)
    data: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class Slot:
    """A slot span extracted from an utterance.

    Attributes:
        name: Slot name declared on the intent.
        source: Raw surface text covered by the span.
        value: ``source`` for free-text slots, the entity value otherwise.
        entity: Present only when the span is bound to a recognized entity.
        confidence: Probability of the tag that produced the slot.
    """

    name: str
    source: str
    value: Any
    entity: SlotEntity | None = None
    confidence: float | None = None

    @property
    def is_entity_bound(self) -> bool:
        return self.entity is not None


@dataclass(frozen=True, slots=True)
class ExtractedEntity:
    """Entity found by the entity recognizer over a character range."""

    type: str
    value: Any
    source: str
    start: int
    end: int
    confidence: float = 1.0
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def covers(self, token: Token) -> bool:
        """Return True if the entity range includes the whole token text."""
        return self.start <= token.start and self.end >= token.end

    def to_slot_entity(self) -> SlotEntity:
        meta = {
            "start": self.start,
            "end": self.end,
            "source": self.source,
            "confidence": self.confidence,
            **self.metadata,
        }
        return SlotEntity(type=self.type, meta=meta, data={"value": self.value})


@dataclass(frozen=True, slots=True)
class SlotDefinition:
    """A slot declared on an intent.

    Attributes:
        name: Slot name.
        entities: Entity types that can bind the slot. Empty means the slot
            only ever holds free text.
    """

    name: str
    entities: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class IntentDefinition:
    """An intent and its declared slots. Read-only."""

    name: str
    slots: tuple[SlotDefinition, ...] = ()

    @property
    def slot_names(self) -> tuple[str, ...]:
        return tuple(slot.name for slot in self.slots)

    def get_slot(self, name: str) -> SlotDefinition | None:
        for slot in self.slots:
            if slot.name == name:
                return slot
        return None
