"""Data types for the tag subsystem."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BIO(str, Enum):
    """Position of a token relative to a slot occurrence."""

    OUT = "o"
    BEGINNING = "B"
    INSIDE = "I"


@dataclass(frozen=True, slots=True)
class ParsedLabel:
    """Structured form of one label string.

    Attributes:
        tag: Position of the token within its slot occurrence.
        name: Slot name with the qualifier stripped (empty for OUT).
        entity_bound: True when the label carries no ``/any`` qualifier.
            Always False for OUT.
    """

    tag: BIO
    name: str
    entity_bound: bool


@dataclass(frozen=True, slots=True)
class TagResult:
    """Decoded tag for one token.

    Attributes:
        tag: Position of the token within its slot occurrence.
        name: Slot name (empty for OUT).
        probability: Raw probability of the winning label, in [0, 1].
    """

    tag: BIO
    name: str
    probability: float

    @property
    def is_outside(self) -> bool:
        return self.tag is BIO.OUT
