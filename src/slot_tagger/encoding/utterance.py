"""Utterance with slot and entity annotations overlaid by character range.

Tokens are plain strings (whitespace tokens included) whose offsets are
given by concatenation. Annotations are half-open ``[start, end)`` character
ranges; a token is covered when its own range intersects the annotation.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from slot_tagger.models import ExtractedEntity, Slot


@dataclass(frozen=True, slots=True)
class SlotOccurrence:
    """One ``tag_slot`` call: a slot over a character range.

    Attributes:
        slot: The annotated slot.
        start: Inclusive start offset.
        end: Exclusive end offset.
        first_token: Index of the first token covered by the range.
    """

    slot: Slot
    start: int
    end: int
    first_token: int


@dataclass(slots=True)
class UtteranceToken:
    """A token of an Utterance together with the annotations covering it."""

    index: int
    value: str
    offset: int
    slots: list[SlotOccurrence] = field(default_factory=list)
    entities: list[ExtractedEntity] = field(default_factory=list)

    @property
    def end(self) -> int:
        return self.offset + len(self.value)

    @property
    def is_space(self) -> bool:
        return bool(self.value) and self.value.isspace()

    def overlaps(self, start: int, end: int) -> bool:
        return max(self.offset, start) < min(self.end, end)


class Utterance:
    """Plain-text tokens with slot and entity ranges tagged after the fact."""

    def __init__(self, tokens: Iterable[str]) -> None:
        self._tokens: list[UtteranceToken] = []
        offset = 0
        for index, value in enumerate(tokens):
            self._tokens.append(UtteranceToken(index=index, value=value, offset=offset))
            offset += len(value)
        self._text_length = offset

    @property
    def tokens(self) -> tuple[UtteranceToken, ...]:
        return tuple(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def to_string(self) -> str:
        return "".join(token.value for token in self._tokens)

    def tag_slot(self, slot: Slot, start: int, end: int) -> SlotOccurrence:
        """Mark every token intersecting ``[start, end)`` as part of *slot*.

        Raises:
            ValueError: If the range is empty or covers no token.
        """
        covered = self._covered(start, end)
        occurrence = SlotOccurrence(slot=slot, start=start, end=end, first_token=covered[0].index)
        for token in covered:
            token.slots.append(occurrence)
        return occurrence

    def tag_entity(self, entity: ExtractedEntity, start: int, end: int) -> None:
        """Mark every token intersecting ``[start, end)`` as matching *entity*.

        Raises:
            ValueError: If the range is empty or covers no token.
        """
        for token in self._covered(start, end):
            token.entities.append(entity)

    def _covered(self, start: int, end: int) -> list[UtteranceToken]:
        if start >= end:
            raise ValueError(f"Empty range [{start}, {end})")
        covered = [token for token in self._tokens if token.overlaps(start, end)]
        if not covered:
            raise ValueError(
                f"Range [{start}, {end}) covers no token (utterance length {self._text_length})"
            )
        return covered
