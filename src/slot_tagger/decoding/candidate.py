"""Candidate slot for a single token, before merging."""

from __future__ import annotations

from collections.abc import Iterable

from slot_tagger.models import ExtractedEntity, Slot, SlotDefinition, Token
from slot_tagger.tags.types import TagResult


def find_entity(
    token: Token,
    slot_definition: SlotDefinition | None,
    entities: Iterable[ExtractedEntity],
) -> ExtractedEntity | None:
    """Return the first entity of an accepted type that covers *token*."""
    if slot_definition is None or not slot_definition.entities:
        return None
    for entity in entities:
        if entity.type in slot_definition.entities and entity.covers(token):
            return entity
    return None


def make_slot(
    tag: TagResult,
    token: Token,
    slot_definition: SlotDefinition | None,
    entities: Iterable[ExtractedEntity] = (),
) -> Slot:
    """Build the slot contributed by *token* alone.

    An entity of a type accepted by the slot definition and covering the
    token binds the slot: its source, value and descriptor are used.
    Otherwise the slot is free text and both source and value are the
    token text.
    """
    entity = find_entity(token, slot_definition, entities)
    if entity is None:
        return Slot(
            name=tag.name,
            source=token.text,
            value=token.text,
            confidence=tag.probability,
        )
    return Slot(
        name=tag.name,
        source=entity.source,
        value=entity.value,
        entity=entity.to_slot_entity(),
        confidence=tag.probability,
    )
