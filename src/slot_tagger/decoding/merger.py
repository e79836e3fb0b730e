"""Slot merger: reconcile the accumulated slot with the current token.

Decision table, first matching rule wins:

==============  ======  =====================  ==============================
existing        tag     candidate entity?      result
==============  ======  =====================  ==============================
None            any     any                    candidate
free text       I       no                     existing extended by the token
entity-bound    I       no                     existing
free text       I       yes                    existing (open question)
entity-bound    I       yes                    existing (open question)
any             B       any                    higher confidence, incumbent on ties
==============  ======  =====================  ==============================
"""

from __future__ import annotations

import dataclasses

from slot_tagger.models import Slot, Token
from slot_tagger.tags.types import BIO, TagResult


def _confidence(slot: Slot) -> float:
    return slot.confidence if slot.confidence is not None else 0.0


def extend_slot(existing: Slot, token: Token, candidate: Slot) -> Slot:
    """Append *candidate* to a free-text slot, restoring the token's spacing."""
    separator = " " if token.has_leading_space else ""
    source = f"{existing.source}{separator}{candidate.source}"
    return dataclasses.replace(existing, source=source, value=source)


def combine_slots(
    existing: Slot | None,
    token: Token,
    tag: TagResult,
    candidate: Slot,
) -> Slot:
    """Return the slot to accumulate after *token*.

    Args:
        existing: Slot accumulated for this slot name so far, if any.
        token: Current token.
        tag: Decoded tag of the current token.
        candidate: Slot built from the current token alone.

    Returns:
        A slot value. Neither *existing* nor *candidate* is modified.
    """
    if existing is None:
        return candidate

    if tag.tag is BIO.INSIDE:
        if not existing.is_entity_bound and not candidate.is_entity_bound:
            return extend_slot(existing, token, candidate)
        # An entity-bound span is never diluted by a free-text continuation.
        # TODO: confirm with product owners whether an entity-bound candidate
        # under I should ever win; both such cases keep the existing slot.
        return existing

    if tag.tag is BIO.BEGINNING and _confidence(candidate) > _confidence(existing):
        return candidate
    return existing
