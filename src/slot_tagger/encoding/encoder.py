"""Tag encoder: annotated utterance -> one label string per token.

Two entry points produce identical labels for equivalent input:

- ``encode_sequence`` for a pre-tagged ``Sequence`` whose tokens carry their
  slot name and matched entities.
- ``encode_utterance`` for an ``Utterance`` whose slots and entities were
  overlaid by character range.

A token outside any slot is labelled ``"o"``. The first token of a slot
occurrence gets ``B``, the following ones ``I``. The ``/any`` qualifier is
added when the token matched no entity.
"""

from __future__ import annotations

import logging
from typing import Any

from slot_tagger.encoding.utterance import Utterance
from slot_tagger.models import Sequence
from slot_tagger.tags.labels import OUTSIDE_LABEL, format_label
from slot_tagger.tags.types import BIO

logger = logging.getLogger("slot_tagger")


def encode_sequence(sequence: Sequence) -> list[str]:
    """Label a pre-tagged sequence.

    Occurrences are delimited by position only: a token starts a new
    occurrence unless the token right before it carries the same slot name.
    """
    labels: list[str] = []
    previous_slot: str | None = None
    for token in sequence.tokens:
        if not token.slot:
            labels.append(OUTSIDE_LABEL)
        else:
            tag = BIO.INSIDE if token.slot == previous_slot else BIO.BEGINNING
            labels.append(format_label(tag, token.slot, entity_bound=bool(token.matched_entities)))
        previous_slot = token.slot or None
    return labels


def encode_utterance(utterance: Utterance) -> list[str]:
    """Label an utterance annotated by character ranges.

    When several slot ranges overlap a token, the first tagged one wins.
    The entity qualifier is decided per token, not per occurrence: an entity
    range covering only part of a slot range yields bare labels on the
    covered tokens and ``/any`` labels on the rest of the same occurrence.
    """
    labels: list[str] = []
    for token in utterance.tokens:
        if not token.slots:
            labels.append(OUTSIDE_LABEL)
            continue
        occurrence = token.slots[0]
        tag = BIO.BEGINNING if occurrence.first_token == token.index else BIO.INSIDE
        labels.append(
            format_label(tag, occurrence.slot.name, entity_bound=bool(token.entities))
        )
    return labels


def encode(annotated: Any) -> list[str]:
    """Label any supported annotated utterance.

    Raises:
        TypeError: If *annotated* is neither a Sequence nor an Utterance.
    """
    if isinstance(annotated, Sequence):
        labels = encode_sequence(annotated)
    elif isinstance(annotated, Utterance):
        labels = encode_utterance(annotated)
    else:
        raise TypeError(f"Cannot encode object of type {type(annotated).__name__}")
    logger.debug("encoded %d tokens: %s", len(labels), " ".join(labels))
    return labels
