"""Validity filter: is a decoded tag real evidence of a slot?"""

from __future__ import annotations

from slot_tagger.config import DEFAULT_SLOT_THRESHOLD
from slot_tagger.models import IntentDefinition, Token
from slot_tagger.tags.types import BIO, TagResult


def is_valid_slot_tag(
    token: Token | None,
    tag: TagResult | None,
    intent_definition: IntentDefinition,
    threshold: float = DEFAULT_SLOT_THRESHOLD,
) -> bool:
    """Return True if *tag* should be trusted as a slot of *intent_definition*.

    All of the following must hold: the token and the tag are present, the
    tag is not OUT, its probability is strictly above *threshold* and its
    slot name is declared on the intent.
    """
    if token is None or tag is None:
        return False
    if tag.tag is BIO.OUT:
        return False
    if not tag.probability > threshold:
        return False
    return tag.name in intent_definition.slot_names
