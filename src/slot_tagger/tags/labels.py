"""Label string wire format.

The sequence-labeling model is trained against, and emits, these labels::

    "o"                 outside any slot
    "B-<name>"          begin, entity-bound occurrence
    "B-<name>/any"      begin, free-text occurrence
    "I-<name>"          continuation, entity-bound
    "I-<name>/any"      continuation, free-text

The ``/any`` qualifier is present exactly when the occurrence is not bound
to a recognized entity.
"""

from __future__ import annotations

from slot_tagger.exceptions import LabelFormatError
from slot_tagger.tags.types import BIO, ParsedLabel

OUTSIDE_LABEL = BIO.OUT.value
ANY_QUALIFIER = "/any"
_SEPARATOR = "-"
_SPAN_TAGS = {BIO.BEGINNING.value: BIO.BEGINNING, BIO.INSIDE.value: BIO.INSIDE}


def format_label(tag: BIO, name: str = "", entity_bound: bool = False) -> str:
    """Build the label string for a tag.

    Args:
        tag: Position of the token within its slot occurrence.
        name: Slot name. Ignored for OUT.
        entity_bound: Whether the occurrence is bound to a recognized entity.

    Returns:
        The label string, e.g. ``"B-person/any"``.

    Raises:
        LabelFormatError: If a Beginning or Inside label has no slot name.
    """
    if tag is BIO.OUT:
        return OUTSIDE_LABEL
    if not name:
        raise LabelFormatError(f"{tag.value!r} label requires a slot name")
    qualifier = "" if entity_bound else ANY_QUALIFIER
    return f"{tag.value}{_SEPARATOR}{name}{qualifier}"


def parse_label(label: str) -> ParsedLabel:
    """Parse a label string into its tag, slot name and entity-boundedness.

    Raises:
        LabelFormatError: If the label does not follow the wire format.
    """
    if label == OUTSIDE_LABEL:
        return ParsedLabel(tag=BIO.OUT, name="", entity_bound=False)

    prefix, sep, rest = label.partition(_SEPARATOR)
    tag = _SPAN_TAGS.get(prefix)
    if tag is None or not sep:
        raise LabelFormatError(f"Unrecognized label: {label!r}")

    entity_bound = not rest.endswith(ANY_QUALIFIER)
    name = rest if entity_bound else rest[: -len(ANY_QUALIFIER)]
    if not name:
        raise LabelFormatError(f"Label has an empty slot name: {label!r}")
    return ParsedLabel(tag=tag, name=name, entity_bound=entity_bound)


def is_label(label: str) -> bool:
    """Return True if *label* follows the wire format."""
    try:
        parse_label(label)
    except LabelFormatError:
        return False
    return True
