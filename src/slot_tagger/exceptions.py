"""Exception hierarchy for slot-tagger.

All exceptions derive from SlotTaggerError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
"""


class SlotTaggerError(Exception):
    """Base exception for all slot-tagger errors."""


class LabelFormatError(SlotTaggerError, ValueError):
    """A label string does not follow the BIO wire format.

    Raised when parsing a label such as ``"X-slot"`` or ``"B-"``, or when
    formatting a Beginning/Inside label without a slot name.
    """


class UndefinedTagError(SlotTaggerError):
    """No tag can be decoded from a label-probability mapping.

    Raised when the mapping is empty or holds no key in the ``"o"``,
    ``"B-..."`` or ``"I-..."`` format. The decoder never synthesizes a
    default tag.
    """


class ConfigValidationError(SlotTaggerError):
    """Configuration field validation failed.

    Raised when per-call overrides contain unknown keys, attempt to
    override infrastructure fields, or fail type validation.
    """
