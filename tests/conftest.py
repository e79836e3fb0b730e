"""Shared pytest fixtures for slot-tagger tests.

Provides reusable configuration objects, intent definitions and the
annotated utterance used across the encoder and extractor tests.
"""

from __future__ import annotations

import pytest

from slot_tagger.config import SlotTaggerConfig
from slot_tagger.models import IntentDefinition, Sequence, SlotDefinition, Token


@pytest.fixture
def default_config() -> SlotTaggerConfig:
    """Return a SlotTaggerConfig with all default values, ignoring any .env file."""
    return SlotTaggerConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def silent_config() -> SlotTaggerConfig:
    """Return a config with no logging for noise-free tests."""
    return SlotTaggerConfig(_env_file=None, log_level="none")  # type: ignore[call-arg]


@pytest.fixture
def diagnostic_config() -> SlotTaggerConfig:
    """Return a config with diagnostic mode and full logging enabled."""
    return SlotTaggerConfig(_env_file=None, log_level="full", diagnostic_mode=True)  # type: ignore[call-arg]


@pytest.fixture
def coffee_intent() -> IntentDefinition:
    """Intent with a single free-text slot."""
    return IntentDefinition(name="brew coffee", slots=(SlotDefinition(name="coffee-type"),))


@pytest.fixture
def warn_intent() -> IntentDefinition:
    """Intent whose ``listener`` slot can be bound to a ``friend`` entity."""
    return IntentDefinition(
        name="warn",
        slots=(
            SlotDefinition(name="listener", entities=("friend",)),
            SlotDefinition(name="person"),
            SlotDefinition(name="group"),
        ),
    )


@pytest.fixture
def warn_sequence() -> Sequence:
    """Pre-tagged 'Careful my friend, Alex W. is one of us'.

    ``listener`` is entity-bound, ``person`` and ``group`` are free text.
    The ``,`` and ``us`` tokens deliberately carry no matched entities.
    """
    return Sequence(
        canonical="Careful my friend, Alex W. is one of us",
        intent="warn",
        tokens=(
            Token("careful", "careful", matched_entities=()),
            Token("my", "my", slot="listener", matched_entities=("friend",)),
            Token("friend", "friend", slot="listener", matched_entities=("friend",)),
            Token(","),
            Token("Alex", "alex", slot="person", matched_entities=()),
            Token("W.", "w.", slot="person", matched_entities=()),
            Token("is", "is"),
            Token("one", "one"),
            Token("of", "of"),
            Token("us", "us", slot="group"),
        ),
    )
