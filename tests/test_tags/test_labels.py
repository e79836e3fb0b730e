"""Tests for the label string wire format."""

from __future__ import annotations

import pytest

from slot_tagger.exceptions import LabelFormatError
from slot_tagger.tags.labels import ANY_QUALIFIER, OUTSIDE_LABEL, format_label, is_label, parse_label
from slot_tagger.tags.types import BIO, ParsedLabel, TagResult


class TestFormatLabel:
    def test_outside(self) -> None:
        assert format_label(BIO.OUT) == "o"

    def test_outside_ignores_name(self) -> None:
        assert format_label(BIO.OUT, "person", entity_bound=True) == OUTSIDE_LABEL

    def test_entity_bound_has_no_qualifier(self) -> None:
        assert format_label(BIO.BEGINNING, "listener", entity_bound=True) == "B-listener"
        assert format_label(BIO.INSIDE, "listener", entity_bound=True) == "I-listener"

    def test_free_text_has_any_qualifier(self) -> None:
        assert format_label(BIO.BEGINNING, "person") == "B-person/any"
        assert format_label(BIO.INSIDE, "person") == "I-person" + ANY_QUALIFIER

    def test_missing_name_raises(self) -> None:
        with pytest.raises(LabelFormatError):
            format_label(BIO.BEGINNING, "")


class TestParseLabel:
    def test_outside(self) -> None:
        assert parse_label("o") == ParsedLabel(tag=BIO.OUT, name="", entity_bound=False)

    def test_entity_bound(self) -> None:
        assert parse_label("I-time") == ParsedLabel(tag=BIO.INSIDE, name="time", entity_bound=True)

    def test_any_qualifier_stripped(self) -> None:
        parsed = parse_label("B-slot1/any")
        assert parsed.tag is BIO.BEGINNING
        assert parsed.name == "slot1"
        assert parsed.entity_bound is False

    def test_name_may_contain_separator(self) -> None:
        assert parse_label("B-coffee-type").name == "coffee-type"

    @pytest.mark.parametrize("label", ["", "O", "X-slot", "B", "B-", "I-/any", "Bslot", "b-slot"])
    def test_malformed_labels_raise(self, label: str) -> None:
        with pytest.raises(LabelFormatError):
            parse_label(label)

    def test_is_label(self) -> None:
        assert is_label("o")
        assert is_label("I-person/any")
        assert not is_label("B-")


class TestTagResult:
    def test_frozen(self) -> None:
        tag = TagResult(tag=BIO.BEGINNING, name="x", probability=0.5)
        with pytest.raises(AttributeError):
            tag.probability = 0.9  # type: ignore[misc]

    def test_is_outside(self) -> None:
        assert TagResult(tag=BIO.OUT, name="", probability=0.9).is_outside
        assert not TagResult(tag=BIO.INSIDE, name="x", probability=0.9).is_outside

    def test_bio_values_match_wire_format(self) -> None:
        assert [t.value for t in BIO] == ["o", "B", "I"]
