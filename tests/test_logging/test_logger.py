"""Tests for DecodingLogger and TokenDecodingRecord."""

from __future__ import annotations

import json
import logging

import pytest

from slot_tagger.config import SlotTaggerConfig
from slot_tagger.logging.logger import DecodingLogger
from slot_tagger.logging.types import TokenDecodingRecord


def _make_record(**overrides: object) -> TokenDecodingRecord:
    """Create a TokenDecodingRecord with sensible defaults, overridable."""
    defaults: dict[str, object] = {
        "token_index": 1,
        "token_text": "LeGrand",
        "intent_name": "greet",
        "tag": "I",
        "slot_name": "name",
        "probability": 0.6,
        "is_valid": True,
        "action": "extend",
        "entity_bound": False,
        "threshold": 0.2,
        "elapsed_ms": 0.05,
    }
    defaults.update(overrides)
    return TokenDecodingRecord(**defaults)  # type: ignore[arg-type]


def _config(**kwargs: object) -> SlotTaggerConfig:
    return SlotTaggerConfig(_env_file=None, **kwargs)  # type: ignore[call-arg, arg-type]


class TestTokenDecodingRecord:
    def test_frozen(self) -> None:
        record = _make_record()
        with pytest.raises(AttributeError):
            record.action = "keep"  # type: ignore[misc]

    def test_slots(self) -> None:
        assert hasattr(_make_record(), "__slots__")


class TestDecodingLogger:
    def test_log_level_none_no_output(self, caplog: pytest.LogCaptureFixture) -> None:
        log = DecodingLogger(_config(log_level="none"))
        with caplog.at_level(logging.DEBUG, logger="slot_tagger"):
            log.log_token(_make_record())
        assert len(caplog.records) == 0

    def test_log_level_summary_output(self, caplog: pytest.LogCaptureFixture) -> None:
        log = DecodingLogger(_config(log_level="summary"))
        with caplog.at_level(logging.INFO, logger="slot_tagger"):
            log.log_token(_make_record(entity_bound=True))
        assert len(caplog.records) == 1
        message = caplog.records[0].getMessage()
        assert "intent=greet" in message
        assert "action=extend" in message
        assert "[ENTITY]" in message

    def test_summary_for_undefined_tag(self, caplog: pytest.LogCaptureFixture) -> None:
        log = DecodingLogger(_config(log_level="summary"))
        with caplog.at_level(logging.INFO, logger="slot_tagger"):
            log.log_token(_make_record(tag="", slot_name="", action="undefined"))
        assert "tag=? slot=-" in caplog.records[0].getMessage()

    def test_log_level_full_json(self, caplog: pytest.LogCaptureFixture) -> None:
        log = DecodingLogger(_config(log_level="full"))
        with caplog.at_level(logging.INFO, logger="slot_tagger"):
            log.log_token(_make_record())
        message = caplog.records[0].getMessage()
        payload = json.loads(message.split("decoding_record: ", 1)[1])
        assert payload["token_text"] == "LeGrand"
        assert payload["probability"] == 0.6

    def test_no_records_without_diagnostic_mode(self) -> None:
        log = DecodingLogger(_config(log_level="none"))
        log.log_token(_make_record())
        assert log.get_diagnostic_data() == []
        assert log.get_summary_stats() == {}

    def test_diagnostic_mode_stores_records(self) -> None:
        log = DecodingLogger(_config(log_level="none", diagnostic_mode=True))
        first = _make_record(token_index=0)
        log.log_token(first)
        log.log_token(_make_record(token_index=1))
        data = log.get_diagnostic_data()
        assert len(data) == 2
        assert data[0] is first

    def test_per_call_config_overrides_own_settings(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        log = DecodingLogger(_config(log_level="none"))
        with caplog.at_level(logging.INFO, logger="slot_tagger"):
            log.log_token(_make_record(), _config(log_level="full", diagnostic_mode=True))
        assert "decoding_record" in caplog.text
        assert len(log.get_diagnostic_data()) == 1

        log.log_token(_make_record())
        assert len(log.get_diagnostic_data()) == 1

    def test_diagnostic_data_is_a_copy(self) -> None:
        log = DecodingLogger(_config(log_level="none", diagnostic_mode=True))
        log.log_token(_make_record())
        log.get_diagnostic_data().clear()
        assert len(log.get_diagnostic_data()) == 1

    def test_summary_stats(self) -> None:
        log = DecodingLogger(_config(log_level="none", diagnostic_mode=True))
        log.log_token(_make_record(probability=0.8, action="new"))
        log.log_token(_make_record(probability=0.4, action="extend"))
        log.log_token(_make_record(probability=0.1, is_valid=False, action="skip"))
        log.log_token(
            _make_record(tag="", probability=0.0, is_valid=False, action="undefined")
        )
        stats = log.get_summary_stats()
        assert stats["total_tokens"] == 4
        assert stats["valid_count"] == 2
        assert stats["valid_rate"] == pytest.approx(0.5)
        assert stats["undefined_count"] == 1
        assert stats["mean_probability"] == pytest.approx((0.8 + 0.4 + 0.1) / 3)
        assert stats["min_probability"] == pytest.approx(0.1)
        assert stats["actions"] == {"new": 1, "extend": 1, "skip": 1, "undefined": 1}
