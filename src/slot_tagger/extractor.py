"""Slot extractor, the inference-time integration layer for slot-tagger.

Orchestrates the per-token decoding pipeline over one utterance:
    label probabilities → tag → validity filter → candidate slot → merge.

The merge has a strict sequential dependency: the slot accumulated for a
name at token *i* depends on the one at token *i - 1*. That state is an
explicit immutable value folded over the tokens with ``functools.reduce``,
so separate utterances never share anything and may run concurrently.
"""

from __future__ import annotations

import functools
import logging
import time
from collections.abc import Iterable, Mapping
from collections.abc import Sequence as SequenceABC
from typing import Any, NamedTuple

import numpy as np

from slot_tagger.config import SlotTaggerConfig, resolve_config
from slot_tagger.decoding.candidate import make_slot
from slot_tagger.decoding.decoder import decode, decode_matrix
from slot_tagger.decoding.merger import combine_slots
from slot_tagger.decoding.validity import is_valid_slot_tag
from slot_tagger.exceptions import UndefinedTagError
from slot_tagger.logging.logger import DecodingLogger
from slot_tagger.logging.types import TokenDecodingRecord
from slot_tagger.models import ExtractedEntity, IntentDefinition, Slot, Token
from slot_tagger.tags.types import TagResult

logger = logging.getLogger("slot_tagger")


class ExtractionState(NamedTuple):
    """Value threaded from one token to the next.

    Attributes:
        open_slots: Slot accumulated so far for each slot name whose span
            is still contiguous.
        completed: Slots whose span has ended, in completion order.
    """

    open_slots: Mapping[str, Slot]
    completed: tuple[Slot, ...]

    def close_all(self) -> ExtractionState:
        return ExtractionState({}, self.completed + tuple(self.open_slots.values()))

    def close_except(self, name: str) -> ExtractionState:
        kept = {n: s for n, s in self.open_slots.items() if n == name}
        closed = tuple(s for n, s in self.open_slots.items() if n != name)
        return ExtractionState(kept, self.completed + closed)

    def accumulate(self, slot: Slot) -> ExtractionState:
        return ExtractionState({**self.open_slots, slot.name: slot}, self.completed)


_EMPTY_STATE = ExtractionState({}, ())


def _merge_action(existing: Slot | None, candidate: Slot, merged: Slot) -> str:
    if existing is None:
        return "new"
    if merged is existing:
        return "keep"
    if merged is candidate:
        return "replace"
    return "extend"


class SlotExtractor:
    """Extract slot spans from per-token label probabilities.

    The extractor holds only its default configuration and diagnostic
    logger. Every ``extract`` call folds over its own tokens.
    """

    def __init__(self, config: SlotTaggerConfig | None = None) -> None:
        self._default_config = config if config is not None else SlotTaggerConfig()
        self._logger = DecodingLogger(self._default_config)

        logger.info(
            "SlotExtractor initialized: threshold=%.3f, log_level=%s, fail_on_undefined_tag=%s",
            self._default_config.slot_threshold,
            self._default_config.log_level,
            self._default_config.fail_on_undefined_tag,
        )

    def extract(
        self,
        tokens: SequenceABC[Token],
        predictions: SequenceABC[Mapping[str, float]],
        intent_definition: IntentDefinition,
        entities: Iterable[ExtractedEntity] = (),
        overrides: dict[str, Any] | None = None,
    ) -> list[Slot]:
        """Extract the slots of one utterance.

        Args:
            tokens: Utterance tokens in order.
            predictions: One label-probability mapping per token.
            intent_definition: Intent whose declared slots are accepted.
            entities: Entities recognized over the utterance.
            overrides: Per-call ``st_*`` configuration overrides.

        Returns:
            Extracted slots in the order their spans ended.

        Raises:
            ValueError: If tokens and predictions differ in length.
            UndefinedTagError: Only when ``fail_on_undefined_tag`` is set.
            ConfigValidationError: If *overrides* are invalid.
        """
        if len(tokens) != len(predictions):
            raise ValueError(
                f"Got {len(predictions)} prediction(s) for {len(tokens)} token(s)"
            )
        config = resolve_config(self._default_config, overrides)
        tags = [self._decode_token(prediction, config) for prediction in predictions]
        return self._fold(tokens, tags, intent_definition, tuple(entities), config)

    def extract_matrix(
        self,
        tokens: SequenceABC[Token],
        labels: SequenceABC[str],
        probabilities: np.ndarray,
        intent_definition: IntentDefinition,
        entities: Iterable[ExtractedEntity] = (),
        overrides: dict[str, Any] | None = None,
    ) -> list[Slot]:
        """Extract the slots of one utterance from a probability matrix.

        Args:
            tokens: Utterance tokens in order.
            labels: Label vocabulary, one per matrix column.
            probabilities: Array of shape ``(len(tokens), len(labels))``.
            intent_definition: Intent whose declared slots are accepted.
            entities: Entities recognized over the utterance.
            overrides: Per-call ``st_*`` configuration overrides.

        Raises:
            ValueError: If the matrix shape does not match tokens and labels.
            UndefinedTagError: Only when ``fail_on_undefined_tag`` is set.
            ConfigValidationError: If *overrides* are invalid.
        """
        matrix = np.asarray(probabilities, dtype=np.float64)
        if matrix.ndim != 2 or matrix.shape[0] != len(tokens):
            raise ValueError(
                f"Probability matrix of shape {matrix.shape} does not match "
                f"{len(tokens)} token(s)"
            )
        config = resolve_config(self._default_config, overrides)
        tags: list[TagResult | None]
        try:
            tags = list(decode_matrix(labels, matrix))
        except UndefinedTagError:
            if config.fail_on_undefined_tag:
                raise
            # Degrade only the offending rows.
            tags = [self._decode_token(dict(zip(labels, row)), config) for row in matrix]
        return self._fold(tokens, tags, intent_definition, tuple(entities), config)

    def _decode_token(
        self, prediction: Mapping[str, float], config: SlotTaggerConfig
    ) -> TagResult | None:
        try:
            return decode(prediction)
        except UndefinedTagError as exc:
            if config.fail_on_undefined_tag:
                raise
            logger.warning("Treating token as outside: %s", exc)
            return None

    def _fold(
        self,
        tokens: SequenceABC[Token],
        tags: SequenceABC[TagResult | None],
        intent_definition: IntentDefinition,
        entities: tuple[ExtractedEntity, ...],
        config: SlotTaggerConfig,
    ) -> list[Slot]:
        step = functools.partial(
            self._step,
            intent_definition=intent_definition,
            entities=entities,
            config=config,
            log=self._logger,
        )
        final = functools.reduce(step, enumerate(zip(tokens, tags)), _EMPTY_STATE)
        return list(final.close_all().completed)

    @staticmethod
    def _step(
        state: ExtractionState,
        item: tuple[int, tuple[Token, TagResult | None]],
        *,
        intent_definition: IntentDefinition,
        entities: tuple[ExtractedEntity, ...],
        config: SlotTaggerConfig,
        log: DecodingLogger,
    ) -> ExtractionState:
        t_start_ns = time.perf_counter_ns()
        index, (token, tag) = item

        is_valid = is_valid_slot_tag(token, tag, intent_definition, config.slot_threshold)
        merged: Slot | None = None
        if tag is None:
            action = "undefined"
            state = state.close_all()
        elif not is_valid:
            action = "skip"
            state = state.close_all()
        else:
            state = state.close_except(tag.name)
            existing = state.open_slots.get(tag.name)
            candidate = make_slot(tag, token, intent_definition.get_slot(tag.name), entities)
            merged = combine_slots(existing, token, tag, candidate)
            action = _merge_action(existing, candidate, merged)
            state = state.accumulate(merged)

        log.log_token(
            TokenDecodingRecord(
                token_index=index,
                token_text=token.text,
                intent_name=intent_definition.name,
                tag=tag.tag.value if tag is not None else "",
                slot_name=tag.name if tag is not None else "",
                probability=tag.probability if tag is not None else 0.0,
                is_valid=is_valid,
                action=action,
                entity_bound=merged is not None and merged.is_entity_bound,
                threshold=config.slot_threshold,
                elapsed_ms=(time.perf_counter_ns() - t_start_ns) / 1_000_000.0,
            ),
            config,
        )
        return state

    @property
    def default_config(self) -> SlotTaggerConfig:
        """The default configuration loaded from environment."""
        return self._default_config

    @property
    def decoding_logger(self) -> DecodingLogger:
        """The diagnostic logger for this extractor."""
        return self._logger
