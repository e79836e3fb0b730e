"""Tag decoder: per-token label probabilities -> TagResult.

The winning label is the key with the highest probability across the whole
mapping. Its raw probability is returned as is: the bare and ``/any``
variants of a slot are never summed even though they name the same slot.
The mapping is not assumed to be normalized or exhaustive.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from collections.abc import Sequence as SequenceABC

import numpy as np

from slot_tagger.exceptions import LabelFormatError, UndefinedTagError
from slot_tagger.tags.labels import parse_label
from slot_tagger.tags.types import ParsedLabel, TagResult

logger = logging.getLogger("slot_tagger")


def decode(label_probabilities: Mapping[str, float]) -> TagResult:
    """Return the tag of the most probable label.

    Ties are won by the first key in the mapping's own order. Keys that are
    not valid labels and probabilities that are not finite numbers are skipped.

    Raises:
        UndefinedTagError: If the mapping is empty or holds no valid label.
    """
    best: TagResult | None = None
    for label, probability in label_probabilities.items():
        try:
            parsed = parse_label(label)
        except LabelFormatError:
            logger.debug("skipping unrecognized label %r", label)
            continue
        try:
            probability = float(probability)
        except (TypeError, ValueError):
            logger.debug("skipping non-numeric probability for label %r", label)
            continue
        if not math.isfinite(probability):
            logger.debug("skipping non-finite probability for label %r", label)
            continue
        if best is None or probability > best.probability:
            best = TagResult(tag=parsed.tag, name=parsed.name, probability=probability)

    if best is None:
        raise UndefinedTagError(
            f"No valid label among {len(label_probabilities)} prediction key(s)"
        )
    return best


def decode_matrix(labels: SequenceABC[str], probabilities: np.ndarray) -> list[TagResult]:
    """Decode a whole utterance from a ``(num_tokens, num_labels)`` matrix.

    Column ``j`` holds the probabilities of ``labels[j]``. The first maximum
    of each row wins, the same tie policy as ``decode``. Columns whose label
    is malformed are masked out.

    Raises:
        ValueError: If the matrix shape does not match the labels.
        UndefinedTagError: If no label is valid, or a row holds no finite
            probability for a valid label.
    """
    matrix = np.asarray(probabilities, dtype=np.float64)
    if matrix.ndim == 1:
        matrix = matrix.reshape(1, -1)
    if matrix.ndim != 2 or matrix.shape[1] != len(labels):
        raise ValueError(
            f"Probability matrix of shape {matrix.shape} does not match "
            f"{len(labels)} label(s)"
        )

    parsed: list[ParsedLabel | None] = []
    valid = np.zeros(len(labels), dtype=bool)
    for j, label in enumerate(labels):
        try:
            parsed.append(parse_label(label))
            valid[j] = True
        except LabelFormatError:
            parsed.append(None)
    if not np.any(valid):
        raise UndefinedTagError(f"No valid label among {len(labels)} label(s)")

    masked = np.where(valid & np.isfinite(matrix), matrix, -np.inf)
    results: list[TagResult] = []
    for row in masked:
        j = int(np.argmax(row))
        winner = parsed[j]
        if winner is None or not np.isfinite(row[j]):
            raise UndefinedTagError("Row holds no finite probability for a valid label")
        results.append(TagResult(tag=winner.tag, name=winner.name, probability=float(row[j])))
    return results
