"""Pull raw segments out of an ASR result tree.

Two sources can carry the segments: the provider's flattened utterance list,
or per-channel paragraph trees under ``results.channels``. Utterances win
whenever the list is present and non-empty. Nothing in here raises on
malformed input; unreadable pieces are skipped or defaulted.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional, Protocol

from turn_engine.models import RawSegment

logger = logging.getLogger(__name__)


class SegmentSource(Protocol):
    name: str

    def extract(self, results: dict) -> list[RawSegment]:
        ...


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _as_int(value: Any) -> Optional[int]:
    # bool is an int subclass; a true/false speaker is not a label
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _as_seconds(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    seconds = float(value)
    if not math.isfinite(seconds) or seconds < 0.0:
        return 0.0
    return seconds


def _as_channel(value: Any) -> int:
    channel = _as_int(value)
    if channel is None or channel < 0:
        return 0
    return channel


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


class UtteranceSource:
    name = "utterances"

    def extract(self, results: dict) -> list[RawSegment]:
        segments: list[RawSegment] = []
        for item in _as_list(results.get("utterances")):
            if not isinstance(item, dict):
                continue
            segments.append(
                RawSegment(
                    channel_index=_as_channel(item.get("channel")),
                    start_seconds=_as_seconds(item.get("start")),
                    text=_as_text(item.get("transcript")),
                    speaker_label=_as_int(item.get("speaker")),
                )
            )
        return segments


class ParagraphSource:
    name = "paragraphs"

    def extract(self, results: dict) -> list[RawSegment]:
        segments: list[RawSegment] = []
        for channel_index, channel in enumerate(_as_list(results.get("channels"))):
            alternatives = _as_list(_as_dict(channel).get("alternatives"))
            primary = _as_dict(alternatives[0]) if alternatives else {}
            paragraphs = _as_list(_as_dict(primary.get("paragraphs")).get("paragraphs"))
            for paragraph in paragraphs:
                if not isinstance(paragraph, dict):
                    continue
                sentences = [
                    _as_text(_as_dict(sentence).get("text"))
                    for sentence in _as_list(paragraph.get("sentences"))
                ]
                segments.append(
                    RawSegment(
                        channel_index=channel_index,
                        start_seconds=_as_seconds(paragraph.get("start")),
                        text=" ".join(text for text in sentences if text),
                        speaker_label=_as_int(paragraph.get("speaker")),
                    )
                )
        return segments


def select_source(results: dict) -> SegmentSource:
    if _as_list(results.get("utterances")):
        return UtteranceSource()
    return ParagraphSource()


def extract_segments(data: Any) -> list[RawSegment]:
    """Return the raw segments of an ASR result, or [] when there are none."""
    results = _as_dict(_as_dict(data).get("results"))
    if not results:
        return []
    source = select_source(results)
    segments = source.extract(results)
    logger.debug("Extracted %d segments from %s", len(segments), source.name)
    return segments
