"""Turn a raw ASR result into a speaker-turn document with EOT labels.

Stages run in a fixed order: extract segments, sort them by start time,
resolve speaker identities, classify each text, force boundaries on speaker
change, and format the records. Every call builds its own speaker map, so
independent results can be processed concurrently.
"""

from __future__ import annotations

import logging
from typing import Any

from common.schemas import TranscriptDocument
from turn_engine.boundaries import classify_segments, force_speaker_change_boundaries
from turn_engine.extractor import extract_segments
from turn_engine.formatter import build_turn_records, render_script
from turn_engine.ordering import sort_chronologically
from turn_engine.speakers import SpeakerIdMap, resolve_speakers

logger = logging.getLogger(__name__)


def build_document(data: Any, include_timestamps: bool = False) -> TranscriptDocument:
    segments = sort_chronologically(extract_segments(data))
    if not segments:
        return TranscriptDocument(results=[])

    resolved = resolve_speakers(segments, SpeakerIdMap())
    classify_segments(resolved)
    force_speaker_change_boundaries(resolved)

    document = TranscriptDocument(results=build_turn_records(resolved, include_timestamps))
    logger.debug("Built document with %d turns", len(document.results))
    return document


def postprocess_json(data: Any, include_timestamps: bool = False) -> dict:
    """Engine entry point returning the wire-shaped ``{"results": [...]}`` dict."""
    return build_document(data, include_timestamps).to_wire()


def postprocess_script(data: Any, include_timestamps: bool = False) -> str:
    return render_script(build_document(data, include_timestamps))
