from __future__ import annotations

import logging
from typing import Sequence

from turn_engine.eot import determine_eot
from turn_engine.models import ResolvedSegment

logger = logging.getLogger(__name__)


def classify_segments(segments: Sequence[ResolvedSegment]) -> None:
    for item in segments:
        item.raw_end_of_turn = determine_eot(item.segment.text)


def force_speaker_change_boundaries(segments: Sequence[ResolvedSegment]) -> None:
    """Set the final EOT label, closing a turn whenever the next speaker differs.

    The last segment has no successor and keeps its text-based label.
    """
    forced = 0
    for index, item in enumerate(segments):
        item.end_of_turn = item.raw_end_of_turn
        if item.raw_end_of_turn or index == len(segments) - 1:
            continue
        if segments[index + 1].role != item.role:
            item.end_of_turn = True
            forced += 1
    if forced:
        logger.debug("Forced %d turn boundaries on speaker change", forced)
