from __future__ import annotations

from typing import Iterable

from turn_engine.models import RawSegment


def sort_chronologically(segments: Iterable[RawSegment]) -> list[RawSegment]:
    """Order segments by start time; equal starts keep their extraction order."""
    return sorted(segments, key=lambda seg: seg.start_seconds)
