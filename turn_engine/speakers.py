from __future__ import annotations

import logging
from typing import Optional, Sequence

from turn_engine.models import UNKNOWN_SPEAKER_ROLE, RawSegment, ResolvedSegment, SpeakerKey

logger = logging.getLogger(__name__)


class SpeakerIdMap:
    """Dense speaker IDs in order of first appearance, local to one document."""

    def __init__(self) -> None:
        self._ids: dict[SpeakerKey, int] = {}

    def id_for(self, key: SpeakerKey) -> int:
        if key not in self._ids:
            self._ids[key] = len(self._ids)
        return self._ids[key]

    def role_for(self, segment: RawSegment) -> str:
        key = segment.speaker_key
        if key is None:
            return UNKNOWN_SPEAKER_ROLE
        return f"Speaker {self.id_for(key)}"

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, key: object) -> bool:
        return key in self._ids


def resolve_speakers(
    segments: Sequence[RawSegment],
    speaker_ids: Optional[SpeakerIdMap] = None,
) -> list[ResolvedSegment]:
    """Tag chronologically sorted segments with their speaker role."""
    speaker_ids = speaker_ids if speaker_ids is not None else SpeakerIdMap()
    resolved = [ResolvedSegment(segment=seg, role=speaker_ids.role_for(seg)) for seg in segments]
    logger.debug("Resolved %d distinct speakers over %d segments", len(speaker_ids), len(resolved))
    return resolved
