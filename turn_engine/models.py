"""Internal models for turn segmentation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

UNKNOWN_SPEAKER_ROLE = "Speaker Unknown"


@dataclass(frozen=True)
class SpeakerKey:
    channel_index: int
    speaker_label: int


@dataclass
class RawSegment:
    channel_index: int
    start_seconds: float
    text: str
    speaker_label: Optional[int] = None

    @property
    def speaker_key(self) -> Optional[SpeakerKey]:
        if self.speaker_label is None:
            return None
        return SpeakerKey(self.channel_index, self.speaker_label)


@dataclass
class ResolvedSegment:
    segment: RawSegment
    role: str
    raw_end_of_turn: bool = False
    end_of_turn: bool = False
