from __future__ import annotations

from typing import Sequence

from common.schemas import TranscriptDocument, TurnRecord
from turn_engine.models import ResolvedSegment


def format_timestamp(seconds: float) -> str:
    """Format seconds as zero-padded HH:MM:SS, truncating the fraction."""
    seconds = max(0.0, seconds)
    hours = int(seconds // 3600)
    seconds -= hours * 3600
    minutes = int(seconds // 60)
    seconds -= minutes * 60
    return f"{hours:02d}:{minutes:02d}:{int(seconds):02d}"


def build_turn_records(
    segments: Sequence[ResolvedSegment],
    include_timestamps: bool = False,
) -> list[TurnRecord]:
    records: list[TurnRecord] = []
    for item in segments:
        records.append(
            TurnRecord(
                role=item.role,
                content=item.segment.text,
                end_of_turn=item.end_of_turn,
                timestamp=format_timestamp(item.segment.start_seconds) if include_timestamps else None,
            )
        )
    return records


def render_script(document: TranscriptDocument) -> str:
    lines = []
    for record in document.results:
        prefix = f"[{record.timestamp}] " if record.timestamp else ""
        lines.append(f"{prefix}{record.role}: {record.content}")
    return "\n".join(lines)
