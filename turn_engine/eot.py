"""Text-only end-of-turn heuristic.

A segment reads as a finished turn when it ends in terminal punctuation and
none of the continuation cues apply: a trailing ellipsis, a trailing
discourse marker, or a question opener with no question mark.
"""

from __future__ import annotations

import re

CONTINUATION_PHRASES = (
    "um",
    "uh",
    "like",
    "you know",
    "i mean",
    "so",
    "and then",
    "but",
    "or",
    "because",
    "however",
    "although",
    "therefore",
)

QUESTION_STARTERS = (
    "what",
    "who",
    "where",
    "when",
    "why",
    "how",
    "is",
    "are",
    "do",
    "does",
    "did",
    "can",
    "could",
    "would",
    "should",
)

_TERMINAL_PUNCTUATION_RE = re.compile(r"[.!?][\s\"'”’]*$")
_ELLIPSIS_RE = re.compile(r"(?:\.{3}|…)$")
_CONTINUATION_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(p) for p in CONTINUATION_PHRASES) + r")[,\s]*$",
    flags=re.IGNORECASE,
)
_QUESTION_STARTER_RE = re.compile(
    r"^(?:" + "|".join(QUESTION_STARTERS) + r")\b",
    flags=re.IGNORECASE,
)


def ends_with_terminal_punctuation(text: str) -> bool:
    return bool(_TERMINAL_PUNCTUATION_RE.search(text.strip()))


def ends_with_ellipsis(text: str) -> bool:
    return bool(_ELLIPSIS_RE.search(text.strip()))


def ends_with_continuation_phrase(text: str) -> bool:
    return bool(_CONTINUATION_RE.search(text.strip()))


def is_unmarked_question(text: str) -> bool:
    return bool(_QUESTION_STARTER_RE.match(text.strip())) and "?" not in text


def determine_eot(text: str) -> bool:
    """Return True when ``text`` reads as a complete turn. Empty text is a boundary."""
    trimmed = (text or "").strip()
    if not trimmed:
        return True
    return (
        ends_with_terminal_punctuation(trimmed)
        and not ends_with_ellipsis(trimmed)
        and not ends_with_continuation_phrase(trimmed)
        and not is_unmarked_question(trimmed)
    )
