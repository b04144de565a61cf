"""Substring search over parsed transcript segments."""

from __future__ import annotations

from offscribe.transcription.models import Segment, TranscriptionResult


def search_segments(result: TranscriptionResult, query: str) -> list[Segment]:
    """Return the segments whose text contains *query*, ignoring case.

    This is plain substring containment: no tokenization and no word
    boundaries, so ``"art"`` matches ``"started"``. An empty query matches
    every segment. Matches keep their transcript order.
    """
    needle = query.lower()
    return [seg for seg in result.segments if needle in seg.text.lower()]
