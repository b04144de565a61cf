"""Plain-text rendering of transcripts and search results."""

from __future__ import annotations

from collections.abc import Iterable

from offscribe.timestamps import format_srt_timestamp, format_timestamp
from offscribe.transcription.models import Segment, TranscriptionResult
from offscribe.transcription.words import words_for

SENTENCE = "sentence"
WORD = "word"
GRANULARITIES = (WORD, SENTENCE)

# Framings for search results
MATCHES_STYLE = "matches"
WORD_STYLE = "word"
SEARCH_STYLES = (MATCHES_STYLE, WORD_STYLE)


def format_segments(segments: Iterable[Segment]) -> str:
    """Render ``[start - end] text`` blocks, each followed by a blank line."""
    parts = []
    for seg in segments:
        parts.append(f"[{format_timestamp(seg.start)} - {format_timestamp(seg.end)}] {seg.text}\n\n")
    return "".join(parts)


def format_words(segments: Iterable[Segment]) -> str:
    """Render one ``[start] word`` line per word.

    Segments without native word timing use the even-distribution estimate
    from :func:`offscribe.transcription.words.distribute_words`.
    """
    lines = []
    for seg in segments:
        for word in words_for(seg):
            lines.append(f"[{format_timestamp(word.start)}] {word.text}\n")
    return "".join(lines)


def format_transcript(result: TranscriptionResult, granularity: str = SENTENCE) -> str:
    """Format a transcript at word or sentence granularity."""
    if granularity == WORD:
        return format_words(result.segments)
    if granularity == SENTENCE:
        return format_segments(result.segments)
    raise ValueError(f"Unknown timestamp granularity: {granularity!r}")


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def format_search_results(matches: list[Segment], query: str, style: str = MATCHES_STYLE) -> str:
    """Render search matches with a summary line.

    ``style`` picks the framing of the summary: ``"matches"`` reports
    "No matches found for ..." while ``"word"`` reports "Word ... not found".
    """
    if style not in SEARCH_STYLES:
        raise ValueError(f"Unknown search result style: {style!r}")

    count = len(matches)
    if count == 0:
        if style == WORD_STYLE:
            return f"Word '{query}' not found in transcript\n"
        return f"No matches found for '{query}'\n"

    if style == WORD_STYLE:
        header = f"Word '{query}' found in {count} {_plural(count, 'segment', 'segments')}:"
    else:
        header = f"Found {count} {_plural(count, 'match', 'matches')} for '{query}':"
    return f"{header}\n\n{format_segments(matches)}"


def to_srt(result: TranscriptionResult) -> str:
    """Render segments back into numbered subtitle blocks."""
    blocks = []
    for i, seg in enumerate(result.segments, start=1):
        blocks.append(
            f"{i}\n{format_srt_timestamp(seg.start)} --> {format_srt_timestamp(seg.end)}\n{seg.text}\n"
        )
    return "\n".join(blocks)
