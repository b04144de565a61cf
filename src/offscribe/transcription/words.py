"""Word-level timing for segments that only carry segment-level timestamps."""

from __future__ import annotations

from offscribe.transcription.models import Segment, Word


def distribute_words(segment: Segment) -> tuple[Word, ...]:
    """Approximate word timings by splitting the segment duration evenly.

    Every whitespace-delimited token gets the same share of the segment, so
    the result is an estimate for navigation, not a measurement of when each
    word was actually spoken. The first word starts at ``segment.start`` and
    the last word ends at ``segment.end``.
    """
    tokens = segment.text.split()
    if not tokens:
        return ()

    n = len(tokens)
    word_duration = (segment.end - segment.start) / n
    words = []
    for i, token in enumerate(tokens):
        start = segment.start + i * word_duration
        end = segment.end if i == n - 1 else segment.start + (i + 1) * word_duration
        words.append(Word(text=token, start=start, end=end))
    return tuple(words)


def words_for(segment: Segment) -> tuple[Word, ...]:
    """Return the segment's native words, falling back to even distribution."""
    if segment.words:
        return segment.words
    return distribute_words(segment)
