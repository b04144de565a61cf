"""Parsers for the text the whisper.cpp engine writes.

Two output conventions are understood:

``srt``
    Blank-line separated subtitle blocks: an optional index line, a
    ``start --> end`` line with comma-decimal timestamps, then one or more
    text lines.

``lines``
    The console convention, one segment per line:
    ``[00:00:00.000 --> 00:00:03.000]  text``.

The engine's output format is not guaranteed to be well formed, so parsing
is best effort: malformed blocks and lines are dropped and whatever could be
recovered is returned. Nothing here raises on bad input.
"""

from __future__ import annotations

import logging
import re

from offscribe.timestamps import parse_srt_timestamp
from offscribe.transcription.models import Segment, TranscriptionResult

logger = logging.getLogger(__name__)

SRT = "srt"
LINES = "lines"
CONVENTIONS = (SRT, LINES)

_ARROW = "-->"

_LINE_RE = re.compile(
    r"\[\s*(\d+:\d{2}:\d{2}[.,]\d+)\s*-->\s*(\d+:\d{2}:\d{2}[.,]\d+)\s*\]\s*(.*)"
)


def _make_segment(text: str, start: float, end: float) -> Segment:
    segment = Segment(text=text, start=start, end=end)
    if segment.is_inverted:
        logger.warning(
            "Segment ends before it starts (%.3f > %.3f): %r", start, end, text
        )
    return segment


def parse_srt(content: str) -> list[Segment]:
    """Parse subtitle blocks into segments, in order."""
    lines = content.splitlines()
    segments: list[Segment] = []
    n = len(lines)
    i = 0

    while i < n:
        # Skip index lines (and stray text) up to the next timestamp line
        while i < n and lines[i].strip() and _ARROW not in lines[i]:
            i += 1
        if i >= n:
            break

        line = lines[i].strip()
        if _ARROW in line:
            parts = line.split(_ARROW)
            if len(parts) == 2:
                start = parse_srt_timestamp(parts[0])
                end = parse_srt_timestamp(parts[1])
                i += 1

                text_lines: list[str] = []
                while i < n and lines[i].strip():
                    text_lines.append(lines[i].strip())
                    i += 1

                if text_lines:
                    segments.append(_make_segment(" ".join(text_lines), start, end))
                else:
                    logger.debug("Dropping block without text at line %d", i)
            else:
                logger.debug("Dropping block with malformed timestamp line %r", line)
        i += 1

    return segments


def parse_lines(content: str) -> list[Segment]:
    """Parse the one-segment-per-line console convention."""
    segments: list[Segment] = []
    for line in content.splitlines():
        m = _LINE_RE.search(line)
        if not m:
            if line.strip():
                logger.debug("Skipping line without timestamps: %r", line)
            continue
        text = m.group(3).strip()
        if not text:
            continue
        start = parse_srt_timestamp(m.group(1))
        end = parse_srt_timestamp(m.group(2))
        segments.append(_make_segment(text, start, end))
    return segments


def parse_output(content: str, convention: str = SRT) -> TranscriptionResult:
    """Build a TranscriptionResult from raw engine output."""
    if convention == SRT:
        segments = parse_srt(content)
    elif convention == LINES:
        segments = parse_lines(content)
    else:
        raise ValueError(f"Unknown output convention: {convention!r}")
    return TranscriptionResult(text=content, segments=tuple(segments))
