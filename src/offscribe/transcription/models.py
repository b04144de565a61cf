"""Data models for transcription results."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Word:
    text: str
    start: float
    end: float


@dataclass(frozen=True)
class Segment:
    text: str
    start: float
    end: float
    words: tuple[Word, ...] = ()

    @property
    def is_inverted(self) -> bool:
        """True when the engine reported an end time before the start time."""
        return self.end < self.start


@dataclass(frozen=True)
class TranscriptionResult:
    """Parsed output of one engine run.

    ``text`` is the engine output verbatim; ``segments`` are in transcript order.
    """

    text: str
    segments: tuple[Segment, ...] = ()

    @property
    def full_text(self) -> str:
        return " ".join(seg.text.strip() for seg in self.segments)

    @property
    def duration(self) -> float:
        if not self.segments:
            return 0.0
        return self.segments[-1].end
