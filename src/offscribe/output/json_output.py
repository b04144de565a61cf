"""JSON output formatter for transcripts."""

from __future__ import annotations

import json
from dataclasses import asdict

from offscribe.transcription.models import TranscriptionResult
from offscribe.transcription.words import words_for


def format_transcript_json(result: TranscriptionResult) -> str:
    """Format a transcript result as JSON.

    Segments without native word timing carry estimated words, flagged with
    ``"words_estimated": true``.
    """
    segments = []
    for seg in result.segments:
        data = asdict(seg)
        data["words"] = [asdict(w) for w in words_for(seg)]
        data["words_estimated"] = not seg.words
        segments.append(data)

    payload = {
        "text": result.full_text,
        "duration": result.duration,
        "segments": segments,
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)
