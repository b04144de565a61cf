"""Tests for JSON output formatter."""

import json

from offscribe.output.json_output import format_transcript_json
from offscribe.transcription.models import Segment, TranscriptionResult, Word


class TestFormatTranscriptJson:
    def test_valid_json(self, sample_result):
        parsed = json.loads(format_transcript_json(sample_result))
        assert isinstance(parsed, dict)

    def test_all_fields_present(self, sample_result):
        parsed = json.loads(format_transcript_json(sample_result))
        assert parsed["duration"] == 9.0
        assert len(parsed["segments"]) == 4
        seg = parsed["segments"][0]
        assert seg["text"] == "Hello there, how are you?"
        assert seg["start"] == 1.0
        assert seg["end"] == 3.0

    def test_estimated_words_flagged(self, sample_result):
        seg = json.loads(format_transcript_json(sample_result))["segments"][2]
        assert seg["words_estimated"] is True
        assert [w["text"] for w in seg["words"]] == ["Hello", "world!"]

    def test_native_words_not_flagged(self):
        result = TranscriptionResult(
            text="",
            segments=(Segment(text="Hi", start=0.0, end=1.0, words=(Word(text="Hi", start=0.0, end=1.0),)),),
        )
        seg = json.loads(format_transcript_json(result))["segments"][0]
        assert seg["words_estimated"] is False

    def test_non_ascii_preserved(self):
        result = TranscriptionResult(
            text="",
            segments=(Segment(text="Tschüss und auf Wiedersehen!", start=0.0, end=2.0),),
        )
        output = format_transcript_json(result)
        assert "Tschüss" in output
        parsed = json.loads(output)
        assert parsed["segments"][0]["text"] == "Tschüss und auf Wiedersehen!"
