"""Tests for the plain-text formatter."""

import pytest

from offscribe.output.text import (
    format_search_results,
    format_segments,
    format_transcript,
    format_words,
    to_srt,
)
from offscribe.transcription.models import Segment, TranscriptionResult, Word
from offscribe.transcription.parser import parse_output


class TestFormatSegments:
    def test_end_to_end(self):
        result = parse_output("1\n00:00:01,000 --> 00:00:03,500\nHello there.\n")
        assert format_segments(result.segments) == "[00:00:01.000 - 00:00:03.500] Hello there.\n\n"

    def test_order_preserved(self, sample_result):
        output = format_segments(sample_result.segments)
        assert output.index("Hello there") < output.index("Hello world")
        assert output.endswith("This is a test.\n\n")

    def test_nan_timestamps_render_as_zero(self):
        result = parse_output("1\n00:00:nan --> 00:00:inf\nHello.\n")
        assert format_transcript(result, "sentence") == "[00:00:00.000 - 00:00:00.000] Hello.\n\n"

    def test_empty(self):
        assert format_segments([]) == ""


class TestFormatWords:
    def test_fallback_words(self):
        output = format_words([Segment(text="a b c d", start=1.0, end=4.0)])
        assert output == (
            "[00:00:01.000] a\n"
            "[00:00:01.750] b\n"
            "[00:00:02.500] c\n"
            "[00:00:03.250] d\n"
        )

    def test_native_words(self):
        seg = Segment(
            text="Hi there",
            start=0.0,
            end=1.0,
            words=(Word(text="Hi", start=0.1, end=0.3), Word(text="there", start=0.4, end=1.0)),
        )
        assert format_words([seg]) == "[00:00:00.100] Hi\n[00:00:00.400] there\n"


class TestFormatTranscript:
    def test_sentence(self, sample_result):
        assert format_transcript(sample_result, "sentence") == format_segments(sample_result.segments)

    def test_word(self, sample_result):
        output = format_transcript(sample_result, "word")
        assert output.splitlines()[0] == "[00:00:01.000] Hello"

    def test_unknown_granularity(self, sample_result):
        with pytest.raises(ValueError):
            format_transcript(sample_result, "phoneme")


class TestFormatSearchResults:
    def test_no_matches(self):
        assert format_search_results([], "nonexistent") == "No matches found for 'nonexistent'\n"

    def test_no_matches_word_style(self):
        assert format_search_results([], "nonexistent", style="word") == (
            "Word 'nonexistent' not found in transcript\n"
        )

    def test_one_match(self):
        matches = [Segment(text="This is a test.", start=1.0, end=3.0)]
        assert format_search_results(matches, "test") == (
            "Found 1 match for 'test':\n\n[00:00:01.000 - 00:00:03.000] This is a test.\n\n"
        )

    def test_multiple_matches_word_style(self):
        matches = [
            Segment(text="First test.", start=1.0, end=3.0),
            Segment(text="Second test.", start=5.0, end=7.0),
        ]
        output = format_search_results(matches, "test", style="word")
        assert output.startswith("Word 'test' found in 2 segments:\n\n")
        assert output.count("] ") == 2

    def test_unknown_style(self):
        with pytest.raises(ValueError):
            format_search_results([], "x", style="fuzzy")


class TestToSrt:
    def test_reparses_to_same_segments(self, sample_srt):
        result = parse_output(sample_srt)
        assert parse_output(to_srt(result)).segments == result.segments

    def test_block_layout(self):
        result = TranscriptionResult(text="", segments=(Segment(text="Hi.", start=1.0, end=2.5),))
        assert to_srt(result) == "1\n00:00:01,000 --> 00:00:02,500\nHi.\n"
