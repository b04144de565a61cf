"""Tests for transcription data models."""

import dataclasses

import pytest

from offscribe.transcription.models import Segment, TranscriptionResult


class TestFullText:
    def test_joins_segments(self, sample_result):
        assert sample_result.full_text.startswith("Hello there, how are you? I am doing")

    def test_empty_segments(self):
        assert TranscriptionResult(text="").full_text == ""

    def test_strips_whitespace(self):
        result = TranscriptionResult(
            text="",
            segments=(
                Segment(text="  padded  ", start=0.0, end=1.0),
                Segment(text=" text ", start=1.0, end=2.0),
            ),
        )
        assert result.full_text == "padded text"


class TestDuration:
    def test_last_segment_end(self, sample_result):
        assert sample_result.duration == 9.0

    def test_empty(self):
        assert TranscriptionResult(text="").duration == 0.0


class TestSegment:
    def test_is_inverted(self):
        assert Segment(text="x", start=2.0, end=1.0).is_inverted
        assert not Segment(text="x", start=1.0, end=1.0).is_inverted

    def test_immutable(self):
        seg = Segment(text="x", start=0.0, end=1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            seg.text = "y"
