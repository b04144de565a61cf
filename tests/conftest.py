"""Shared fixtures for offscribe tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from offscribe.transcription.models import Segment, TranscriptionResult

SAMPLE_SRT = """\
1
00:00:01,000 --> 00:00:03,500
Hello there.

2
00:00:04,000 --> 00:00:06,000
We started the
budget review.

3
00:00:06,500 --> 00:00:08,000
Hello world!
"""


@pytest.fixture
def sample_srt() -> str:
    return SAMPLE_SRT


@pytest.fixture
def sample_result() -> TranscriptionResult:
    """A transcript with four segments and no native word timing."""
    segments = (
        Segment(text="Hello there, how are you?", start=1.0, end=3.0),
        Segment(text="I am doing great today.", start=3.5, end=5.0),
        Segment(text="Hello world!", start=5.5, end=7.0),
        Segment(text="This is a test.", start=7.5, end=9.0),
    )
    return TranscriptionResult(text="", segments=segments)


@pytest.fixture
def models_dir(tmp_path) -> Path:
    """A models directory holding fake tiny and base models."""
    d = tmp_path / "models"
    d.mkdir()
    (d / "ggml-tiny.bin").write_bytes(b"tiny")
    (d / "ggml-base.bin").write_bytes(b"base")
    return d
