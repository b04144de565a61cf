"""Errors raised at the transcription engine boundary."""

from __future__ import annotations


class TranscriptionError(Exception):
    """A transcription run failed. The message is meant for the user."""


class ModelNotFoundError(TranscriptionError):
    def __init__(self, size: str, available: list[str]) -> None:
        self.size = size
        self.available = available
        listing = ", ".join(available) if available else "none"
        super().__init__(f"Model '{size}' not found. Available models: {listing}")


class EngineNotFoundError(TranscriptionError):
    """The whisper.cpp executable could not be located."""
