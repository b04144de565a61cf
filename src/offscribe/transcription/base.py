"""Abstract base class for transcribers."""

from __future__ import annotations

import abc
from pathlib import Path

from offscribe.transcription.models import TranscriptionResult
from offscribe.transcription.parser import SRT, parse_output


class Transcriber(abc.ABC):
    """Base class for transcription engines.

    Subclasses only run the engine and hand back its raw text; parsing is
    shared and driven by :attr:`convention`.
    """

    convention: str = SRT

    @abc.abstractmethod
    def run(self, audio_path: Path, model: str) -> str:
        """Run the engine and return its raw output.

        Raises :class:`offscribe.errors.TranscriptionError` on failure.
        """

    def transcribe(self, audio_path: Path, model: str) -> TranscriptionResult:
        """Transcribe an audio file and return structured results."""
        return parse_output(self.run(audio_path, model), self.convention)
