"""Transcription by running the whisper.cpp command-line executable."""

from __future__ import annotations

import logging
import shutil
import subprocess
import tempfile
from pathlib import Path

from offscribe.config import EngineConfig
from offscribe.errors import EngineNotFoundError, TranscriptionError
from offscribe.transcription.base import Transcriber
from offscribe.transcription.model_store import ModelStore
from offscribe.transcription.parser import CONVENTIONS, SRT

logger = logging.getLogger(__name__)

_EXECUTABLE_NAME = "whisper-cli"
_SUPPORTED_FORMATS = "WAV, MP3, FLAC, MP4, M4A, OGG"


class WhisperCppTranscriber(Transcriber):
    """Runs ``whisper-cli`` once per file and returns what it printed or wrote."""

    def __init__(
        self,
        engine_config: EngineConfig,
        model_store: ModelStore | None = None,
        language: str = "",
    ) -> None:
        if engine_config.convention not in CONVENTIONS:
            raise ValueError(f"Unknown output convention: {engine_config.convention!r}")
        self._engine_config = engine_config
        self._models = model_store or ModelStore(engine_config.resolved_models_dir)
        self._language = language
        self.convention = engine_config.convention

    def _find_executable(self) -> str:
        configured = self._engine_config.executable
        if configured:
            if Path(configured).expanduser().is_file():
                return str(Path(configured).expanduser())
            found = shutil.which(configured)
        else:
            found = shutil.which(_EXECUTABLE_NAME)
        if found is None:
            raise EngineNotFoundError(
                f"whisper.cpp executable not found ({configured or _EXECUTABLE_NAME}). "
                "Install whisper.cpp or set engine.executable / WHISPER_CLI."
            )
        return found

    def _build_args(self, executable: str, model_path: Path, audio_path: Path, out_base: Path) -> list[str]:
        args = [
            executable,
            "-m", str(model_path),
            "-f", str(audio_path),
            "-of", str(out_base),
            "-np",
        ]
        if self.convention == SRT:
            args.append("-osrt")
        if self._language:
            args.extend(["-l", self._language])
        return args

    def run(self, audio_path: Path, model: str) -> str:
        audio_path = Path(audio_path)
        if not audio_path.exists():
            raise TranscriptionError(f"Audio file not found: {audio_path}")

        model_path = self._models.resolve(model)
        executable = self._find_executable()

        with tempfile.TemporaryDirectory(prefix="offscribe-") as tmp:
            out_base = Path(tmp) / "out"
            args = self._build_args(executable, model_path, audio_path, out_base)
            logger.debug("Running %s", " ".join(args))

            try:
                proc = subprocess.run(args, capture_output=True, encoding="utf-8", errors="replace")
            except OSError as e:
                raise EngineNotFoundError(f"Could not start {executable}: {e}") from e

            output = (proc.stdout or "") + (proc.stderr or "")
            if proc.returncode != 0:
                logger.warning("whisper-cli exited with status %d", proc.returncode)
                if "failed to read audio" in output:
                    raise TranscriptionError(
                        f"Invalid audio file: {audio_path}\n"
                        f"Whisper supports: {_SUPPORTED_FORMATS}"
                    )
                raise TranscriptionError(
                    f"whisper execution failed (exit status {proc.returncode}).\nOutput: {output.strip()}"
                )

            if self.convention != SRT:
                return proc.stdout

            for candidate in (out_base.with_suffix(".srt"), out_base.with_suffix(".txt")):
                if candidate.exists():
                    return candidate.read_text(encoding="utf-8", errors="replace")

        raise TranscriptionError(
            f"whisper did not create the expected output file.\nWhisper output: {output.strip()}"
        )
