"""Configuration management with TOML loading and defaults."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

CONFIG_DIR = Path("~/.config/offscribe").expanduser()
CONFIG_PATH = CONFIG_DIR / "config.toml"

OUTPUT_FORMATS = ("text", "json")

DEFAULT_CONFIG_TOML = """\
[engine]
executable = ""           # path to whisper-cli; empty = search PATH
models_dir = "~/.local/share/offscribe/models"  # holds ggml-<size>.bin files
convention = "srt"        # "srt" (subtitle file) or "lines" (console output)

[transcription]
model = "base"            # tiny, base, small, medium
language = ""             # empty = let the engine decide
timestamps = "word"       # "word" or "sentence"

[output]
dir = ""                  # empty = next to the audio file
format = "text"           # "text" or "json"
"""


@dataclass
class EngineConfig:
    executable: str = ""
    models_dir: str = "~/.local/share/offscribe/models"
    convention: str = "srt"

    @property
    def resolved_models_dir(self) -> Path:
        return Path(self.models_dir).expanduser()


@dataclass
class TranscriptionConfig:
    model: str = "base"
    language: str = ""
    timestamps: str = "word"


@dataclass
class OutputConfig:
    dir: str = ""
    format: str = "text"

    @property
    def resolved_dir(self) -> Path | None:
        if not self.dir:
            return None
        return Path(self.dir).expanduser()


@dataclass
class Config:
    engine: EngineConfig = field(default_factory=EngineConfig)
    transcription: TranscriptionConfig = field(default_factory=TranscriptionConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def load(cls) -> Config:
        """Load config from TOML file, falling back to defaults."""
        config = cls()

        if CONFIG_PATH.exists():
            with open(CONFIG_PATH, "rb") as f:
                data = tomllib.load(f)
            config = _merge_toml(config, data)

        # Env var overrides
        if executable := os.environ.get("WHISPER_CLI"):
            config.engine.executable = executable
        if models_dir := os.environ.get("OFFSCRIBE_MODELS_DIR"):
            config.engine.models_dir = models_dir

        return config


def _merge_toml(config: Config, data: dict) -> Config:
    """Merge TOML data into config dataclass."""
    for section in ("engine", "transcription", "output"):
        if section not in data:
            continue
        target = getattr(config, section)
        for k, v in data[section].items():
            if hasattr(target, k):
                setattr(target, k, v)

    return config


def ensure_config_file() -> Path:
    """Create default config file if it doesn't exist. Returns the path."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    if not CONFIG_PATH.exists():
        CONFIG_PATH.write_text(DEFAULT_CONFIG_TOML)
    return CONFIG_PATH
