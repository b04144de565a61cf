"""Lookup of whisper.cpp model files on disk."""

from __future__ import annotations

from pathlib import Path

from offscribe.errors import ModelNotFoundError

MODEL_SIZES = ("tiny", "base", "small", "medium")

_PREFIX = "ggml-"
_SUFFIX = ".bin"


class ModelStore:
    """Maps model sizes to ``ggml-<size>.bin`` files in one directory."""

    def __init__(self, models_dir: Path) -> None:
        self._dir = Path(models_dir)

    @property
    def models_dir(self) -> Path:
        return self._dir

    def path_for(self, size: str) -> Path:
        return self._dir / f"{_PREFIX}{size}{_SUFFIX}"

    def list_available(self) -> list[str]:
        """Return the sizes of all model files present, sorted."""
        if not self._dir.is_dir():
            return []
        return sorted(
            p.name[len(_PREFIX):-len(_SUFFIX)]
            for p in self._dir.glob(f"{_PREFIX}*{_SUFFIX}")
            if p.is_file()
        )

    def resolve(self, size: str) -> Path:
        """Return the model path for *size* or raise ModelNotFoundError."""
        path = self.path_for(size)
        if not path.is_file():
            raise ModelNotFoundError(size, self.list_available())
        return path
