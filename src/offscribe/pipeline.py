"""Pipeline orchestration: transcribe -> parse -> format/search -> output."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from offscribe.config import OUTPUT_FORMATS, Config
from offscribe.errors import TranscriptionError
from offscribe.output.text import GRANULARITIES, MATCHES_STYLE, format_search_results, format_transcript
from offscribe.progress import Spinner
from offscribe.search import search_segments
from offscribe.transcription.model_store import MODEL_SIZES
from offscribe.transcription.models import TranscriptionResult
from offscribe.transcription.parser import LINES, SRT, parse_output

logger = logging.getLogger(__name__)

_MODEL_HINTS = {
    "tiny": "Fastest, least accurate",
    "base": "Good balance (recommended)",
    "small": "Better accuracy, slower",
    "medium": "Best accuracy, slowest",
}

_GRANULARITY_HINTS = {
    "word": "Individual word timestamps (estimated)",
    "sentence": "Sentence-level timestamps",
}

_TRANSCRIPT_SUFFIXES = (".srt", ".txt")


def _create_transcriber(config: Config):
    """Create the whisper.cpp transcriber."""
    from offscribe.transcription.whisper_cpp import WhisperCppTranscriber

    try:
        return WhisperCppTranscriber(config.engine, language=config.transcription.language)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from None


def _transcribe(config: Config, audio_path: Path) -> TranscriptionResult:
    """Run the engine on *audio_path*, exiting with a message on failure."""
    transcriber = _create_transcriber(config)
    model = config.transcription.model

    try:
        with Spinner(f"Transcribing with {model} model"):
            result = transcriber.transcribe(audio_path, model)
    except TranscriptionError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from None

    if not result.segments:
        logger.warning("No segments could be parsed from the engine output")
    return result


def _check_output_options(config: Config) -> None:
    """Exit with a message when configured output options are unknown."""
    if config.output.format not in OUTPUT_FORMATS:
        click.echo(
            f"Error: Unknown output format {config.output.format!r} (expected one of: {', '.join(OUTPUT_FORMATS)})",
            err=True,
        )
        raise SystemExit(1)
    if config.transcription.timestamps not in GRANULARITIES:
        click.echo(
            f"Error: Unknown timestamp granularity {config.transcription.timestamps!r} "
            f"(expected one of: {', '.join(GRANULARITIES)})",
            err=True,
        )
        raise SystemExit(1)


def _format_output(config: Config, result: TranscriptionResult) -> str:
    _check_output_options(config)
    if config.output.format == "json":
        from offscribe.output.json_output import format_transcript_json

        return format_transcript_json(result) + "\n"
    return format_transcript(result, config.transcription.timestamps)


def _default_output_path(config: Config, audio_path: Path) -> Path:
    ext = "json" if config.output.format == "json" else "txt"
    base = config.output.resolved_dir or audio_path.parent
    return base / f"{audio_path.stem}_transcription.{ext}"


def _load_transcript(config: Config, path: Path) -> TranscriptionResult:
    """Parse an existing .srt or .txt transcript, or transcribe an audio file."""
    suffix = path.suffix.lower()
    if suffix in _TRANSCRIPT_SUFFIXES:
        content = path.read_text(encoding="utf-8", errors="replace")
        result = parse_output(content, SRT)
        if not result.segments and suffix == ".txt":
            result = parse_output(content, LINES)
        return result
    return _transcribe(config, path)


def run_transcribe(config: Config, audio_file: str, output_file: str | None = None) -> Path:
    """Transcribe an audio file and save the formatted result."""
    _check_output_options(config)
    audio_path = Path(audio_file)
    result = _transcribe(config, audio_path)
    rendered = _format_output(config, result)

    out_path = Path(output_file) if output_file else _default_output_path(config, audio_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(rendered, encoding="utf-8")

    click.echo(f"\n{rendered}")
    click.echo(f"Transcription saved to {out_path}")
    return out_path


def run_search(config: Config, file: str, query: str, style: str = MATCHES_STYLE) -> None:
    """Search a transcript (or an audio file, transcribed first) for *query*."""
    result = _load_transcript(config, Path(file))
    matches = search_segments(result, query)
    click.echo(format_search_results(matches, query, style), nl=False)


def run_interactive(config: Config) -> None:
    """Prompt for the inputs, transcribe, show the result and optionally save it."""
    click.echo("===========================================")
    click.echo("offscribe - Offline Speech-to-Text")
    click.echo("===========================================\n")

    audio_file = click.prompt(
        "Enter path to audio file (WAV, MP3, MP4)",
        type=click.Path(exists=True, dir_okay=False),
    )

    click.echo("\nModel sizes:")
    for i, size in enumerate(MODEL_SIZES, start=1):
        click.echo(f"{i}. {size:<6s} - {_MODEL_HINTS[size]}")
    default_model = MODEL_SIZES.index("base") + 1
    choice = click.prompt(
        f"Choose model (1-{len(MODEL_SIZES)})",
        type=click.IntRange(1, len(MODEL_SIZES)),
        default=default_model,
    )
    config.transcription.model = MODEL_SIZES[choice - 1]

    click.echo("\nTimestamp granularity:")
    for i, granularity in enumerate(GRANULARITIES, start=1):
        click.echo(f"{i}. {granularity:<8s} - {_GRANULARITY_HINTS[granularity]}")
    choice = click.prompt(
        f"Choose granularity (1-{len(GRANULARITIES)})",
        type=click.IntRange(1, len(GRANULARITIES)),
        default=1,
    )
    config.transcription.timestamps = GRANULARITIES[choice - 1]
    click.echo()

    _check_output_options(config)
    audio_path = Path(audio_file)
    result = _transcribe(config, audio_path)
    rendered = _format_output(config, result)

    click.echo("\n=== TRANSCRIPTION RESULTS ===")
    click.echo(rendered)
    click.echo("=============================")

    if click.confirm("\nSave results to file?", default=False):
        default_name = _default_output_path(config, audio_path).name
        out_file = click.prompt("Enter output filename", default=default_name)
        Path(out_file).write_text(rendered, encoding="utf-8")
        click.echo(f"Results saved to: {out_file}")
