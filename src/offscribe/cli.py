"""CLI entry point for offscribe."""

from __future__ import annotations

import logging
import os
import subprocess

import click

from offscribe.config import OUTPUT_FORMATS, Config, ensure_config_file
from offscribe.output.text import GRANULARITIES, SEARCH_STYLES


@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Offline speech-to-text with timestamped, searchable transcripts.

    Run without a subcommand for interactive mode.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    ctx.ensure_object(dict)
    ctx.obj["config"] = Config.load()

    if ctx.invoked_subcommand is None:
        from offscribe.pipeline import run_interactive
        run_interactive(ctx.obj["config"])


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--model", default=None, help="Model size (tiny, base, small, medium).")
@click.option(
    "--type", "timestamps", type=click.Choice(GRANULARITIES), default=None,
    help="Timestamp granularity. Word timings are estimated from segment timings.",
)
@click.option("--format", "output_format", type=click.Choice(OUTPUT_FORMATS), default=None, help="Output format.")
@click.option("--output", "-o", "output_file", type=click.Path(dir_okay=False), default=None, help="Output file.")
@click.option("--language", default=None, help="Spoken language code (e.g. en, de).")
@click.pass_context
def transcribe(
    ctx: click.Context,
    file: str,
    model: str | None,
    timestamps: str | None,
    output_format: str | None,
    output_file: str | None,
    language: str | None,
) -> None:
    """Transcribe an audio file."""
    config = ctx.obj["config"]
    if model:
        config.transcription.model = model
    if timestamps:
        config.transcription.timestamps = timestamps
    if output_format:
        config.output.format = output_format
    if language:
        config.transcription.language = language

    from offscribe.pipeline import run_transcribe
    run_transcribe(config, file, output_file)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.argument("query")
@click.option("--model", default=None, help="Model size, when FILE is audio.")
@click.option(
    "--style", type=click.Choice(SEARCH_STYLES), default="matches",
    help="Framing of the result summary line.",
)
@click.pass_context
def search(ctx: click.Context, file: str, query: str, model: str | None, style: str) -> None:
    """Search a transcript for text.

    FILE is a .srt or .txt transcript, or an audio file, which is transcribed
    first. Matching is case-insensitive substring search.
    """
    config = ctx.obj["config"]
    if model:
        config.transcription.model = model

    from offscribe.pipeline import run_search
    run_search(config, file, query, style)


@cli.command()
@click.pass_context
def models(ctx: click.Context) -> None:
    """List the models available to the engine."""
    from offscribe.transcription.model_store import ModelStore

    store = ModelStore(ctx.obj["config"].engine.resolved_models_dir)
    available = store.list_available()
    if not available:
        click.echo(f"No models found in {store.models_dir}")
        return
    click.echo(f"Models in {store.models_dir}:")
    for size in available:
        click.echo(f"  {size}")


@cli.command("config")
def config_cmd() -> None:
    """Open the configuration file in your editor."""
    path = ensure_config_file()
    editor = os.environ.get("EDITOR", "nano")
    click.echo(f"Opening {path} with {editor}...")
    subprocess.run([editor, str(path)])
