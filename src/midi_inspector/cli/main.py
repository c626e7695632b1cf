"""Main CLI entry point for MIDI Inspector."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from midi_inspector import __version__
from midi_inspector.config import OUTPUT_FORMATS, InspectorConfig
from midi_inspector.models.core import MidiSpecification

if TYPE_CHECKING:
    from midi_inspector.models.core import TrackChunk


# ANSI color codes for terminal output
class Colors:
    """ANSI color codes for styled terminal output."""

    CYAN = "\033[96m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    END = "\033[0m"


def color(text: str, *codes: str) -> str:
    """Apply color codes to text."""
    return "".join(codes) + str(text) + Colors.END


SPEC_COLORS = {
    MidiSpecification.UNKNOWN: Colors.DIM,
    MidiSpecification.GM1: Colors.GREEN,
    MidiSpecification.GM2: Colors.GREEN,
}


@click.group()
@click.version_option(version=__version__, prog_name="midi-inspector")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output.")
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to JSON configuration file.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config: Path | None) -> None:
    """MIDI Inspector - Summarize MIDI files and detect GM/GM2/GS/XG targeting."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    try:
        ctx.obj["config"] = InspectorConfig.from_file(config) if config else InspectorConfig()
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--config") from e


def _collect_files(path: Path, config: InspectorConfig) -> list[Path]:
    """Find MIDI files at a path according to the config."""
    if path.is_file():
        return [path]

    candidates = path.rglob("*") if config.recursive else path.glob("*")
    return sorted(p for p in candidates if p.is_file() and config.is_midi_path(p))


def _print_sysex(track_chunks: list[TrackChunk]) -> None:
    """List reassembled SysEx messages with the signatures they match."""
    from midi_inspector.detection import flatten_events, iter_sysex_messages, matching_signatures

    messages = list(iter_sysex_messages(flatten_events(track_chunks)))
    click.echo(f"  SysEx messages: {len(messages)}")
    for i, payload in enumerate(messages):
        names = matching_signatures(payload)
        label = color(", ".join(names), Colors.GREEN) if names else color("-", Colors.DIM)
        preview = payload[:16].hex(" ").upper()
        if len(payload) > 16:
            preview += " ..."
        click.echo(f"    [{i}] F0 {preview} F7  {label}")


@cli.command()
@click.argument("path", type=click.Path(exists=True, path_type=Path))
@click.option("-r", "--recursive", is_flag=True, help="Recursively scan directories.")
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(list(OUTPUT_FORMATS)),
    default=None,
    help="Output format.",
)
@click.option("--sysex", "show_sysex", is_flag=True, help="List SysEx messages.")
@click.pass_context
def info(
    ctx: click.Context,
    path: Path,
    recursive: bool,
    output_format: str | None,
    show_sysex: bool,
) -> None:
    """Summarize MIDI files and detect their sound standard.

    PATH can be a single MIDI file or a directory containing MIDI files.
    Files are analyzed one at a time.
    """
    from midi_inspector.service import MidiFileService

    config: InspectorConfig = ctx.obj["config"]
    config.recursive = config.recursive or recursive
    if output_format is not None:
        config.output_format = output_format
    config.show_sysex = config.show_sysex or show_sysex

    files = _collect_files(path, config)
    if not files:
        click.echo(f"No MIDI files found in {path}", err=True)
        raise SystemExit(1)

    service = MidiFileService()
    reports = []
    failed_files: list[tuple[Path, str]] = []

    for file_path in files:
        try:
            midi_info, decoded = service.load_with_events(file_path)
        except Exception as e:
            failed_files.append((file_path, str(e)))
            click.echo(f"Failed to load MIDI file: {e}", err=True)
            continue

        reports.append(midi_info)
        if config.output_format == "json":
            continue

        spec = midi_info.specification
        spec_color = SPEC_COLORS.get(spec, Colors.YELLOW)
        click.echo(f"\n{color(midi_info.file_name, Colors.BOLD, Colors.CYAN)}")
        click.echo(f"  Format: {midi_info.format.value}")
        click.echo(f"  Tracks: {midi_info.track_count}")
        click.echo(f"  Events: {midi_info.event_count}")
        click.echo(f"  Tempo changes: {midi_info.tempo_event_count}")
        click.echo(f"  Duration: {midi_info.duration}")
        click.echo(f"  Specification: {color(spec.value, spec_color)}")
        if midi_info.is_empty:
            click.echo(f"  {color('EMPTY', Colors.RED)}")
        if config.show_sysex:
            _print_sysex(decoded.track_chunks)

    if config.output_format == "json":
        click.echo(json.dumps([r.to_dict() for r in reports], indent=2))
    elif len(files) > 1:
        click.echo(f"\n{'=' * 60}")
        click.echo(f"Processed {len(reports)}/{len(files)} files successfully")

    if failed_files:
        raise SystemExit(1)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def sysex(path: Path) -> None:
    """List reassembled SysEx messages in a MIDI file.

    Each message is shown as hex with the GM/GM2/XG/GS signatures it matches,
    followed by the overall classification.

    Example:
        midi-inspector sysex song.mid
    """
    from midi_inspector.detection import detect_specification, flatten_events
    from midi_inspector.ingest import read_midi_file

    try:
        decoded = read_midi_file(path)
        click.echo(color(path.name, Colors.BOLD, Colors.CYAN))
        _print_sysex(decoded.track_chunks)
        specification = detect_specification(flatten_events(decoded.track_chunks))
    except Exception as e:
        click.echo(f"Failed to load MIDI file: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"  Specification: {specification.value}")


if __name__ == "__main__":
    cli()
