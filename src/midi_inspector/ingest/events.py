"""Decode MIDI files into track chunks of typed events using mido."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import mido

from midi_inspector.errors import MidiDecodeError
from midi_inspector.ingest.tempo import DEFAULT_TICKS_PER_BEAT, TempoMap
from midi_inspector.models.core import EventKind, FileFormat, MidiEvent, TrackChunk

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass
class DecodedMidiFile:
    """Everything the analyzer needs from a decoded MIDI file.

    Attributes:
        track_chunks: One chunk per MTrk, events in file order.
        tempo_map: Tempo map built from all chunks.
        file_format: SMF format variant from the header.
    """

    track_chunks: list[TrackChunk]
    tempo_map: TempoMap
    file_format: FileFormat


def convert_message(msg: mido.Message | mido.MetaMessage, tick: int) -> MidiEvent:
    """Convert one mido message at an absolute tick into a MidiEvent.

    mido frames every F0 and F7 SMF event as a single complete ``sysex``
    message with the framing bytes removed, so each one is a finished packet.
    A message an SMF splits into an F0 packet plus F7 continuation packets
    therefore reaches the detector as separate messages and is not rejoined.
    """
    if msg.type == "sysex":
        return MidiEvent(
            EventKind.NORMAL_SYSEX,
            tick=tick,
            data=bytes(msg.data),
            completed=True,
            name=msg.type,
        )
    if msg.type == "set_tempo":
        return MidiEvent(EventKind.TEMPO, tick=tick, tempo=msg.tempo, name=msg.type)
    return MidiEvent(EventKind.OTHER, tick=tick, name=msg.type)


def iter_track_events(track: mido.MidiTrack) -> Iterator[MidiEvent]:
    """Yield the events of a mido track with absolute ticks.

    End-of-track markers are chunk framing, not events, and are skipped.
    """
    tick = 0
    for msg in track:
        tick += msg.time
        if msg.type == "end_of_track":
            continue
        yield convert_message(msg, tick)


def decode_midi_file(midi_file: mido.MidiFile) -> DecodedMidiFile:
    """Convert an already-loaded mido.MidiFile."""
    ticks_per_beat = midi_file.ticks_per_beat or DEFAULT_TICKS_PER_BEAT
    track_chunks = [TrackChunk(tuple(iter_track_events(track))) for track in midi_file.tracks]

    return DecodedMidiFile(
        track_chunks=track_chunks,
        tempo_map=TempoMap.from_track_chunks(track_chunks, ticks_per_beat),
        file_format=FileFormat.from_type(midi_file.type),
    )


def read_midi_file(file_path: Path | str) -> DecodedMidiFile:
    """Read and decode a MIDI file from disk.

    Args:
        file_path: Path to the MIDI file.

    Returns:
        Decoded track chunks, tempo map and format tag.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the path is not a regular file.
        MidiDecodeError: If the file is not a valid MIDI file.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"MIDI file not found: {file_path}")
    if not file_path.is_file():
        raise ValueError(f"Not a MIDI file: {file_path} is not a regular file")

    try:
        midi_file = mido.MidiFile(file_path)
    except Exception as e:
        raise MidiDecodeError(f"Failed to parse MIDI file: {e}") from e

    return decode_midi_file(midi_file)
