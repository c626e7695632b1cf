"""MIDI file ingestion: decoding and tempo mapping."""

from midi_inspector.ingest.events import (
    DecodedMidiFile,
    convert_message,
    decode_midi_file,
    iter_track_events,
    read_midi_file,
)
from midi_inspector.ingest.tempo import DEFAULT_TEMPO, DEFAULT_TICKS_PER_BEAT, TempoMap

__all__ = [
    "DecodedMidiFile",
    "TempoMap",
    "DEFAULT_TEMPO",
    "DEFAULT_TICKS_PER_BEAT",
    "convert_message",
    "decode_midi_file",
    "iter_track_events",
    "read_midi_file",
]
