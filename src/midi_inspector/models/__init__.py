"""Data models for MIDI inspection."""

from midi_inspector.models.core import (
    DetectionFlags,
    EventKind,
    FileFormat,
    MidiEvent,
    MidiFileInfo,
    MidiSpecification,
    TempoEvent,
    TrackChunk,
    escape_sysex,
    normal_sysex,
)

__all__ = [
    "EventKind",
    "MidiEvent",
    "TrackChunk",
    "TempoEvent",
    "DetectionFlags",
    "MidiSpecification",
    "FileFormat",
    "MidiFileInfo",
    "normal_sysex",
    "escape_sysex",
]
