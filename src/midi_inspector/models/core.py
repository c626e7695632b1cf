"""Core data models for MIDI inspection."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Any


class EventKind(str, Enum):
    """Closed set of event variants consumed by the detection engine."""

    NORMAL_SYSEX = "normal_sysex"  # F0 packet, starts a message
    ESCAPE_SYSEX = "escape_sysex"  # F7 packet, continues a split message
    TEMPO = "tempo"
    OTHER = "other"


@dataclass(frozen=True)
class MidiEvent:
    """A single decoded event from a track chunk.

    Attributes:
        kind: Event variant.
        tick: Absolute tick position within its track chunk.
        data: SysEx packet bytes (SysEx kinds only, framing bytes excluded).
        completed: Whether the packet carried the terminating 0xF7.
        tempo: Microseconds per beat (TEMPO kind only).
        name: Decoder-specific type name, informational only.
    """

    kind: EventKind
    tick: int = 0
    data: bytes = b""
    completed: bool = False
    tempo: int | None = None
    name: str = ""


def normal_sysex(data: bytes | list[int], completed: bool = False, tick: int = 0) -> MidiEvent:
    """Build a SysEx start packet."""
    return MidiEvent(EventKind.NORMAL_SYSEX, tick=tick, data=bytes(data), completed=completed)


def escape_sysex(data: bytes | list[int], completed: bool = False, tick: int = 0) -> MidiEvent:
    """Build a SysEx continuation packet."""
    return MidiEvent(EventKind.ESCAPE_SYSEX, tick=tick, data=bytes(data), completed=completed)


@dataclass(frozen=True)
class TrackChunk:
    """An ordered run of events from one MTrk chunk."""

    events: tuple[MidiEvent, ...] = ()

    def __len__(self) -> int:
        return len(self.events)

    @property
    def last_tick(self) -> int:
        """Tick of the latest event in the chunk, 0 when empty."""
        return max((event.tick for event in self.events), default=0)


@dataclass
class TempoEvent:
    """A tempo change event.

    Attributes:
        tick: Tick position of the tempo change
        microseconds_per_beat: Tempo in microseconds per beat (MIDI native)
    """

    tick: int
    microseconds_per_beat: int


@dataclass
class DetectionFlags:
    """Evidence accumulated from SysEx payloads across a whole file.

    Flags only ever move from False to True.
    """

    has_gm1: bool = False
    has_gm2: bool = False
    has_xg: bool = False
    has_gs: bool = False

    def to_dict(self) -> dict[str, bool]:
        """Convert to dictionary."""
        return {
            "gm1": self.has_gm1,
            "gm2": self.has_gm2,
            "xg": self.has_xg,
            "gs": self.has_gs,
        }


class MidiSpecification(str, Enum):
    """Sound standard a MIDI file targets."""

    XG_GS_MIXED = "XG/GS Mixed (GM-compatible)"
    XG_GM2 = "Yamaha XG (GM2-compatible)"
    XG = "Yamaha XG (GM-compatible)"
    GS_GM2 = "Roland GS (GM2-compatible)"
    GS = "Roland GS (GM-compatible)"
    GM2 = "General MIDI Level 2 (GM2)"
    GM1 = "General MIDI (GM)"
    UNKNOWN = "Unknown Format MIDI"


class FileFormat(str, Enum):
    """Standard MIDI File format variant."""

    SINGLE_TRACK = "Format 0 (Single Track)"
    MULTI_TRACK = "Format 1 (Multi Track)"
    MULTI_SEQUENCE = "Format 2 (Multi Sequence)"
    UNKNOWN = "Unknown Format"

    @classmethod
    def from_type(cls, midi_type: int | None) -> FileFormat:
        """Map an SMF header format number to a format tag."""
        return {
            0: cls.SINGLE_TRACK,
            1: cls.MULTI_TRACK,
            2: cls.MULTI_SEQUENCE,
        }.get(midi_type, cls.UNKNOWN)  # type: ignore[arg-type]


@dataclass(frozen=True)
class MidiFileInfo:
    """Summary report for one analysed MIDI file.

    Attributes:
        file_name: Base name of the file, if known
        file_path: Full path of the file, if known
        track_count: Number of track chunks (track 0 is usually tempo)
        event_count: Total events across all track chunks
        duration: Wall-clock time of the last event
        format: SMF format variant
        tempo_event_count: Number of tempo change events
        specification: Detected sound standard
        is_empty: True when the file holds no events at all
    """

    file_name: str | None = None
    file_path: str | None = None
    track_count: int = 0
    event_count: int = 0
    duration: timedelta = field(default_factory=timedelta)
    format: FileFormat = FileFormat.UNKNOWN
    tempo_event_count: int = 0
    specification: MidiSpecification = MidiSpecification.UNKNOWN
    is_empty: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "file_name": self.file_name,
            "file_path": self.file_path,
            "track_count": self.track_count,
            "event_count": self.event_count,
            "duration_seconds": self.duration.total_seconds(),
            "duration": str(self.duration),
            "format": self.format.value,
            "tempo_event_count": self.tempo_event_count,
            "specification": self.specification.value,
            "is_empty": self.is_empty,
        }

    def __str__(self) -> str:
        spec_info = f", Spec={self.specification.value}"
        empty_info = ", EMPTY" if self.is_empty else ""
        return (
            f"MIDI: {self.file_name or '(no name)'} | Tracks={self.track_count}, "
            f"Events={self.event_count}, Duration={self.duration}, "
            f"Format={self.format.value}{spec_info}{empty_info}"
        )
