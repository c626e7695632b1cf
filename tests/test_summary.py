"""Tests for the summary report builder."""

from datetime import timedelta
from unittest.mock import MagicMock

import pytest

from midi_inspector.errors import AnalysisError
from midi_inspector.ingest.tempo import TempoMap
from midi_inspector.models.core import (
    EventKind,
    FileFormat,
    MidiEvent,
    MidiSpecification,
    TrackChunk,
    escape_sysex,
    normal_sysex,
)
from midi_inspector.summary import analyze

GS_RESET = [0x41, 0x10, 0x42, 0x12, 0x40, 0x00, 0x7F, 0x00, 0x41]


@pytest.fixture
def gs_song() -> list[TrackChunk]:
    """A conductor track plus one GS track with notes."""
    conductor = TrackChunk(
        (
            MidiEvent(EventKind.TEMPO, tick=0, tempo=500000),
            MidiEvent(EventKind.OTHER, tick=0, name="time_signature"),
            MidiEvent(EventKind.TEMPO, tick=960, tempo=1000000),
        )
    )
    music = TrackChunk(
        (
            normal_sysex(GS_RESET, completed=True),
            MidiEvent(EventKind.OTHER, tick=0, name="note_on"),
            MidiEvent(EventKind.OTHER, tick=1920, name="note_off"),
        )
    )
    return [conductor, music]


class TestAnalyze:
    """Tests for analyze()."""

    def test_fields(self, gs_song: list[TrackChunk]) -> None:
        """Test every report field is populated."""
        tempo_map = TempoMap.from_track_chunks(gs_song, ticks_per_beat=480)
        info = analyze(gs_song, tempo_map, FileFormat.MULTI_TRACK, file_path="/music/gs.mid")

        assert info.file_name == "gs.mid"
        assert info.file_path == "/music/gs.mid"
        assert info.track_count == 2
        assert info.event_count == 6
        assert info.tempo_event_count == 2
        assert info.duration == timedelta(seconds=3)
        assert info.format == FileFormat.MULTI_TRACK
        assert info.specification == MidiSpecification.GS
        assert not info.is_empty

    def test_without_path(self, gs_song: list[TrackChunk]) -> None:
        """Test name and path are optional."""
        info = analyze(gs_song, TempoMap(480))
        assert info.file_name is None
        assert info.file_path is None
        assert info.format == FileFormat.UNKNOWN

    def test_empty_file(self) -> None:
        """Test a file with no events."""
        info = analyze([], TempoMap(480), FileFormat.SINGLE_TRACK)
        assert info.event_count == 0
        assert info.track_count == 0
        assert info.is_empty
        assert info.duration == timedelta(0)
        assert info.specification == MidiSpecification.UNKNOWN

    def test_empty_tracks(self) -> None:
        """Test tracks without events still count as tracks."""
        info = analyze([TrackChunk(), TrackChunk()], TempoMap(480))
        assert info.track_count == 2
        assert info.is_empty

    def test_split_message_across_tracks(self) -> None:
        """Test the event stream is flattened before reassembly."""
        chunks = [
            TrackChunk((normal_sysex([0x43, 0x10]),)),
            TrackChunk((escape_sysex([0x4C, 0x00, 0x00, 0x7E, 0x00], completed=True),)),
        ]
        info = analyze(chunks, TempoMap(480))
        assert info.specification == MidiSpecification.XG

    def test_idempotent(self, gs_song: list[TrackChunk]) -> None:
        """Test repeated analysis gives identical reports."""
        tempo_map = TempoMap.from_track_chunks(gs_song, ticks_per_beat=480)
        first = analyze(gs_song, tempo_map, FileFormat.MULTI_TRACK, file_path="gs.mid")
        second = analyze(gs_song, tempo_map, FileFormat.MULTI_TRACK, file_path="gs.mid")
        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_none_chunks_rejected(self) -> None:
        """Test a missing event sequence is a contract violation."""
        with pytest.raises(TypeError):
            analyze(None, TempoMap(480))  # type: ignore[arg-type]

    def test_none_tempo_map_rejected(self) -> None:
        """Test a missing tempo map is a contract violation."""
        with pytest.raises(TypeError):
            analyze([], None)  # type: ignore[arg-type]

    def test_unexpected_failure_wrapped(self, gs_song: list[TrackChunk]) -> None:
        """Test internal faults surface as AnalysisError with the cause kept."""
        tempo_map = MagicMock()
        tempo_map.duration_of.side_effect = OverflowError("boom")

        with pytest.raises(AnalysisError, match="MIDI analysis failed: boom") as exc_info:
            analyze(gs_song, tempo_map)
        assert isinstance(exc_info.value.__cause__, OverflowError)
