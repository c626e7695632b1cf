"""Build a summary report for a decoded MIDI file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from midi_inspector.detection import detect_specification, flatten_events
from midi_inspector.errors import AnalysisError
from midi_inspector.models.core import EventKind, FileFormat, MidiFileInfo

if TYPE_CHECKING:
    from collections.abc import Sequence

    from midi_inspector.ingest.tempo import TempoMap
    from midi_inspector.models.core import TrackChunk


def analyze(
    track_chunks: Sequence[TrackChunk],
    tempo_map: TempoMap,
    file_format: FileFormat = FileFormat.UNKNOWN,
    file_path: Path | str | None = None,
) -> MidiFileInfo:
    """Analyze decoded track chunks and produce a report.

    The result depends only on the arguments; calling this twice on the same
    chunks gives equal reports.

    Args:
        track_chunks: Decoded track chunks, in file order.
        tempo_map: Tempo map used to convert the last event to wall-clock time.
        file_format: SMF format variant from the header.
        file_path: Optional source path, used for the name and path fields.

    Returns:
        Complete MidiFileInfo report.

    Raises:
        TypeError: If track_chunks or tempo_map is None.
        AnalysisError: If anything else goes wrong during analysis.
    """
    if track_chunks is None:
        raise TypeError("track_chunks must not be None")
    if tempo_map is None:
        raise TypeError("tempo_map must not be None")

    try:
        event_count = sum(len(chunk) for chunk in track_chunks)
        tempo_event_count = sum(
            1 for event in flatten_events(track_chunks) if event.kind == EventKind.TEMPO
        )
        duration = tempo_map.duration_of(track_chunks)
        specification = detect_specification(flatten_events(track_chunks))

        file_name = None
        if file_path is not None:
            file_path = str(file_path)
            file_name = Path(file_path).name

        return MidiFileInfo(
            file_name=file_name,
            file_path=file_path,
            track_count=len(track_chunks),
            event_count=event_count,
            duration=duration,
            format=file_format,
            tempo_event_count=tempo_event_count,
            specification=specification,
            is_empty=event_count == 0,
        )
    except Exception as e:
        raise AnalysisError(f"MIDI analysis failed: {e}") from e
