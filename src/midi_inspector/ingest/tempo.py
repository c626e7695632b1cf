"""Tempo map for converting tick positions to wall-clock time."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

from midi_inspector.models.core import EventKind, TempoEvent

if TYPE_CHECKING:
    from collections.abc import Iterable

    from midi_inspector.models.core import TrackChunk


# Default MIDI tempo (120 BPM = 500000 microseconds per beat)
DEFAULT_TEMPO = 500000
DEFAULT_TICKS_PER_BEAT = 480


class TempoMap:
    """Piecewise-constant tempo over the tick timeline.

    Tempo changes from every track chunk apply to the whole file. Before the
    first change the default tempo of 120 BPM is in effect.
    """

    def __init__(
        self,
        ticks_per_beat: int = DEFAULT_TICKS_PER_BEAT,
        tempo_events: Iterable[TempoEvent] = (),
    ) -> None:
        """Initialize the tempo map.

        Args:
            ticks_per_beat: MIDI resolution (PPQ).
            tempo_events: Tempo changes in any order.
        """
        if ticks_per_beat <= 0:
            raise ValueError(f"ticks_per_beat must be positive, got {ticks_per_beat}")
        self.ticks_per_beat = ticks_per_beat
        # sorted() is stable, so simultaneous changes keep file order
        self.tempo_events: list[TempoEvent] = sorted(tempo_events, key=lambda t: t.tick)

    @classmethod
    def from_track_chunks(
        cls, track_chunks: Iterable[TrackChunk], ticks_per_beat: int = DEFAULT_TICKS_PER_BEAT
    ) -> TempoMap:
        """Build a tempo map from the TEMPO events in a set of track chunks."""
        tempo_events = [
            TempoEvent(tick=event.tick, microseconds_per_beat=event.tempo)
            for chunk in track_chunks
            for event in chunk.events
            if event.kind == EventKind.TEMPO and event.tempo
        ]
        return cls(ticks_per_beat, tempo_events)

    def tick_to_microseconds(self, tick: int) -> float:
        """Convert an absolute tick position to microseconds from the start."""
        # Sum tick * tempo exactly, divide by the resolution once
        total = 0
        segment_start = 0
        tempo = DEFAULT_TEMPO

        for event in self.tempo_events:
            if event.tick >= tick:
                break
            total += (event.tick - segment_start) * tempo
            segment_start = event.tick
            tempo = event.microseconds_per_beat

        total += (tick - segment_start) * tempo
        return total / self.ticks_per_beat

    def tick_to_timedelta(self, tick: int) -> timedelta:
        """Convert an absolute tick position to metric time."""
        return timedelta(microseconds=self.tick_to_microseconds(tick))

    def duration_of(self, track_chunks: Iterable[TrackChunk]) -> timedelta:
        """Metric time of the latest event across all chunks, zero if none."""
        last_tick = max((chunk.last_tick for chunk in track_chunks if chunk.events), default=None)
        if last_tick is None:
            return timedelta()
        return self.tick_to_timedelta(last_tick)
