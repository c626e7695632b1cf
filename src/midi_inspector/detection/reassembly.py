"""Reassembly of split SysEx packets into complete messages."""

from __future__ import annotations

from typing import TYPE_CHECKING

from midi_inspector.models.core import EventKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from midi_inspector.models.core import MidiEvent, TrackChunk


def flatten_events(track_chunks: Iterable[TrackChunk]) -> Iterator[MidiEvent]:
    """Yield events in chunk order, then in-chunk order."""
    for chunk in track_chunks:
        yield from chunk.events


def iter_sysex_messages(events: Iterable[MidiEvent]) -> Iterator[bytes]:
    """Yield complete SysEx payloads, merging split packets.

    A message starts with a normal (F0) packet and may continue with escape
    (F7) packets. Encoders set the completion marker inconsistently, so a
    message also ends when a new F0 packet or a non-SysEx event arrives, or
    when the stream runs out. Stray escape packets with no open message are
    ignored. Truncated messages are yielded as-is.

    Args:
        events: Time-ordered events flattened across all track chunks.

    Yields:
        Payload bytes, terminator excluded.
    """
    buffer = bytearray()
    assembling = False

    for event in events:
        if event.kind == EventKind.NORMAL_SYSEX:
            if assembling and buffer:
                yield bytes(buffer)
            buffer.clear()

            buffer.extend(event.data)
            if event.completed:
                yield bytes(buffer)
                buffer.clear()
                assembling = False
            else:
                # Most single-packet messages arrive with completed unset;
                # wait for a possible continuation.
                assembling = True

        elif event.kind == EventKind.ESCAPE_SYSEX:
            if not assembling:
                continue
            buffer.extend(event.data)
            if event.completed:
                yield bytes(buffer)
                buffer.clear()
                assembling = False

        elif assembling:
            yield bytes(buffer)
            buffer.clear()
            assembling = False

    if assembling and buffer:
        yield bytes(buffer)
