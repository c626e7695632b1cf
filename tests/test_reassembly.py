"""Tests for SysEx reassembly."""

from midi_inspector.detection.reassembly import flatten_events, iter_sysex_messages
from midi_inspector.models.core import (
    EventKind,
    MidiEvent,
    TrackChunk,
    escape_sysex,
    normal_sysex,
)


def other(tick: int = 0) -> MidiEvent:
    """Build a non-SysEx event."""
    return MidiEvent(EventKind.OTHER, tick=tick, name="note_on")


class TestIterSysexMessages:
    """Tests for the reassembly state machine."""

    def test_empty_stream(self) -> None:
        """Test no events yields no messages."""
        assert list(iter_sysex_messages([])) == []

    def test_completed_single_packet(self) -> None:
        """Test a completed packet is emitted immediately."""
        events = [normal_sysex([0x7E, 0x7F, 0x09, 0x01], completed=True)]
        assert list(iter_sysex_messages(events)) == [bytes([0x7E, 0x7F, 0x09, 0x01])]

    def test_split_message_joined(self) -> None:
        """Test a start packet and a completing escape packet are merged."""
        events = [
            normal_sysex([0x43, 0x10]),
            escape_sysex([0x4C, 0x00, 0x00, 0x7E, 0x00], completed=True),
        ]
        assert list(iter_sysex_messages(events)) == [
            bytes([0x43, 0x10, 0x4C, 0x00, 0x00, 0x7E, 0x00])
        ]

    def test_several_continuations(self) -> None:
        """Test an open message keeps absorbing escape packets."""
        events = [
            normal_sysex([0x41]),
            escape_sysex([0x10, 0x42]),
            escape_sysex([0x12, 0x40]),
            escape_sysex([0x00, 0x7F, 0x00, 0x41], completed=True),
        ]
        assert list(iter_sysex_messages(events)) == [
            bytes([0x41, 0x10, 0x42, 0x12, 0x40, 0x00, 0x7F, 0x00, 0x41])
        ]

    def test_new_start_terminates_open_message(self) -> None:
        """Test a new start packet emits the open buffer first."""
        events = [
            normal_sysex([0x7E, 0x7F, 0x09, 0x01]),
            normal_sysex([0x7E, 0x7F, 0x09, 0x03]),
        ]
        assert list(iter_sysex_messages(events)) == [
            bytes([0x7E, 0x7F, 0x09, 0x01]),
            bytes([0x7E, 0x7F, 0x09, 0x03]),
        ]

    def test_other_event_terminates_open_message(self) -> None:
        """Test a non-SysEx event emits the open buffer."""
        events = [normal_sysex([0x7E, 0x7F, 0x09, 0x01]), other(), other()]
        assert list(iter_sysex_messages(events)) == [bytes([0x7E, 0x7F, 0x09, 0x01])]

    def test_escape_after_interruption_ignored(self) -> None:
        """Test a continuation arriving after an interruption is dropped."""
        events = [
            normal_sysex([0x43, 0x10]),
            other(),
            escape_sysex([0x4C, 0x00], completed=True),
        ]
        assert list(iter_sysex_messages(events)) == [bytes([0x43, 0x10])]

    def test_stray_escape_ignored(self) -> None:
        """Test escape packets with no open message are ignored."""
        events = [escape_sysex([0x7E, 0x7F, 0x09, 0x01], completed=True)]
        assert list(iter_sysex_messages(events)) == []

    def test_escape_after_completed_message_ignored(self) -> None:
        """Test a completed message closes the assembly."""
        events = [
            normal_sysex([0x7E, 0x7F, 0x09, 0x01], completed=True),
            escape_sysex([0x00]),
        ]
        assert list(iter_sysex_messages(events)) == [bytes([0x7E, 0x7F, 0x09, 0x01])]

    def test_end_of_stream_flushes(self) -> None:
        """Test an unterminated message is emitted once at the end."""
        events = [normal_sysex([0x43, 0x10]), escape_sysex([0x4C])]
        assert list(iter_sysex_messages(events)) == [bytes([0x43, 0x10, 0x4C])]

    def test_empty_start_at_end_not_emitted(self) -> None:
        """Test an empty open buffer isn't flushed at end of stream."""
        assert list(iter_sysex_messages([normal_sysex([])])) == []

    def test_is_lazy(self) -> None:
        """Test messages are produced as the stream is consumed."""
        consumed = []

        def stream():
            for event in [
                normal_sysex([0x7E, 0x7F, 0x09, 0x01], completed=True),
                normal_sysex([0x7E, 0x7F, 0x09, 0x03], completed=True),
            ]:
                consumed.append(event)
                yield event

        messages = iter_sysex_messages(stream())
        assert next(messages) == bytes([0x7E, 0x7F, 0x09, 0x01])
        assert len(consumed) == 1

    def test_does_not_mutate_events(self) -> None:
        """Test input events are left untouched."""
        start = normal_sysex([0x43, 0x10])
        rest = escape_sysex([0x4C], completed=True)
        list(iter_sysex_messages([start, rest]))
        assert start.data == bytes([0x43, 0x10])
        assert rest.data == bytes([0x4C])


class TestFlattenEvents:
    """Tests for flattening track chunks."""

    def test_chunk_order_then_event_order(self) -> None:
        """Test events come out chunk by chunk."""
        a, b, c = other(0), other(10), other(5)
        chunks = [TrackChunk((a, b)), TrackChunk(()), TrackChunk((c,))]
        assert list(flatten_events(chunks)) == [a, b, c]

    def test_message_split_across_chunks(self) -> None:
        """Test an open message at the end of a chunk continues into the next."""
        chunks = [
            TrackChunk((normal_sysex([0x43, 0x10]),)),
            TrackChunk((escape_sysex([0x4C], completed=True),)),
        ]
        assert list(iter_sysex_messages(flatten_events(chunks))) == [bytes([0x43, 0x10, 0x4C])]
