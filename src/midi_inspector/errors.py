"""Exceptions raised by midi_inspector."""


class MidiInspectorError(Exception):
    """Base class for midi_inspector errors."""


class MidiDecodeError(MidiInspectorError, ValueError):
    """Raised when file contents are not a valid MIDI file."""


class AnalysisError(MidiInspectorError, RuntimeError):
    """Raised when analysis fails unexpectedly.

    The underlying exception is kept as ``__cause__``.
    """
