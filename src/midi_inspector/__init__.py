"""MIDI Inspector - summarize MIDI files and detect their sound standard."""

from midi_inspector.models.core import MidiFileInfo, MidiSpecification
from midi_inspector.service import MidiFileService, load_midi_file
from midi_inspector.summary import analyze

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "MidiFileInfo",
    "MidiSpecification",
    "MidiFileService",
    "analyze",
    "load_midi_file",
]
