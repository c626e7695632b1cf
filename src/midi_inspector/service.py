"""Load MIDI files from disk and analyze them."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from midi_inspector.errors import AnalysisError, MidiDecodeError
from midi_inspector.ingest import read_midi_file
from midi_inspector.models.core import MidiFileInfo
from midi_inspector.summary import analyze

if TYPE_CHECKING:
    from midi_inspector.ingest import DecodedMidiFile

logger = logging.getLogger(__name__)


class MidiFileService:
    """Opens MIDI files and produces MidiFileInfo reports.

    Callers get either a complete report or an exception, never a partial
    result. Decoder-specific failures are wrapped so they don't leak past
    this boundary.
    """

    def load_midi_file(self, file_path: Path | str | None) -> MidiFileInfo:
        """Load, decode and analyze a MIDI file.

        Args:
            file_path: Path to the MIDI file.

        Returns:
            Report for the file.

        Raises:
            ValueError: If file_path is empty, None, or not a regular file.
            FileNotFoundError: If the file doesn't exist.
            MidiDecodeError: If the file is not a valid MIDI file.
            AnalysisError: If analysis fails for any other reason.
        """
        info, _decoded = self.load_with_events(file_path)
        return info

    def load_with_events(
        self, file_path: Path | str | None
    ) -> tuple[MidiFileInfo, DecodedMidiFile]:
        """Load a MIDI file and return the report along with the decoded file.

        Decodes the file once, for callers that also need its events.
        Raises the same exceptions as load_midi_file().
        """
        if not file_path:
            raise ValueError("File path cannot be null or empty.")

        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"MIDI file not found: {path}")
        if not path.is_file():
            raise ValueError(f"Not a MIDI file: {path} is not a regular file")

        try:
            decoded = read_midi_file(path)
            info = analyze(
                decoded.track_chunks,
                decoded.tempo_map,
                decoded.file_format,
                file_path=path,
            )
        except (MidiDecodeError, AnalysisError, FileNotFoundError):
            raise
        except Exception as e:
            logger.exception(f"Error reading {path}: {e}")
            raise AnalysisError(f"Failed to read MIDI file: {e}") from e

        logger.info(f"Analyzed {path.name}: {info.specification.value}")
        return info, decoded


def load_midi_file(file_path: Path | str | None) -> MidiFileInfo:
    """Convenience function to load and analyze a MIDI file.

    Args:
        file_path: Path to the MIDI file.

    Returns:
        Report for the file.
    """
    return MidiFileService().load_midi_file(file_path)
