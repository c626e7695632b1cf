"""Configuration for the midi-inspector command line."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path

OUTPUT_FORMATS = ("text", "json")


@dataclass
class InspectorConfig:
    """Settings for scanning and reporting.

    Attributes:
        extensions: File suffixes treated as MIDI files when scanning directories.
        recursive: Whether to scan directories recursively.
        output_format: Report format, "text" or "json".
        show_sysex: Whether to list reassembled SysEx messages per file.
    """

    extensions: tuple[str, ...] = (".mid", ".midi", ".kar")
    recursive: bool = False
    output_format: str = "text"
    show_sysex: bool = False

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, "
                f"got {self.output_format!r}"
            )
        self.extensions = tuple(ext.lower() for ext in self.extensions)

    def is_midi_path(self, path: Path) -> bool:
        """Check whether a path has one of the configured extensions."""
        return path.suffix.lower() in self.extensions

    @classmethod
    def from_dict(cls, data: dict) -> InspectorConfig:
        """Create a config from a dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        if "extensions" in values:
            values["extensions"] = tuple(values["extensions"])
        return cls(**values)

    @classmethod
    def from_file(cls, path: Path | str) -> InspectorConfig:
        """Load a config from a JSON file.

        Args:
            path: Path to a JSON document holding an object.

        Returns:
            Loaded configuration.

        Raises:
            ValueError: If the document is not a JSON object or holds invalid values.
        """
        data = json.loads(Path(path).read_text())
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a JSON object: {path}")
        return cls.from_dict(data)
