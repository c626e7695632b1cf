"""Command-line interface for MIDI Inspector."""
