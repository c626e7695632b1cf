"""SysEx reassembly and sound-standard detection."""

from midi_inspector.detection.aggregator import (
    classify,
    collect_flags,
    detect_specification,
)
from midi_inspector.detection.reassembly import flatten_events, iter_sysex_messages
from midi_inspector.detection.signatures import (
    SIGNATURES,
    is_gm1_system_on,
    is_gm2_system_on,
    is_gs_dt1_message,
    is_gs_reset,
    is_xg_parameter_change,
    is_xg_system_on_or_reset,
    matching_signatures,
    roland_checksum,
)

__all__ = [
    "iter_sysex_messages",
    "flatten_events",
    "collect_flags",
    "classify",
    "detect_specification",
    "SIGNATURES",
    "is_gm1_system_on",
    "is_gm2_system_on",
    "is_xg_system_on_or_reset",
    "is_xg_parameter_change",
    "is_gs_reset",
    "is_gs_dt1_message",
    "roland_checksum",
    "matching_signatures",
]
