"""Sound-standard detection from SysEx evidence."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from midi_inspector.detection.reassembly import iter_sysex_messages
from midi_inspector.detection.signatures import SIGNATURES
from midi_inspector.models.core import DetectionFlags, MidiSpecification

if TYPE_CHECKING:
    from collections.abc import Iterable

    from midi_inspector.models.core import MidiEvent

logger = logging.getLogger(__name__)


def collect_flags(events: Iterable[MidiEvent]) -> DetectionFlags:
    """Accumulate detection flags over every SysEx message in a stream.

    All payloads are examined; later evidence can still change the outcome.

    Args:
        events: Time-ordered events flattened across all track chunks.

    Returns:
        Flags set by any matching payload.
    """
    flags = DetectionFlags()

    for payload in iter_sysex_messages(events):
        matched = []
        for name, (matcher, flag) in SIGNATURES.items():
            if matcher(payload):
                setattr(flags, flag, True)
                matched.append(name)
        if matched:
            logger.debug(f"SysEx {payload[:12].hex(' ')} matched {', '.join(matched)}")

    return flags


def classify(flags: DetectionFlags) -> MidiSpecification:
    """Resolve detection flags to a single specification.

    Vendor extensions outrank the generic GM markers they sit on top of;
    GM2 evidence only qualifies the vendor label.
    """
    if flags.has_xg and flags.has_gs:
        return MidiSpecification.XG_GS_MIXED
    if flags.has_xg:
        return MidiSpecification.XG_GM2 if flags.has_gm2 else MidiSpecification.XG
    if flags.has_gs:
        return MidiSpecification.GS_GM2 if flags.has_gm2 else MidiSpecification.GS
    if flags.has_gm2:
        return MidiSpecification.GM2
    if flags.has_gm1:
        return MidiSpecification.GM1
    return MidiSpecification.UNKNOWN


def detect_specification(events: Iterable[MidiEvent]) -> MidiSpecification:
    """Detect which sound standard an event stream targets.

    Args:
        events: Time-ordered events flattened across all track chunks.

    Returns:
        Detected specification.
    """
    flags = collect_flags(events)
    specification = classify(flags)
    logger.debug(f"Detection flags {flags.to_dict()} -> {specification.value}")
    return specification
