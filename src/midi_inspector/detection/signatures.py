"""SysEx signature matchers for sound-standard detection.

Each matcher takes one reassembled SysEx payload (manufacturer or universal
ID byte onward, F0/F7 framing excluded) and returns whether it carries the
signature. Matchers never raise; short or malformed payloads simply fail.

References:
    https://midi.org/community/midi-specifications/system-exclusive-events-gm-reset
    http://www.jososoft.dk/yamaha/articles/midi_10.htm
    https://metacpan.org/pod/Win32API::MIDI::SysEX::Yamaha#Parameter-Change
"""

from __future__ import annotations

from typing import Callable

# Manufacturer / universal IDs
UNIVERSAL_NON_REALTIME = 0x7E
YAMAHA_ID = 0x43
ROLAND_ID = 0x41

# Universal SysEx fields
ALL_DEVICES = 0x7F
GENERAL_MIDI_SUB_ID = 0x09
GM1_SYSTEM_ON = 0x01
GM2_SYSTEM_ON = 0x03

# Yamaha XG fields
XG_MODEL_ID = 0x4C
XG_SYSTEM_ON = 0x7E
XG_ALL_RESET = 0x7F

# Roland GS fields
GS_MODEL_ID = 0x42
ROLAND_DT1 = 0x12
GS_RESET_ADDRESS = (0x40, 0x00, 0x7F)
GS_RESET_DATA = 0x00


def roland_checksum(address_and_data: bytes | list[int]) -> int:
    """Compute a Roland checksum over address and data bytes.

    The checksum makes the 7-bit sum of address, data and checksum zero.

    Args:
        address_and_data: Bytes covered by the checksum.

    Returns:
        Checksum byte (0-127).
    """
    return (128 - (sum(address_and_data) & 0x7F)) & 0x7F


def is_roland_device_id(device_id: int) -> bool:
    """Whether a device ID is 0x10-0x1F or the 0x7F broadcast ID."""
    return device_id == 0x7F or 0x10 <= device_id <= 0x1F


def _is_gm_system_on(data: bytes, sub_id2: int) -> bool:
    return (
        len(data) >= 4
        and data[0] == UNIVERSAL_NON_REALTIME
        and data[1] == ALL_DEVICES
        and data[2] == GENERAL_MIDI_SUB_ID
        and data[3] == sub_id2
    )


def is_gm1_system_on(data: bytes) -> bool:
    """Check for GM System On: 7E 7F 09 01."""
    return _is_gm_system_on(data, GM1_SYSTEM_ON)


def is_gm2_system_on(data: bytes) -> bool:
    """Check for GM2 System On: 7E 7F 09 03."""
    return _is_gm_system_on(data, GM2_SYSTEM_ON)


def is_xg_system_on_or_reset(data: bytes) -> bool:
    """Check for Yamaha XG System On or All Parameter Reset.

    Format: 43 1n 4C 00 00 7E|7F 00
    """
    if len(data) < 7:
        return False

    return (
        data[0] == YAMAHA_ID
        and (data[1] & 0xF0) == 0x10  # device number 0x10-0x1F
        and data[2] == XG_MODEL_ID
        and data[3] == 0x00
        and data[4] == 0x00
        and data[5] in (XG_SYSTEM_ON, XG_ALL_RESET)
        and data[6] == 0x00
    )


def is_xg_parameter_change(data: bytes) -> bool:
    """Check for any Yamaha XG parameter change: 43 1n 4C ...

    Any XG parameter change indicates XG usage, even without System On.
    """
    return (
        len(data) >= 3
        and data[0] == YAMAHA_ID
        and (data[1] & 0xF0) == 0x10
        and data[2] == XG_MODEL_ID
    )


def is_gs_reset(data: bytes) -> bool:
    """Check for a Roland GS Reset with a valid checksum.

    Format: 41 dd 42 12 40 00 7F 00 cc
    """
    if len(data) < 9:
        return False

    if (
        data[0] != ROLAND_ID
        or data[2] != GS_MODEL_ID
        or data[3] != ROLAND_DT1
        or tuple(data[4:7]) != GS_RESET_ADDRESS
        or data[7] != GS_RESET_DATA
    ):
        return False

    if not is_roland_device_id(data[1]):
        return False

    return data[8] == roland_checksum(data[4:8])


def is_gs_dt1_message(data: bytes) -> bool:
    """Check for any Roland GS DT1 (Data Set 1) message: 41 dd 42 12 ...

    Any GS DT1 message indicates GS usage.
    """
    if len(data) < 4:
        return False

    return (
        data[0] == ROLAND_ID
        and is_roland_device_id(data[1])
        and data[2] == GS_MODEL_ID
        and data[3] == ROLAND_DT1
    )


# Matcher name -> (predicate, flag it raises)
SIGNATURES: dict[str, tuple[Callable[[bytes], bool], str]] = {
    "gm1_system_on": (is_gm1_system_on, "has_gm1"),
    "gm2_system_on": (is_gm2_system_on, "has_gm2"),
    "xg_system_on": (is_xg_system_on_or_reset, "has_xg"),
    "xg_parameter_change": (is_xg_parameter_change, "has_xg"),
    "gs_reset": (is_gs_reset, "has_gs"),
    "gs_dt1": (is_gs_dt1_message, "has_gs"),
}


def matching_signatures(data: bytes) -> list[str]:
    """Return the names of every signature the payload satisfies."""
    return [name for name, (matcher, _flag) in SIGNATURES.items() if matcher(data)]
