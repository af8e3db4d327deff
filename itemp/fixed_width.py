"""Emulation of C fixed-width integer and single precision float types."""

import logging
import math
import struct

_LOGGER = logging.getLogger(__name__)


def to_uint16(value: int) -> int:
    """Wrap an integer into [0, 65535] like a store to uint16_t."""

    wrapped = value & 0xFFFF
    if wrapped != value:
        _LOGGER.debug("Wrapped %s to uint16 value %s", value, wrapped)
    return wrapped


def to_int16(value: int) -> int:
    """Wrap an integer into [-32768, 32767] like a store to int16_t."""

    wrapped = ((value + 0x8000) & 0xFFFF) - 0x8000
    if wrapped != value:
        _LOGGER.debug("Wrapped %s to int16 value %s", value, wrapped)
    return wrapped


def to_float32(value: float) -> float:
    """Round a float to the nearest IEEE-754 binary32 value."""

    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        _LOGGER.debug("Float %s overflows float32, saturating", value)
        return math.copysign(math.inf, value)


def float_to_uint16(value: float) -> int:
    """Truncate a float toward zero and wrap it into uint16 range."""

    if not math.isfinite(value):
        _LOGGER.debug("Cannot convert %s to uint16, using 0", value)
        return 0

    return to_uint16(int(value))
