"""On/off-key pulse stream and the playback boundary.

A Morse string maps to a stream of one-unit pulses:

    " "  ->  0
    "."  ->  1 0
    "-"  ->  1 1 1 0

Playback hands every 1 to a caller-supplied tone device and sleeps one
unit for every 0. The device is the only part that touches audio hardware
and is not provided here.

Example:
    >>> list(to_pulses(".- "))
    [1, 0, 1, 1, 1, 0, 0]
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from typing import Protocol

from dotdash.errors import ConfigError
from dotdash.utils.logger import get_logger

logger = get_logger(__name__)

ON = 1
OFF = 0

UNIT_MS_RANGE = range(50, 501)
FREQUENCY_RANGE = range(37, 32768)

_PULSES: dict[str, bytes] = {
    " ": bytes((OFF,)),
    ".": bytes((ON, OFF)),
    "-": bytes((ON, ON, ON, OFF)),
}


def to_pulses(morse: str) -> bytes:
    """Convert a Morse string into a 0/1 pulse stream.

    Characters other than space, dot and dash contribute nothing.
    """
    return b"".join(_PULSES.get(char, b"") for char in morse)


class ToneDevice(Protocol):
    """Anything that can sound a fixed tone for a duration."""

    def beep(self, frequency_hz: int, duration_ms: int) -> None:
        """Sound a tone, blocking for its duration."""
        ...


def play(
    pulses: Iterable[int],
    device: ToneDevice,
    *,
    unit_ms: int = 100,
    frequency: int = 800,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Play a pulse stream on a tone device.

    Args:
        pulses: 0/1 values, e.g. the bytes returned by to_pulses()
        device: Receives one beep per ON unit
        unit_ms: Length of one unit in milliseconds (50-500)
        frequency: Tone pitch in Hz (37-32767)
        sleep: Blocking delay used for OFF units, in seconds

    Raises:
        ConfigError: If unit_ms or frequency is out of range
    """
    if unit_ms not in UNIT_MS_RANGE:
        raise ConfigError(f"must be between 50 and 500, got {unit_ms}", field="unit_ms")
    if frequency not in FREQUENCY_RANGE:
        raise ConfigError(f"must be between 37 and 32767, got {frequency}", field="frequency")

    logger.debug("Playing at %d Hz, %d ms per unit", frequency, unit_ms)
    pause = unit_ms / 1000
    for pulse in pulses:
        if pulse:
            device.beep(frequency, unit_ms)
        else:
            sleep(pause)
