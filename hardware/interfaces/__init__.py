"""
Hardware Interfaces Package

Exposes abstract interfaces that define contracts for hardware components.
"""

from hardware.interfaces.clock_interface import (
    ClockInterface,
    ClockReadError,
    ClockReading,
)
from hardware.interfaces.led_interface import (
    LEDChannel,
    LEDInterface,
    LEDState,
    LEDWriteError,
)

# Public API (sorted alphabetically)
__all__ = [
    "ClockInterface",
    "ClockReadError",
    "ClockReading",
    "LEDChannel",
    "LEDInterface",
    "LEDState",
    "LEDWriteError",
]
