"""
Hardware Implementations Package

Exposes concrete implementations of hardware interfaces.
"""

from hardware.implementations.mock_clock import MockClock
from hardware.implementations.mock_led import LEDWrite, MockLED
from hardware.implementations.rpi_gpio import RaspberryPiLED
from hardware.implementations.sysfs_led import SysfsLED
from hardware.implementations.system_clock import SystemClock

# Public API (sorted alphabetically)
__all__ = [
    "LEDWrite",
    "MockClock",
    "MockLED",
    "RaspberryPiLED",
    "SysfsLED",
    "SystemClock",
]
