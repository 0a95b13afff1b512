"""
Hardware Utilities Package

Exposes shared utility functions for hardware operations.

Public API:
    - check_led_available: Check if real LED hardware is driven
    - safe_led_cleanup: Safe LED shutdown with error handling
    - write_channels: Set several channels, tolerating write failures

Usage:
    from hardware.utils import write_channels

    write_channels(led, ORANGE_CHANNELS, LEDState.ON, logger)
"""

from hardware.utils.led_utils import (
    check_led_available,
    safe_led_cleanup,
    write_channels,
)

# Public API (sorted alphabetically)
__all__ = [
    "check_led_available",
    "safe_led_cleanup",
    "write_channels",
]
