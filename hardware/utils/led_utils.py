"""
LED Utilities

Shared helper functions for LED operations.
These are used by the blinker, the service shutdown path and the self-test,
so they live in one place instead of being duplicated.
"""

import logging
from typing import Iterable, Optional

from hardware.interfaces.led_interface import (
    LEDChannel,
    LEDInterface,
    LEDState,
    LEDWriteError,
)


def safe_led_cleanup(
    led: Optional[LEDInterface],
    logger: Optional[logging.Logger] = None,
) -> None:
    """
    Safely turn LEDs off with error handling.

    Cleanup should never crash your program, even if something goes wrong.

    Example:
        safe_led_cleanup(self.led, self.logger)
    """
    if led is None:
        return

    try:
        led.cleanup()
    except Exception as e:
        if logger:
            logger.error(f"Error during LED cleanup: {e}")
        # Don't raise - cleanup should be forgiving


def write_channels(
    led: LEDInterface,
    channels: Iterable[LEDChannel],
    state: LEDState,
    logger: Optional[logging.Logger] = None,
) -> list[LEDChannel]:
    """
    Drive several channels to the same level, one after another.

    A failing channel does not stop the others.

    Returns:
        Channels whose write failed (empty when all succeeded)

    Example:
        write_channels(self.led, ORANGE_CHANNELS, LEDState.ON, self.logger)
    """
    failed = []
    for channel in channels:
        try:
            led.set_level(channel, state)
        except LEDWriteError as e:
            failed.append(channel)
            if logger:
                logger.warning(f"LED write failed ({channel.value} -> {state.name}): {e}")
    return failed


def check_led_available(
    led: LEDInterface,
    logger: Optional[logging.Logger] = None,
) -> bool:
    """
    Check if real LED hardware is driven and log appropriate message.

    Returns:
        True if real hardware available, False if simulated
    """
    is_available = led.is_available()

    if logger:
        if is_available:
            logger.info("Running on real LED hardware")
        else:
            logger.warning("Running in LED simulation mode")

    return is_available
