"""
Raspberry Pi GPIO LED Implementation

Concrete implementation of LEDInterface for LEDs wired to Raspberry Pi GPIO
pins, using the RPi.GPIO library. This wraps RPi.GPIO to match our interface.

Why wrap an existing library?
1. Decoupling: If RPi.GPIO changes, only this file needs updating
2. Testing: Can swap this for MockLED in tests
3. Portability: The clock logic never knows it is driving a Pi
"""

import logging

try:
    from RPi import GPIO

    GPIO_AVAILABLE = True
except ImportError:
    GPIO_AVAILABLE = False

from hardware.interfaces.led_interface import (
    LEDChannel,
    LEDInterface,
    LEDState,
    LEDWriteError,
)


class RaspberryPiLED(LEDInterface):
    """
    GPIO-driven LEDs using RPi.GPIO.

    This class translates logical channels into BCM pin writes.
    """

    def __init__(self, channel_pins: dict[LEDChannel, int]):
        """
        Initialize GPIO LEDs.

        Args:
            channel_pins: BCM pin number for each logical channel

        Raises:
            LEDWriteError: If RPi.GPIO is missing or pin setup fails
        """
        self.logger = logging.getLogger(__name__)

        self._pins = dict(channel_pins)

        if not GPIO_AVAILABLE:
            raise LEDWriteError(
                "RPi.GPIO library not available. Install with: pip install RPi.GPIO",
            )

        # BCM uses GPIO numbers (GPIO18) vs BOARD uses physical pin numbers (pin 12)
        try:
            GPIO.setmode(GPIO.BCM)
            GPIO.setwarnings(False)  # Disable warnings about pins already in use
            for pin in set(self._pins.values()):
                GPIO.setup(pin, GPIO.OUT, initial=GPIO.LOW)
            self.logger.info(
                f"Raspberry Pi GPIO LEDs initialized (pins: {sorted(set(self._pins.values()))})",
            )
        except Exception as e:
            raise LEDWriteError(f"Failed to initialize GPIO: {e}") from e

    def set_level(self, channel: LEDChannel, state: LEDState) -> None:
        """Set the channel's pin HIGH or LOW"""
        pin = self._pins.get(channel)
        if pin is None:
            raise LEDWriteError(f"Channel {channel.value} not mapped to a pin")

        try:
            GPIO.output(pin, GPIO.HIGH if state == LEDState.ON else GPIO.LOW)
        except Exception as e:
            raise LEDWriteError(f"Failed to write to pin {pin}: {e}") from e

    def channels(self) -> list[LEDChannel]:
        return [channel for channel in LEDChannel if channel in self._pins]

    def describe(self, channel: LEDChannel) -> str:
        pin = self._pins.get(channel)
        return f"GPIO{pin}" if pin is not None else "unmapped"

    def cleanup(self) -> None:
        """
        Drive all pins LOW and release them.

        Important: Always call this before program exits to leave pins in safe state.
        """
        pins = sorted(set(self._pins.values()))
        try:
            for pin in pins:
                GPIO.output(pin, GPIO.LOW)
            GPIO.cleanup(pins)
            self.logger.info(f"Cleaned up GPIO pins: {pins}")
        except Exception as e:
            # Don't raise during cleanup - just log
            self.logger.error(f"Error during GPIO cleanup: {e}")

    def is_available(self) -> bool:
        """Check if running on real Raspberry Pi hardware"""
        return GPIO_AVAILABLE
