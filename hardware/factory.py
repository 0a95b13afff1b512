"""
Hardware Factory

Factory pattern for creating hardware implementations.
Automatically selects real or mock implementations based on availability.

Why use a factory?
1. Single place to decide sysfs vs GPIO vs mock LEDs
2. Easy to force mock mode for testing
3. The clock logic doesn't need to know about implementation details
"""

import logging
import threading
from typing import Literal, Optional

from config.settings import (
    GPIO_LED_GREEN_HOUR,
    GPIO_LED_GREEN_MINUTE,
    GPIO_LED_ORANGE_A,
    GPIO_LED_ORANGE_B,
    LED_GREEN_HOUR_PATH,
    LED_GREEN_MINUTE_PATH,
    LED_ORANGE_A_PATH,
    LED_ORANGE_B_PATH,
)
from hardware.implementations.mock_led import MockLED
from hardware.implementations.rpi_gpio import RaspberryPiLED
from hardware.implementations.sysfs_led import SysfsLED
from hardware.implementations.system_clock import SystemClock
from hardware.interfaces.clock_interface import ClockInterface
from hardware.interfaces.led_interface import LEDChannel, LEDInterface

# Type aliases for better type hints
HardwareMode = Literal["auto", "sysfs", "gpio", "mock"]


def build_sysfs_paths(
    green_hour: str = LED_GREEN_HOUR_PATH,
    green_minute: str = LED_GREEN_MINUTE_PATH,
    orange_a: Optional[str] = LED_ORANGE_A_PATH,
    orange_b: Optional[str] = LED_ORANGE_B_PATH,
) -> dict[LEDChannel, str]:
    """
    Map logical channels to brightness files.

    Devices with only two LEDs leave the orange paths empty; the bracket
    signal then lights the green LEDs instead.
    """
    return {
        LEDChannel.GREEN_HOUR: green_hour,
        LEDChannel.GREEN_MINUTE: green_minute,
        LEDChannel.ORANGE_A: orange_a or green_hour,
        LEDChannel.ORANGE_B: orange_b or green_minute,
    }


def build_gpio_pins() -> dict[LEDChannel, int]:
    """Map logical channels to BCM pins from settings"""
    return {
        LEDChannel.GREEN_HOUR: GPIO_LED_GREEN_HOUR,
        LEDChannel.GREEN_MINUTE: GPIO_LED_GREEN_MINUTE,
        LEDChannel.ORANGE_A: GPIO_LED_ORANGE_A,
        LEDChannel.ORANGE_B: GPIO_LED_ORANGE_B,
    }


class HardwareFactory:
    """
    Factory for creating hardware interface implementations.

    Usage:
        # Auto-detect (sysfs, then GPIO, then mock)
        led = HardwareFactory.create_led_sink()

        # Force mock mode (useful for testing)
        led = HardwareFactory.create_led_sink(mode="mock")

        # Force sysfs (raises error if not available)
        led = HardwareFactory.create_led_sink(mode="sysfs")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_led_sink(
        cls,
        mode: HardwareMode = "auto",
    ) -> LEDInterface:
        """
        Create an LED interface instance.

        Args:
            mode: "auto" (detect), "sysfs" / "gpio" (force real hardware),
                  "mock" (force simulation)

        Returns:
            LEDInterface implementation

        Raises:
            RuntimeError: If a real backend was forced but is not available
            ValueError: If mode is unknown
        """
        if mode == "mock":
            cls._logger.info("Creating Mock LEDs (forced)")
            return MockLED()

        if mode == "sysfs":
            try:
                led = SysfsLED(build_sysfs_paths())
                cls._logger.info("Creating sysfs LEDs (forced)")
                return led
            except Exception as e:
                raise RuntimeError(
                    f"sysfs LEDs requested but not available: {e}",
                ) from e

        if mode == "gpio":
            try:
                led = RaspberryPiLED(build_gpio_pins())
                cls._logger.info("Creating Raspberry Pi GPIO LEDs (forced)")
                return led
            except Exception as e:
                raise RuntimeError(
                    f"GPIO LEDs requested but not available: {e}",
                ) from e

        if mode != "auto":
            raise ValueError(f"Unknown hardware mode: {mode}")

        # mode == "auto" - try real backends first, fall back to mock
        try:
            led = SysfsLED(build_sysfs_paths())
            cls._logger.info("Creating sysfs LEDs (auto-detected)")
            return led
        except Exception as e:
            cls._logger.debug(f"sysfs LEDs not available ({e})")

        try:
            led = RaspberryPiLED(build_gpio_pins())
            cls._logger.info("Creating Raspberry Pi GPIO LEDs (auto-detected)")
            return led
        except Exception as e:
            cls._logger.warning(
                f"No real LED hardware available ({e}), using Mock LEDs",
            )
            return MockLED()

    @classmethod
    def create_clock(
        cls,
        stop_event: Optional[threading.Event] = None,
    ) -> ClockInterface:
        """
        Create the wall-clock time source.

        Args:
            stop_event: Event that interrupts sleeps on shutdown
        """
        cls._logger.info("Creating system clock")
        return SystemClock(stop_event=stop_event)


# Convenience function for quick creation


def create_led_sink(force_mock: bool = False) -> LEDInterface:
    """
    Quick LED creation with simple mock override.

    Args:
        force_mock: If True, always use mock (good for testing)

    Example:
        # Normal usage
        led = create_led_sink()

        # Testing
        led = create_led_sink(force_mock=True)
    """
    mode = "mock" if force_mock else "auto"
    return HardwareFactory.create_led_sink(mode=mode)
