"""
Linux sysfs LED Implementation

Concrete implementation of LEDInterface for boards that expose their LEDs
under /sys/class/leds/ (OpenWrt routers, most ARM SBCs). Each channel maps
to a `brightness` file; writing "1" lights the LED, "0" turns it off.

Why sysfs instead of a GPIO library?
1. Router LEDs are owned by the kernel LED subsystem, not raw GPIO
2. No extra dependency - plain file writes
3. Works unchanged across every board with an LED class driver
"""

import logging
import os
from pathlib import Path
from typing import Union

from hardware.interfaces.led_interface import (
    LEDChannel,
    LEDInterface,
    LEDState,
    LEDWriteError,
)


class SysfsLED(LEDInterface):
    """
    LED output through /sys/class/leds/<name>/brightness files.

    Usage:
        led = SysfsLED({
            LEDChannel.GREEN_HOUR: "/sys/class/leds/green:power/brightness",
            LEDChannel.GREEN_MINUTE: "/sys/class/leds/green:wan/brightness",
        })
        led.set_level(LEDChannel.GREEN_HOUR, LEDState.ON)
    """

    def __init__(self, channel_paths: dict[LEDChannel, Union[str, Path]]):
        """
        Initialize sysfs LED output.

        Args:
            channel_paths: Brightness file for each logical channel.
                           Several channels may share one file.

        Raises:
            LEDWriteError: If a brightness file is missing or not writable
        """
        self.logger = logging.getLogger(__name__)

        self._paths: dict[LEDChannel, Path] = {
            channel: Path(path) for channel, path in channel_paths.items()
        }

        missing = [
            str(path)
            for path in self._paths.values()
            if not path.exists() or not os.access(path, os.W_OK)
        ]
        if missing:
            raise LEDWriteError(
                f"sysfs LED brightness files not writable: {', '.join(missing)}",
            )

        self.logger.info(
            f"sysfs LEDs initialized ({len(set(self._paths.values()))} physical)",
        )

    def set_level(self, channel: LEDChannel, state: LEDState) -> None:
        """Write 1 or 0 to the channel's brightness file"""
        path = self._paths.get(channel)
        if path is None:
            raise LEDWriteError(f"Channel {channel.value} not mapped to a LED")

        try:
            with open(path, "w", encoding="ascii") as brightness:
                brightness.write(f"{state.value}\n")
            # Don't log every write - too verbose for blinking LEDs
        except OSError as e:
            raise LEDWriteError(f"Failed to write {path}: {e}") from e

    def channels(self) -> list[LEDChannel]:
        return [channel for channel in LEDChannel if channel in self._paths]

    def describe(self, channel: LEDChannel) -> str:
        path = self._paths.get(channel)
        return str(path) if path else "unmapped"

    def cleanup(self) -> None:
        """Turn every mapped LED off"""
        for path in set(self._paths.values()):
            try:
                path.write_text(f"{LEDState.OFF.value}\n", encoding="ascii")
            except OSError as e:
                # Don't raise during cleanup - just log
                self.logger.error(f"Error turning off {path}: {e}")

        self.logger.info("sysfs LEDs turned off")

    def is_available(self) -> bool:
        return True
