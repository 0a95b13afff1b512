"""
Blinker

The pulse primitive every signal is built from. A pulse is one ON, a hold,
and the matching OFF on the same channel; nothing else writes to that
channel in between.

Write failures are logged and skipped. The hold still happens, so a dead
LED never shifts the timing of the rest of the cycle.
"""

import logging
from typing import Iterable, Optional

from core.timing import TimingConfig
from hardware.constants import GREEN_CHANNELS
from hardware.interfaces.clock_interface import ClockInterface
from hardware.interfaces.led_interface import (
    LEDChannel,
    LEDInterface,
    LEDState,
    LEDWriteError,
)
from hardware.utils import write_channels


class Blinker:
    """
    Drives pulse trains on an LED sink using the clock's sleep.

    Usage:
        blinker = Blinker(led, clock, timing)
        blinker.blink(LEDChannel.GREEN_HOUR, timing.fast_pulse, count=3)
        blinker.blink_pair(timing.very_fast_pulse, count=5)
    """

    def __init__(
        self,
        led: LEDInterface,
        clock: ClockInterface,
        timing: TimingConfig,
    ):
        self.logger = logging.getLogger(__name__)
        self.led = led
        self.clock = clock
        self.timing = timing
        self.write_failures = 0

    def set(self, channel: LEDChannel, state: LEDState) -> bool:
        """
        Write one level.

        Returns:
            True if the write succeeded
        """
        try:
            self.led.set_level(channel, state)
            return True
        except LEDWriteError as e:
            self.write_failures += 1
            self.logger.warning(f"LED write failed ({channel.value} -> {state.name}): {e}")
            return False

    def set_many(self, channels: Iterable[LEDChannel], state: LEDState) -> None:
        """Write the same level to several channels"""
        failed = write_channels(self.led, channels, state, self.logger)
        self.write_failures += len(failed)

    def pulse(self, channel: LEDChannel, duration: float) -> None:
        """One ON-hold-OFF on a single channel"""
        self.set(channel, LEDState.ON)
        self.clock.sleep(duration)
        self.set(channel, LEDState.OFF)

    def blink(
        self,
        channel: LEDChannel,
        duration: float,
        count: int,
        gap: Optional[float] = None,
    ) -> None:
        """
        Pulse a channel `count` times.

        The gap only separates consecutive pulses (count - 1 gaps); whatever
        comes next is responsible for its own lead-in pause.

        Args:
            channel: LED to blink
            duration: ON time of each pulse
            count: Number of pulses (0 does nothing)
            gap: OFF time between pulses (default: timing.pulse_gap)
        """
        if gap is None:
            gap = self.timing.pulse_gap

        self.logger.debug(f"blink: {channel.value} dur={duration} count={count}")
        for i in range(count):
            if i > 0:
                self.clock.sleep(gap)
            self.pulse(channel, duration)

    def blink_pair(
        self,
        duration: float,
        count: int,
        gap: Optional[float] = None,
    ) -> None:
        """
        Pulse both green LEDs in lockstep `count` times.

        Each pulse is followed by the pair gap, so back-to-back bursts stay
        separated.
        """
        if gap is None:
            gap = self.timing.pair_gap

        self.logger.debug(f"blink_pair: dur={duration} count={count}")
        for _ in range(count):
            self.set_many(GREEN_CHANNELS, LEDState.ON)
            self.clock.sleep(duration)
            self.set_many(GREEN_CHANNELS, LEDState.OFF)
            self.clock.sleep(gap)
