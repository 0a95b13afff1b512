"""
Digit Encoder

Turns an hour and a minute into blink patterns.

Hours (1..12) are blinked as that many short pulses on the hour LED.
Minutes are split into tens and ones and blinked on the minute LED:

    23 -> 2 short, pause, 3 short
    50 -> 5 short, pause, 1 LONG
    09 -> 9 short                 (absent tens digit is skipped)
    00 -> 1 LONG                  (nothing else)

A zero digit cannot be shown as "no pulses", so it is one long pulse that
the reader tells apart by its length.

Encoding is pure (returns a list of steps); DigitEncoder plays the steps on
the LEDs.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from core.blinker import Blinker
from core.timing import TimingConfig
from hardware.constants import HOUR_MAX, HOUR_MIN, MINUTE_MAX, MINUTE_MIN
from hardware.interfaces.clock_interface import ClockReadError, ClockReading
from hardware.interfaces.led_interface import LEDChannel, LEDState


@dataclass(frozen=True)
class BlinkPattern:
    """`count` pulses of `duration` on `channel`, `gap` apart"""

    channel: LEDChannel
    duration: float
    count: int
    gap: float
    is_long: bool = False


@dataclass(frozen=True)
class Pause:
    """All LEDs untouched for `duration`"""

    duration: float


Step = Union[BlinkPattern, Pause]


@dataclass(frozen=True)
class TimeValue:
    """
    Hour and minute to display.

    Raises:
        ClockReadError: If hour is outside 1..12 or minute outside 0..59
    """

    hour: int
    minute: int

    def __post_init__(self):
        if not HOUR_MIN <= self.hour <= HOUR_MAX:
            raise ClockReadError(f"Hour out of range: {self.hour}")
        if not MINUTE_MIN <= self.minute <= MINUTE_MAX:
            raise ClockReadError(f"Minute out of range: {self.minute}")

    @classmethod
    def from_reading(cls, reading: ClockReading) -> "TimeValue":
        return cls(hour=reading.hour12, minute=reading.minute)

    @property
    def tens(self) -> int:
        return self.minute // 10

    @property
    def ones(self) -> int:
        return self.minute % 10


def encode_digit(
    value: int,
    channel: LEDChannel,
    timing: TimingConfig,
    skip_zero: bool = False,
) -> Optional[BlinkPattern]:
    """
    Encode a single digit.

    Args:
        value: Digit 0..9 (hours pass 1..12 and never hit the zero case)
        channel: LED that shows the digit
        timing: Pulse lengths
        skip_zero: Return None for 0 instead of a long pulse (an absent
                   leading digit)

    Returns:
        One long pulse for 0, `value` short pulses otherwise, or None
    """
    if value < 0:
        raise ValueError(f"Digit must not be negative, got {value}")

    if value == 0:
        if skip_zero:
            return None
        return BlinkPattern(
            channel=channel,
            duration=timing.long_pulse,
            count=1,
            gap=timing.pulse_gap,
            is_long=True,
        )

    return BlinkPattern(
        channel=channel,
        duration=timing.fast_pulse,
        count=value,
        gap=timing.pulse_gap,
    )


def encode_hour(hour: int, timing: TimingConfig) -> list[Step]:
    """Hour as short pulses on the hour LED (hour is never 0 in 12-hour form)"""
    if not HOUR_MIN <= hour <= HOUR_MAX:
        raise ValueError(f"Hour must be {HOUR_MIN}..{HOUR_MAX}, got {hour}")
    return [encode_digit(hour, LEDChannel.GREEN_HOUR, timing)]


def encode_minute(minute: int, timing: TimingConfig) -> list[Step]:
    """
    Minute as tens, separator pause, ones on the minute LED.

    Examples:
        encode_minute(23, t)  # [2 short, Pause, 3 short]
        encode_minute(50, t)  # [5 short, Pause, 1 long]
        encode_minute(9, t)   # [9 short]
        encode_minute(0, t)   # [1 long]
    """
    if not MINUTE_MIN <= minute <= MINUTE_MAX:
        raise ValueError(f"Minute must be {MINUTE_MIN}..{MINUTE_MAX}, got {minute}")

    tens, ones = divmod(minute, 10)
    channel = LEDChannel.GREEN_MINUTE

    if tens == 0 and ones == 0:
        return [encode_digit(0, channel, timing)]

    steps: list[Step] = []
    tens_pattern = encode_digit(tens, channel, timing, skip_zero=True)
    if tens_pattern is not None:
        steps.append(tens_pattern)
        steps.append(Pause(timing.tens_ones_pause))

    steps.append(encode_digit(ones, channel, timing))
    return steps


class DigitEncoder:
    """
    Plays hour and minute patterns on the green LEDs.

    Usage:
        encoder = DigitEncoder(blinker)
        encoder.show_hour(7)
        encoder.show_minute(42)
    """

    def __init__(self, blinker: Blinker):
        self.logger = logging.getLogger(__name__)
        self.blinker = blinker
        self.timing = blinker.timing

    def show_hour(self, hour: int) -> list[Step]:
        self.logger.debug(f"Hour = {hour}")
        steps = encode_hour(hour, self.timing)
        self.play(steps)
        self.blinker.set(LEDChannel.GREEN_HOUR, LEDState.OFF)
        return steps

    def show_minute(self, minute: int) -> list[Step]:
        tens, ones = divmod(minute, 10)
        self.logger.debug(f"Minutes = {minute} (TENS={tens} ONES={ones})")
        steps = encode_minute(minute, self.timing)
        self.play(steps)
        self.blinker.set(LEDChannel.GREEN_MINUTE, LEDState.OFF)
        return steps

    def play(self, steps: list[Step]) -> None:
        """Execute encoded steps in order"""
        for step in steps:
            if isinstance(step, Pause):
                self.blinker.clock.sleep(step.duration)
            else:
                if step.is_long:
                    self.logger.debug(f"Zero digit -> long blink on {step.channel.value}")
                self.blinker.blink(step.channel, step.duration, step.count, step.gap)
