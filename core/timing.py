"""
Timing Configuration

Bundles every pulse length, pause and poll interval into one object that is
handed to the components, so tests can build their own without touching
environment variables.
"""

from dataclasses import dataclass

from config.settings import (
    BARRIER_POLL_INTERVAL,
    BARRIER_TIMEOUT,
    LED_BLINK_FAST,
    LED_BLINK_GAP,
    LED_BLINK_PAIR_GAP,
    LED_BLINK_VERY_FAST,
    LED_BLINK_ZERO,
    PAUSE_BEFORE_MINUTES,
    PAUSE_BETWEEN_TENS_AND_ONES,
    PAUSE_BRACKET,
    WAIT_POLL_INTERVAL,
)


@dataclass(frozen=True)
class TimingConfig:
    """All durations in seconds."""

    very_fast_pulse: float = LED_BLINK_VERY_FAST
    fast_pulse: float = LED_BLINK_FAST
    pulse_gap: float = LED_BLINK_GAP
    pair_gap: float = LED_BLINK_PAIR_GAP
    long_pulse: float = LED_BLINK_ZERO
    pause_before_minutes: float = PAUSE_BEFORE_MINUTES
    tens_ones_pause: float = PAUSE_BETWEEN_TENS_AND_ONES
    bracket_hold: float = PAUSE_BRACKET
    barrier_poll: float = BARRIER_POLL_INTERVAL
    wait_poll: float = WAIT_POLL_INTERVAL
    barrier_timeout: float = BARRIER_TIMEOUT

    def __post_init__(self):
        for name, value in self.__dict__.items():
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")
        if self.barrier_poll <= 0 or self.wait_poll <= 0:
            raise ValueError("Poll intervals must be positive")

    @property
    def barrier_max_polls(self) -> int:
        """Iteration bound for the exact-second wait"""
        return max(1, round(self.barrier_timeout / self.barrier_poll))
