"""
Mock LED Implementation

Simulated LED output for development and testing without real LEDs.
Every write is recorded with a timestamp so tests can assert the exact
blink sequence the clock produced.

This is a "Test Double" (specifically, a "Fake" - it has working logic but no real hardware).
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional

from hardware.interfaces.clock_interface import ClockInterface
from hardware.interfaces.led_interface import (
    LEDChannel,
    LEDInterface,
    LEDState,
    LEDWriteError,
)


@dataclass(frozen=True)
class LEDWrite:
    """One recorded write"""

    channel: LEDChannel
    state: LEDState
    timestamp: float


class MockLED(LEDInterface):
    """
    Simulated LEDs that remember every write.

    Args:
        clock: Optional clock whose virtual time stamps the writes
               (MockClock in tests). Wall time is used otherwise.
    """

    def __init__(self, clock: Optional[ClockInterface] = None):
        self.logger = logging.getLogger(__name__)
        self._clock = clock

        self._states: dict[LEDChannel, LEDState] = {
            channel: LEDState.OFF for channel in LEDChannel
        }
        self.history: list[LEDWrite] = []

        # Channels whose writes should fail (for error-path tests)
        self.failing_channels: set[LEDChannel] = set()

        self.logger.info("Mock LEDs initialized (simulation mode)")

    def set_level(self, channel: LEDChannel, state: LEDState) -> None:
        """Record the write and update simulated state"""
        if channel in self.failing_channels:
            raise LEDWriteError(f"[MOCK] Simulated write failure on {channel.value}")

        old_state = self._states[channel]
        self._states[channel] = state
        self.history.append(LEDWrite(channel, state, self._timestamp()))

        # Log state changes for debugging
        if old_state != state:
            self.logger.debug(f"[MOCK] {channel.value}: {old_state.name} -> {state.name}")

    def channels(self) -> list[LEDChannel]:
        return list(LEDChannel)

    def describe(self, channel: LEDChannel) -> str:
        return f"mock:{channel.value}"

    def cleanup(self) -> None:
        """Turn every channel off"""
        for channel in LEDChannel:
            self._states[channel] = LEDState.OFF
        self.logger.info("[MOCK] All LEDs off")

    def is_available(self) -> bool:
        """Mock LEDs never drive real hardware"""
        return False

    def _timestamp(self) -> float:
        if self._clock is not None and hasattr(self._clock, "time"):
            return self._clock.time()
        return time.time()

    # =========================================================================
    # TESTING HELPER METHODS (not part of LEDInterface)
    # =========================================================================

    def get_state(self, channel: LEDChannel) -> LEDState:
        """Current simulated level of a channel"""
        return self._states[channel]

    def writes_for(self, channel: LEDChannel) -> list[LEDWrite]:
        """Recorded writes for one channel, oldest first"""
        return [write for write in self.history if write.channel == channel]

    def pulses(self, channel: LEDChannel) -> list[tuple[float, float]]:
        """
        Reconstruct pulses on a channel from its write history.

        Returns:
            List of (start_time, on_duration) for every OFF->ON->OFF transition
        """
        pulses = []
        on_since: Optional[float] = None
        for write in self.writes_for(channel):
            if write.state == LEDState.ON and on_since is None:
                on_since = write.timestamp
            elif write.state == LEDState.OFF and on_since is not None:
                pulses.append((on_since, write.timestamp - on_since))
                on_since = None
        return pulses

    def clear_history(self) -> None:
        self.history.clear()
