"""
Bracket Signaler

Marks the start and end of the reading window with the orange LEDs:

    pre-signal:   orange on, off, on   (while converging on the target)
    barrier:      orange off exactly when the target second arrives
    post-signal:  orange on, then off  (time display finished)
"""

import logging
import threading
from typing import Optional

from core.blinker import Blinker
from hardware.constants import GREEN_CHANNELS, ORANGE_CHANNELS
from hardware.interfaces.clock_interface import ClockReadError
from hardware.interfaces.led_interface import LEDState


class BarrierTimeoutError(Exception):
    """
    The target second never showed up within the barrier timeout.

    The cycle is abandoned and the controller starts over from WAITING.
    """


class BracketSignaler:
    """
    Orange attention pattern around the time display.

    Usage:
        bracket = BracketSignaler(blinker)
        bracket.pre_signal()
        bracket.wait_for_second(target)
        # ... show time ...
        bracket.post_signal()
    """

    def __init__(self, blinker: Blinker, stop_event: Optional[threading.Event] = None):
        self.logger = logging.getLogger(__name__)
        self.blinker = blinker
        self._stop_event = stop_event or threading.Event()
        self.clock = blinker.clock
        self.timing = blinker.timing

    def pre_signal(self) -> None:
        """Double orange pulse, ending with orange left ON"""
        self.logger.debug("Pre-event signal: green off, orange on")
        self.blinker.set_many(GREEN_CHANNELS, LEDState.OFF)
        self.blinker.set_many(ORANGE_CHANNELS, LEDState.ON)

        self.clock.sleep(self.timing.bracket_hold)
        self.blinker.set_many(ORANGE_CHANNELS, LEDState.OFF)

        self.clock.sleep(self.timing.bracket_hold)
        self.blinker.set_many(ORANGE_CHANNELS, LEDState.ON)

    def wait_for_second(self, target: int) -> Optional[int]:
        """
        Poll until `epoch mod 60 == target`, then turn orange off.

        Failed clock reads count as missed polls. A stop request ends the
        wait early with orange off.

        Args:
            target: Second of minute to align on (0 or 30)

        Returns:
            Number of polls it took, or None if stop was requested

        Raises:
            BarrierTimeoutError: If the bound from timing.barrier_timeout
                                 is exhausted (orange is turned off first)
        """
        self.logger.debug(f"Waiting for exact target second ({target})")
        max_polls = self.timing.barrier_max_polls

        for poll in range(max_polls):
            if self._stop_event.is_set():
                self.blinker.set_many(ORANGE_CHANNELS, LEDState.OFF)
                return None

            try:
                if self.clock.now().second_of_minute == target:
                    self.blinker.set_many(ORANGE_CHANNELS, LEDState.OFF)
                    return poll
            except ClockReadError as e:
                self.logger.warning(f"Clock read failed at barrier: {e}")

            # Very short sleeps so we catch the target quickly
            self.clock.sleep(self.timing.barrier_poll)

        self.blinker.set_many(ORANGE_CHANNELS, LEDState.OFF)
        raise BarrierTimeoutError(
            f"Second {target} not reached after {max_polls} polls "
            f"({self.timing.barrier_timeout}s)",
        )

    def post_signal(self) -> None:
        """Single orange hold marking the end of the reading window"""
        self.logger.debug("After-event signal: orange on, then off")
        self.blinker.set_many(ORANGE_CHANNELS, LEDState.ON)
        self.clock.sleep(self.timing.bracket_hold)
        self.blinker.set_many(ORANGE_CHANNELS, LEDState.OFF)
