"""
Cycle Synchronizer

Works out which boundary (:00 or :30) comes next and blocks until it is
close, firing early warnings on the way.

Timing is re-derived from the clock on every poll rather than by counting
sleeps, so drift never accumulates.
"""

import logging
import threading
from typing import Optional

from core.early_warning import EarlyWarningEmitter, WaitState
from core.timing import TimingConfig
from hardware.constants import TARGET_SECONDS, WAIT_EXIT_THRESHOLD
from hardware.interfaces.clock_interface import ClockInterface, ClockReadError


def compute_target(second: int) -> int:
    """
    Second-of-minute to synchronize to.

    Args:
        second: Current second of the minute (0..59)

    Returns:
        30 if we are in the first half of the minute, 0 otherwise

    Example:
        compute_target(12)  # 30
        compute_target(35)  # 0 (next minute)
    """
    top_of_minute, half_minute = TARGET_SECONDS
    return half_minute if second < half_minute else top_of_minute


def compute_wait(second: int, target: int) -> int:
    """Seconds from `second` until `target`, always in 0..59"""
    return (target - second + 60) % 60


class CycleSynchronizer:
    """
    Blocks until the next boundary is WAIT_EXIT_THRESHOLD seconds away.

    Usage:
        sync = CycleSynchronizer(clock, emitter, timing)
        target = sync.wait_for_target(WaitState())
    """

    def __init__(
        self,
        clock: ClockInterface,
        warning_emitter: EarlyWarningEmitter,
        timing: TimingConfig,
        stop_event: Optional[threading.Event] = None,
    ):
        self.logger = logging.getLogger(__name__)
        self.clock = clock
        self.warning_emitter = warning_emitter
        self.timing = timing
        self._stop_event = stop_event or threading.Event()

    def wait_for_target(self, wait_state: WaitState) -> Optional[int]:
        """
        Wait out the current cycle's approach.

        Args:
            wait_state: Fresh per-cycle warning flags

        Returns:
            The cycle's target second (0 or 30), or None if stop was requested
        """
        target = None
        while target is None:
            if self._stop_event.is_set():
                return None
            try:
                second = self.clock.now().second_of_minute
            except ClockReadError as e:
                self.logger.warning(f"Clock read failed at cycle start: {e}")
                self.clock.sleep(self.timing.wait_poll)
                continue
            target = compute_target(second)
            wait = compute_wait(second, target)

        self.logger.debug(f"SEC={second} TARGET={target} WAIT={wait}")

        while wait > WAIT_EXIT_THRESHOLD:
            if self._stop_event.is_set():
                return None

            self.warning_emitter.check(wait, wait_state)

            # Small sleep to avoid busy-looping
            self.clock.sleep(self.timing.wait_poll)

            try:
                second = self.clock.now().second_of_minute
            except ClockReadError as e:
                # Keep the previous WAIT - no progress this poll
                self.logger.warning(f"Clock read failed while waiting: {e}")
                continue

            wait = compute_wait(second, target)
            self.logger.debug(f"Waiting... SEC={second} WAIT={wait}")

        return target
