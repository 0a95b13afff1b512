"""
Mock Clock Implementation

Virtual clock for tests. Time only moves when somebody sleeps (or calls
set_time()), so a full clock cycle that takes a minute in real life runs in
milliseconds and is completely deterministic.

Hour and minute are derived from the virtual epoch in UTC, which keeps
tests independent of the machine's timezone.
"""

import logging
import time
from typing import Optional

from hardware.interfaces.clock_interface import (
    ClockInterface,
    ClockReadError,
    ClockReading,
)


class MockClock(ClockInterface):
    """
    Simulated clock driven by virtual time.

    Args:
        start_epoch: Initial virtual time (seconds since epoch, may be fractional)
        frozen: If True, sleep() does not advance time (broken clock)
    """

    def __init__(self, start_epoch: float = 0.0, frozen: bool = False):
        self.logger = logging.getLogger(__name__)
        self._now = float(start_epoch)
        self.frozen = frozen

        # Number of upcoming now() calls that should fail
        self._pending_failures = 0
        self.fail_forever = False

        self.sleep_history: list[float] = []
        self.read_count = 0

    def now(self) -> ClockReading:
        self.read_count += 1
        if self.fail_forever or self._pending_failures > 0:
            if self._pending_failures > 0:
                self._pending_failures -= 1
            raise ClockReadError("[MOCK] Simulated clock read failure")

        epoch = int(self._now)
        utc = time.gmtime(epoch)
        return ClockReading(
            epoch_seconds=epoch,
            hour12=utc.tm_hour % 12 or 12,
            minute=utc.tm_min,
        )

    def sleep(self, seconds: float) -> None:
        self.sleep_history.append(seconds)
        if not self.frozen and seconds > 0:
            self._now += seconds

    # =========================================================================
    # TESTING HELPER METHODS (not part of ClockInterface)
    # =========================================================================

    def time(self) -> float:
        """Current virtual time with sub-second precision"""
        return self._now

    def set_time(self, epoch: float) -> None:
        """Jump to an absolute virtual time (can go backwards)"""
        self._now = float(epoch)

    def fail_next_reads(self, count: int = 1) -> None:
        """Make the next `count` now() calls raise ClockReadError"""
        self._pending_failures += count

    def total_slept(self, since: Optional[int] = None) -> float:
        """Sum of recorded sleeps, optionally from an index in sleep_history"""
        return sum(self.sleep_history[since or 0:])
