"""
System Clock Implementation

Wall-clock time from the operating system. Sleeping goes through a
threading.Event so a shutdown request wakes the service immediately instead
of waiting out the current pause.
"""

import logging
import threading
import time
from typing import Optional

from hardware.interfaces.clock_interface import (
    ClockInterface,
    ClockReadError,
    ClockReading,
)


class SystemClock(ClockInterface):
    """
    Local time from time.time() / time.localtime().

    Args:
        stop_event: Optional event; once set, sleep() returns immediately
    """

    def __init__(self, stop_event: Optional[threading.Event] = None):
        self.logger = logging.getLogger(__name__)
        self._stop_event = stop_event or threading.Event()

    def now(self) -> ClockReading:
        """Sample wall-clock time in local 12-hour form"""
        try:
            current = time.time()
            local = time.localtime(current)
        except (OverflowError, OSError, ValueError) as e:
            raise ClockReadError(f"System clock unavailable: {e}") from e

        # Hours 1 to 12, same as `date +%-I`
        hour12 = local.tm_hour % 12 or 12
        return ClockReading(
            epoch_seconds=int(current),
            hour12=hour12,
            minute=local.tm_min,
        )

    def sleep(self, seconds: float) -> None:
        if seconds <= 0:
            return
        # Event.wait returns early when shutdown is requested
        self._stop_event.wait(seconds)
