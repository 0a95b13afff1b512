"""
Clock Interface - Time Source and Sleep Primitive

All timing decisions are taken from this interface so that tests can drive
the clock service with virtual time instead of waiting on the wall clock.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ClockReading:
    """
    One sample of the clock.

    epoch_seconds: whole seconds since the Unix epoch
    hour12: local hour in 12-hour form (1..12)
    minute: local minute (0..59)
    """

    epoch_seconds: int
    hour12: int
    minute: int

    @property
    def second_of_minute(self) -> int:
        """Second within the current minute (0..59)"""
        return self.epoch_seconds % 60


class ClockInterface(ABC):
    """
    Abstract base class for time access.

    Any class that inherits from this MUST implement all @abstractmethod methods.
    """

    @abstractmethod
    def now(self) -> ClockReading:
        """
        Sample the clock.

        Returns:
            Current ClockReading

        Raises:
            ClockReadError: If the clock is unavailable or returns garbage
        """

    @abstractmethod
    def sleep(self, seconds: float) -> None:
        """
        Suspend the caller.

        Args:
            seconds: Duration, sub-second resolution required
        """


class ClockReadError(Exception):
    """
    Raised when the clock cannot be read or reports an impossible value.

    Never fatal to the service: the current poll is treated as no progress.
    """
