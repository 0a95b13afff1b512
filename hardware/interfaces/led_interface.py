"""
LED Interface - Abstract Hardware Layer

This defines the contract (interface) that any LED output implementation must
follow. The clock logic only ever talks to this interface, never to sysfs
files or GPIO pins directly.

The model is write-only: levels are pushed to the hardware and never read
back. A write that fails raises LEDWriteError and the caller decides whether
to carry on.
"""

from abc import ABC, abstractmethod
from enum import Enum


class LEDChannel(Enum):
    """
    Logical LED roles.

    Implementations map each role to a physical output. The orange pair may
    share physical LEDs with the green pair on devices that only have two.
    """

    GREEN_HOUR = "green_hour"  # Shows the hour
    GREEN_MINUTE = "green_minute"  # Shows the minute
    ORANGE_A = "orange_a"  # Bracket signal
    ORANGE_B = "orange_b"  # Bracket signal


class LEDState(Enum):
    """Binary LED level"""

    OFF = 0
    ON = 1


class LEDInterface(ABC):
    """
    Abstract base class for LED output.

    Any class that inherits from this MUST implement all @abstractmethod methods.
    """

    @abstractmethod
    def set_level(self, channel: LEDChannel, state: LEDState) -> None:
        """
        Drive a channel ON or OFF.

        Args:
            channel: Logical LED to drive
            state: Desired level

        Raises:
            LEDWriteError: If the write did not reach the hardware
        """

    @abstractmethod
    def channels(self) -> list[LEDChannel]:
        """
        List the logical channels this sink can drive.

        Returns:
            Channels in LEDChannel order
        """

    @abstractmethod
    def describe(self, channel: LEDChannel) -> str:
        """
        Human-readable physical target of a channel (path, pin, ...).

        Used for startup logging and the self-test.
        """

    @abstractmethod
    def cleanup(self) -> None:
        """
        Turn every channel OFF and release resources.
        Important to call this before program exits!
        """

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the LED hardware is actually available.

        Returns:
            True if running on real hardware, False if simulated
        """


class LEDWriteError(Exception):
    """
    Raised when a channel write does not succeed.

    Never fatal to the service: a missed pulse is logged and skipped.
    """
