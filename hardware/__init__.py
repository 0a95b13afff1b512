"""
Hardware Module

LED output and clock abstraction for the LED clock.

Provides automatic detection and graceful fallback between real LEDs
(sysfs or Raspberry Pi GPIO) and a mock implementation for testing.

Public API:
    - HardwareFactory: Factory for creating hardware components
    - create_led_sink: Quick LED creation with auto-detection
    - LEDInterface: LED output contract
    - ClockInterface: Time source contract

Usage:
    from hardware import create_led_sink

    # Auto-detects real vs mock hardware
    led = create_led_sink()
"""

from hardware.factory import HardwareFactory, create_led_sink
from hardware.interfaces.clock_interface import ClockInterface
from hardware.interfaces.led_interface import LEDInterface

__all__ = [
    "ClockInterface",
    "HardwareFactory",
    "LEDInterface",
    "create_led_sink",
]
