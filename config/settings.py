"""
Central Configuration File

ALL configuration values live here. This is the single source of truth.

Guidelines:
- Device-specific values (LED paths, pins) can be overridden in .env
- Import these settings in modules: from config.settings import LED_BLINK_FAST
- Timing values are in seconds and accept fractions
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_float(name: str, default: float) -> float:
    return float(os.getenv(name, str(default)))


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


# =============================================================================
# HARDWARE CONFIGURATION
# =============================================================================

# Which LED backend to use: auto, sysfs, gpio or mock
LED_HARDWARE_MODE = os.getenv("LED_HARDWARE_MODE", "auto")

# sysfs LED brightness files (check what you have with: ls /sys/class/leds/)
LED_GREEN_HOUR_PATH = os.getenv(
    "LED_GREEN_HOUR_PATH",
    "/sys/class/leds/green:power/brightness",
)
LED_GREEN_MINUTE_PATH = os.getenv(
    "LED_GREEN_MINUTE_PATH",
    "/sys/class/leds/green:wan/brightness",
)
# Leave empty on devices without a separate orange pair - the bracket
# signal then reuses the green LEDs
LED_ORANGE_A_PATH = os.getenv(
    "LED_ORANGE_A_PATH",
    "/sys/class/leds/orange:power/brightness",
)
LED_ORANGE_B_PATH = os.getenv(
    "LED_ORANGE_B_PATH",
    "/sys/class/leds/orange:wan/brightness",
)

# GPIO Pin Assignments (BCM numbering) for Raspberry Pi builds
GPIO_LED_GREEN_HOUR = _env_int("GPIO_LED_GREEN_HOUR", 13)  # physical pin 33
GPIO_LED_GREEN_MINUTE = _env_int("GPIO_LED_GREEN_MINUTE", 19)  # physical pin 35
GPIO_LED_ORANGE_A = _env_int("GPIO_LED_ORANGE_A", 12)  # physical pin 32
GPIO_LED_ORANGE_B = _env_int("GPIO_LED_ORANGE_B", 16)  # physical pin 36

# =============================================================================
# BLINK TIMING (seconds)
# =============================================================================

LED_BLINK_VERY_FAST = _env_float("LED_BLINK_VERY_FAST", 0.1)  # early warnings
LED_BLINK_FAST = _env_float("LED_BLINK_FAST", 0.2)  # hour/minute digits
LED_BLINK_GAP = _env_float("LED_BLINK_GAP", 0.3)  # between digit pulses
LED_BLINK_PAIR_GAP = _env_float("LED_BLINK_PAIR_GAP", 0.2)  # between warning pulses
LED_BLINK_ZERO = _env_float("LED_BLINK_ZERO", 1.2)  # long pulse = digit 0

PAUSE_BEFORE_MINUTES = _env_float("PAUSE_BEFORE_MINUTES", 0.5)
PAUSE_BETWEEN_TENS_AND_ONES = _env_float("PAUSE_BETWEEN_TENS_AND_ONES", 0.8)
PAUSE_BRACKET = _env_float("PAUSE_BRACKET", 1.0)  # orange hold

# =============================================================================
# SYNCHRONIZATION
# =============================================================================

WAIT_POLL_INTERVAL = _env_float("WAIT_POLL_INTERVAL", 0.2)
BARRIER_POLL_INTERVAL = _env_float("BARRIER_POLL_INTERVAL", 0.05)
# Upper bound on the exact-second wait before the cycle is abandoned.
# Must exceed the time left after the pre-signal (up to ~4s with defaults).
BARRIER_TIMEOUT = _env_float("BARRIER_TIMEOUT", 10.0)

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

# Debug trace of every phase and computed value (on/off)
LEDCLOCK_DEBUG = os.getenv("LEDCLOCK_DEBUG", "off").lower() in ("on", "1", "true")

LOG_DIR = os.getenv("LOG_DIR", "/var/log/ledclock")
LOG_SERVICE_FILE = "service.log"
