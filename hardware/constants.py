"""
Hardware Constants

This file centralizes the fixed numbers of the LED clock protocol: the
warning thresholds, the target boundaries and the channel groupings.
Tunable timing lives in config/settings.py; what is here defines the
signal a reader has learned to recognise and is not meant to be tuned.
"""

from hardware.interfaces.led_interface import LEDChannel

# =============================================================================
# CYCLE SYNCHRONIZATION
# =============================================================================

# The clock shows the time twice a minute, at these seconds
TARGET_SECONDS = (0, 30)  # (top of minute, half minute)

# The wait loop hands over to the bracket signal at this many seconds out
WAIT_EXIT_THRESHOLD = 5

# =============================================================================
# EARLY WARNING BURSTS
# =============================================================================
# (seconds remaining, pulses in burst) - checked top to bottom.
# Fewer pulses as the moment gets closer, like a countdown.

EARLY_WARNING_THRESHOLDS = (
    (25, 5),
    (20, 4),
    (15, 3),
    (10, 2),
)

# Pulses in the final blink when the wait loop ends
FINAL_WARNING_PULSES = 1

# =============================================================================
# CHANNEL GROUPS
# =============================================================================

GREEN_CHANNELS = (LEDChannel.GREEN_HOUR, LEDChannel.GREEN_MINUTE)
ORANGE_CHANNELS = (LEDChannel.ORANGE_A, LEDChannel.ORANGE_B)

# =============================================================================
# TIME RANGES
# =============================================================================

HOUR_MIN = 1
HOUR_MAX = 12
MINUTE_MIN = 0
MINUTE_MAX = 59
