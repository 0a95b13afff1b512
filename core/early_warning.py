"""
Early Warning Emitter

Escalating pair-blink bursts while the service waits for the next boundary:
5 pulses at 25s out, 4 at 20s, 3 at 15s, 2 at 10s. Each fires at most once
per cycle.
"""

import logging
from dataclasses import dataclass, field

from core.blinker import Blinker
from hardware.constants import EARLY_WARNING_THRESHOLDS


@dataclass
class WaitState:
    """
    Which warning thresholds already fired this cycle.

    Created fresh at the top of every cycle. A flag only ever goes from
    False to True.
    """

    fired: dict[int, bool] = field(
        default_factory=lambda: {
            threshold: False for threshold, _ in EARLY_WARNING_THRESHOLDS
        },
    )

    def has_fired(self, threshold: int) -> bool:
        return self.fired[threshold]

    def mark_fired(self, threshold: int) -> None:
        self.fired[threshold] = True

    @property
    def did25(self) -> bool:
        return self.fired[25]

    @property
    def did20(self) -> bool:
        return self.fired[20]

    @property
    def did15(self) -> bool:
        return self.fired[15]

    @property
    def did10(self) -> bool:
        return self.fired[10]


class EarlyWarningEmitter:
    """
    Fires warning bursts as WAIT crosses each threshold.

    Usage:
        emitter = EarlyWarningEmitter(blinker)
        state = WaitState()
        emitter.check(wait=24, wait_state=state)  # 5-pulse burst
        emitter.check(wait=23, wait_state=state)  # nothing, already fired
    """

    def __init__(self, blinker: Blinker):
        self.logger = logging.getLogger(__name__)
        self.blinker = blinker

    def check(self, wait: int, wait_state: WaitState) -> list[int]:
        """
        Fire every threshold at or above `wait` that has not fired yet.

        Several thresholds can fire in one call when a slow poll skipped
        past them; they fire in descending threshold order.

        Args:
            wait: Seconds until the target boundary
            wait_state: This cycle's flags (mutated)

        Returns:
            Thresholds fired by this call, in firing order
        """
        fired = []
        for threshold, pulses in EARLY_WARNING_THRESHOLDS:
            if wait <= threshold and not wait_state.has_fired(threshold):
                self.logger.debug(
                    f"Early warning: {threshold}s -> {pulses} fast blinks",
                )
                self.blinker.blink_pair(self.blinker.timing.very_fast_pulse, pulses)
                wait_state.mark_fired(threshold)
                fired.append(threshold)
        return fired
