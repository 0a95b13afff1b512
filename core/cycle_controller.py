"""
Cycle Controller

Runs the LED clock one cycle at a time, forever:

    WAITING (+ EARLY_WARNING) -> PRE_SIGNAL -> BARRIER_WAIT
        -> HOUR_DISPLAY -> PAUSE -> MINUTE_DISPLAY -> POST_SIGNAL -> WAITING

Nothing carries over between cycles except the live clock, so a restart at
any point is back in step within one cycle.
"""

import logging
import threading
from enum import Enum
from typing import Callable, Optional

from core.blinker import Blinker
from core.bracket import BarrierTimeoutError, BracketSignaler
from core.digit_encoder import DigitEncoder, TimeValue
from core.early_warning import EarlyWarningEmitter, WaitState
from core.synchronizer import CycleSynchronizer
from core.timing import TimingConfig
from hardware.constants import FINAL_WARNING_PULSES
from hardware.interfaces.clock_interface import ClockInterface, ClockReadError
from hardware.interfaces.led_interface import LEDInterface


class CyclePhase(Enum):
    WAITING = "waiting"
    EARLY_WARNING = "early_warning"
    PRE_SIGNAL = "pre_signal"
    BARRIER_WAIT = "barrier_wait"
    HOUR_DISPLAY = "hour_display"
    PAUSE = "pause"
    MINUTE_DISPLAY = "minute_display"
    POST_SIGNAL = "post_signal"


class CycleController:
    """
    Orchestrates synchronizer, warnings, bracket and digit display.

    Usage:
        controller = CycleController(led, clock)
        controller.run()           # Blocks until stop() is called
        controller.run(max_cycles=1)
    """

    def __init__(
        self,
        led: LEDInterface,
        clock: ClockInterface,
        timing: Optional[TimingConfig] = None,
        stop_event: Optional[threading.Event] = None,
    ):
        self.logger = logging.getLogger(__name__)
        self.timing = timing or TimingConfig()
        self._stop_event = stop_event or threading.Event()

        self.blinker = Blinker(led, clock, self.timing)
        self.warnings = EarlyWarningEmitter(self.blinker)
        self.synchronizer = CycleSynchronizer(
            clock,
            self.warnings,
            self.timing,
            stop_event=self._stop_event,
        )
        self.bracket = BracketSignaler(self.blinker, stop_event=self._stop_event)
        self.encoder = DigitEncoder(self.blinker)
        self.clock = clock

        self.phase = CyclePhase.WAITING
        self.cycles_completed = 0
        self.cycles_aborted = 0

        # Called with (old_phase, new_phase) on every transition
        self.on_phase_change: Optional[Callable[[CyclePhase, CyclePhase], None]] = None

        self.logger.info("Cycle controller initialized in WAITING phase")

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def stop(self) -> None:
        """Request a cooperative stop at the next suspension point"""
        self._stop_event.set()

    def transition_to(self, new_phase: CyclePhase) -> None:
        """Switch phase with logging and callback notification"""
        old_phase = self.phase
        self.phase = new_phase

        self.logger.debug(f"Phase: {old_phase.value} -> {new_phase.value}")

        if self.on_phase_change:
            try:
                self.on_phase_change(old_phase, new_phase)
            except Exception as e:
                self.logger.error(f"Error in phase change callback: {e}")

    def run(self, max_cycles: Optional[int] = None) -> None:
        """
        Main loop.

        Args:
            max_cycles: Stop after this many cycles (None = until stop())
        """
        self.logger.info("Starting LED clock loop...")
        cycles = 0
        while not self.stopped:
            self.run_cycle()
            cycles += 1
            if max_cycles is not None and cycles >= max_cycles:
                break
        self.logger.info(
            f"LED clock loop ended ({self.cycles_completed} cycles shown, "
            f"{self.cycles_aborted} abandoned)",
        )

    def run_cycle(self) -> bool:
        """
        Run one full cycle.

        Returns:
            True if the cycle reached POST_SIGNAL, False if it was abandoned
            (stop requested or barrier timeout)
        """
        if self.phase != CyclePhase.WAITING:
            self.transition_to(CyclePhase.WAITING)

        wait_state = WaitState()
        self.transition_to(CyclePhase.EARLY_WARNING)
        target = self.synchronizer.wait_for_target(wait_state)
        if target is None:
            self.transition_to(CyclePhase.WAITING)
            return False

        # Now we are at T-5s (or within that region)
        self.blinker.blink_pair(self.timing.very_fast_pulse, FINAL_WARNING_PULSES)

        self.transition_to(CyclePhase.PRE_SIGNAL)
        self.bracket.pre_signal()
        if self.stopped:
            self.transition_to(CyclePhase.WAITING)
            return False

        self.transition_to(CyclePhase.BARRIER_WAIT)
        try:
            polls = self.bracket.wait_for_second(target)
        except BarrierTimeoutError as e:
            self.logger.warning(f"Abandoning cycle: {e}")
            self.cycles_aborted += 1
            self.transition_to(CyclePhase.WAITING)
            return False
        if polls is None:
            self.transition_to(CyclePhase.WAITING)
            return False

        self._show_time()

        self.transition_to(CyclePhase.POST_SIGNAL)
        self.bracket.post_signal()

        self.cycles_completed += 1
        self.logger.debug("Cycle complete - restarting loop")
        self.transition_to(CyclePhase.WAITING)
        return True

    def _show_time(self) -> None:
        """Hour, pause, minute - skipped entirely if the clock can't be read"""
        try:
            value = TimeValue.from_reading(self.clock.now())
        except ClockReadError as e:
            self.logger.warning(f"Skipping time display, clock unreadable: {e}")
            return

        self.transition_to(CyclePhase.HOUR_DISPLAY)
        self.encoder.show_hour(value.hour)

        # Short pause before showing minutes
        self.transition_to(CyclePhase.PAUSE)
        self.clock.sleep(self.timing.pause_before_minutes)

        self.transition_to(CyclePhase.MINUTE_DISPLAY)
        self.encoder.show_minute(value.minute)
