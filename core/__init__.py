"""
Core LED clock logic.

Public API:
    - CycleController: Runs the clock cycle forever
    - CyclePhase: Phases of one cycle
    - TimingConfig: Pulse lengths, pauses and poll intervals
    - compute_target / compute_wait: Boundary arithmetic
    - encode_digit / encode_hour / encode_minute: Blink pattern encoding

Usage:
    from core import CycleController

    controller = CycleController(led, clock)
    controller.run()
"""

from core.bracket import BarrierTimeoutError, BracketSignaler
from core.cycle_controller import CycleController, CyclePhase
from core.digit_encoder import (
    BlinkPattern,
    DigitEncoder,
    Pause,
    TimeValue,
    encode_digit,
    encode_hour,
    encode_minute,
)
from core.early_warning import EarlyWarningEmitter, WaitState
from core.synchronizer import CycleSynchronizer, compute_target, compute_wait
from core.timing import TimingConfig

__all__ = [
    "BarrierTimeoutError",
    "BlinkPattern",
    "BracketSignaler",
    "CycleController",
    "CyclePhase",
    "CycleSynchronizer",
    "DigitEncoder",
    "EarlyWarningEmitter",
    "Pause",
    "TimeValue",
    "TimingConfig",
    "WaitState",
    "compute_target",
    "compute_wait",
    "encode_digit",
    "encode_hour",
    "encode_minute",
]
