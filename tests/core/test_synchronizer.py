"""
Cycle Synchronizer and Early Warning Tests

Tests showing:
- TARGET / WAIT arithmetic for every second of the minute
- Warning thresholds fire once each, in order, with the right burst sizes
- Wait loop survives clock read failures and a clock that jumps back

To run:
    pytest tests/core/test_synchronizer.py -v
"""

import threading

import pytest

from core.blinker import Blinker
from core.early_warning import EarlyWarningEmitter, WaitState
from core.synchronizer import CycleSynchronizer, compute_target, compute_wait
from hardware.implementations.mock_clock import MockClock
from hardware.implementations.mock_led import MockLED
from hardware.interfaces.led_interface import LEDChannel

# =============================================================================
# BOUNDARY ARITHMETIC
# =============================================================================


@pytest.mark.unit
@pytest.mark.parametrize("second", range(60))
def test_target_and_wait_for_every_second(second):
    target = compute_target(second)
    wait = compute_wait(second, target)

    assert target == (30 if second < 30 else 0)
    assert wait == (target - second + 60) % 60
    assert 0 <= wait <= 59


@pytest.mark.unit
@pytest.mark.parametrize(
    "second,target,wait",
    [(0, 30, 30), (29, 30, 1), (30, 0, 30), (35, 0, 25), (59, 0, 1)],
)
def test_target_and_wait_examples(second, target, wait):
    assert compute_target(second) == target
    assert compute_wait(second, target) == wait


# =============================================================================
# WAIT STATE
# =============================================================================


@pytest.mark.unit
def test_wait_state_starts_clear():
    state = WaitState()

    assert not any([state.did25, state.did20, state.did15, state.did10])


@pytest.mark.unit
def test_wait_states_are_independent():
    """Each cycle gets fresh flags."""
    first = WaitState()
    first.mark_fired(25)

    assert WaitState().did25 is False


# =============================================================================
# EARLY WARNING
# =============================================================================


@pytest.mark.unit
def test_warnings_fire_once_each_in_order(blinker, mock_led):
    emitter = EarlyWarningEmitter(blinker)
    state = WaitState()

    assert emitter.check(26, state) == []
    assert emitter.check(25, state) == [25]
    assert emitter.check(24, state) == []
    assert emitter.check(20, state) == [20]
    assert emitter.check(15, state) == [15]
    assert emitter.check(10, state) == [10]
    assert emitter.check(6, state) == []

    assert state.did25 and state.did20 and state.did15 and state.did10
    assert len(mock_led.pulses(LEDChannel.GREEN_HOUR)) == 5 + 4 + 3 + 2


@pytest.mark.unit
def test_skipped_thresholds_fire_together(blinker):
    """A coarse poll jumping past several thresholds fires all of them."""
    emitter = EarlyWarningEmitter(blinker)
    state = WaitState()

    assert emitter.check(12, state) == [25, 20, 15]
    assert emitter.check(9, state) == [10]


@pytest.mark.unit
@pytest.mark.parametrize("wait,pulses", [(25, 5), (20, 4), (15, 3), (10, 2)])
def test_burst_sizes(blinker, mock_led, wait, pulses):
    state = WaitState()
    # Pre-fire the higher thresholds so only one burst remains
    for threshold in (25, 20, 15, 10):
        if threshold > wait:
            state.mark_fired(threshold)

    EarlyWarningEmitter(blinker).check(wait, state)

    hour_pulses = mock_led.pulses(LEDChannel.GREEN_HOUR)
    minute_pulses = mock_led.pulses(LEDChannel.GREEN_MINUTE)
    assert len(hour_pulses) == pulses
    # Lockstep pair blink: both LEDs pulse together, very fast
    assert [start for start, _ in hour_pulses] == [start for start, _ in minute_pulses]
    assert all(duration == pytest.approx(0.1) for _, duration in hour_pulses)


# =============================================================================
# WAIT LOOP
# =============================================================================


def _synchronizer(blinker, clock, timing, stop_event=None):
    return CycleSynchronizer(
        clock,
        EarlyWarningEmitter(blinker),
        timing,
        stop_event=stop_event,
    )


@pytest.mark.unit
def test_second_35_fires_25s_warning_immediately(make_clock, timing):
    """SEC=35 -> TARGET=0, WAIT=25: the 5-pulse burst is the very first thing."""
    clock = make_clock(3, 14, 35)
    led = MockLED(clock=clock)
    start = clock.time()

    target = _synchronizer(Blinker(led, clock, timing), clock, timing).wait_for_target(
        WaitState(),
    )

    assert target == 0
    first_pulse_start = led.pulses(LEDChannel.GREEN_HOUR)[0][0]
    assert first_pulse_start == pytest.approx(start)


@pytest.mark.unit
def test_wait_loop_returns_near_target(make_clock, timing):
    clock = make_clock(3, 14, 2)
    led = MockLED(clock=clock)
    state = WaitState()

    target = _synchronizer(Blinker(led, clock, timing), clock, timing).wait_for_target(state)

    assert target == 30
    remaining = compute_wait(clock.now().second_of_minute, target)
    assert remaining <= 5
    assert state.did25 and state.did20 and state.did15 and state.did10
    assert len(led.pulses(LEDChannel.GREEN_HOUR)) == 14


@pytest.mark.unit
def test_wait_loop_skipped_when_already_close(make_clock, timing):
    """Starting at :27 there is no time for warnings at all."""
    clock = make_clock(3, 14, 27)
    led = MockLED(clock=clock)

    target = _synchronizer(Blinker(led, clock, timing), clock, timing).wait_for_target(
        WaitState(),
    )

    assert target == 30
    assert led.history == []
    assert clock.sleep_history == []


@pytest.mark.unit
def test_wait_loop_survives_clock_failures(make_clock, timing):
    clock = make_clock(3, 14, 40)
    led = MockLED(clock=clock)
    clock.fail_next_reads(3)  # First read and two polls fail

    target = _synchronizer(Blinker(led, clock, timing), clock, timing).wait_for_target(
        WaitState(),
    )

    assert target == 0
    assert compute_wait(clock.now().second_of_minute, target) <= 5


@pytest.mark.unit
def test_wait_loop_honours_stop(make_clock, timing):
    clock = make_clock(3, 14, 0)
    stop_event = threading.Event()
    stop_event.set()

    target = _synchronizer(
        Blinker(MockLED(clock=clock), clock, timing),
        clock,
        timing,
        stop_event=stop_event,
    ).wait_for_target(WaitState())

    assert target is None


class _RewindingClock(MockClock):
    """MockClock that jumps back once when virtual time reaches `at`"""

    def __init__(self, start_epoch, at, to):
        super().__init__(start_epoch=start_epoch)
        self._at = at
        self._to = to
        self.rewound = False

    def sleep(self, seconds):
        super().sleep(seconds)
        if not self.rewound and self.time() >= self._at:
            self.set_time(self._to)
            self.rewound = True


@pytest.mark.unit
def test_wait_loop_clock_jumping_back_only_waits_longer(make_clock, timing):
    """03:14:40, set back to :20 at :45 -> longer wait, no repeated bursts."""
    minute_start = make_clock(3, 14, 0).time()
    clock = _RewindingClock(
        minute_start + 40,
        at=minute_start + 45,
        to=minute_start + 20,
    )
    led = MockLED(clock=clock)
    state = WaitState()

    target = _synchronizer(Blinker(led, clock, timing), clock, timing).wait_for_target(state)

    assert clock.rewound
    assert target == 0
    assert compute_wait(clock.now().second_of_minute, target) <= 5
    # 15s to go without the jump, at least 25s more after it
    assert clock.total_slept() > 35
    # Every threshold fired exactly once: 5 + 4 + 3 + 2
    assert state.did25 and state.did20 and state.did15 and state.did10
    assert len(led.pulses(LEDChannel.GREEN_HOUR)) == 14
