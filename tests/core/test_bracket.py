"""
Bracket Signaler Tests

Tests showing:
- Pre-signal orange double pulse
- Barrier releases exactly on the target second
- Barrier timeout on a broken clock instead of hanging
- Barrier gives up at once when a stop is requested

To run:
    pytest tests/core/test_bracket.py -v
"""

import threading

import pytest

from core.blinker import Blinker
from core.bracket import BarrierTimeoutError, BracketSignaler
from hardware.implementations.mock_led import MockLED
from hardware.interfaces.led_interface import LEDChannel, LEDState

ORANGE_A = LEDChannel.ORANGE_A
ORANGE_B = LEDChannel.ORANGE_B


@pytest.mark.unit
def test_pre_signal_pattern(blinker, mock_led):
    mock_led.set_level(LEDChannel.GREEN_HOUR, LEDState.ON)
    mock_led.clear_history()

    BracketSignaler(blinker).pre_signal()

    # Green off first, then orange on-off-on
    assert mock_led.get_state(LEDChannel.GREEN_HOUR) == LEDState.OFF
    assert [write.state for write in mock_led.writes_for(ORANGE_A)] == [
        LEDState.ON,
        LEDState.OFF,
        LEDState.ON,
    ]
    assert mock_led.get_state(ORANGE_B) == LEDState.ON
    assert mock_led.pulses(ORANGE_A)[0][1] == pytest.approx(1.0)


@pytest.mark.unit
def test_barrier_releases_on_target_second(make_clock, timing):
    clock = make_clock(3, 14, 58.5)
    led = MockLED(clock=clock)
    bracket = BracketSignaler(Blinker(led, clock, timing))
    led.set_level(ORANGE_A, LEDState.ON)

    bracket.wait_for_second(0)

    assert clock.now().second_of_minute == 0
    # Caught within one poll of the boundary
    assert clock.time() % 60 < timing.barrier_poll + 1e-6
    assert led.get_state(ORANGE_A) == LEDState.OFF
    assert led.get_state(ORANGE_B) == LEDState.OFF


@pytest.mark.unit
def test_barrier_already_on_target(make_clock, timing):
    clock = make_clock(3, 14, 30.2)
    bracket = BracketSignaler(Blinker(MockLED(clock=clock), clock, timing))

    assert bracket.wait_for_second(30) == 0
    assert clock.sleep_history == []


@pytest.mark.unit
def test_barrier_times_out_on_frozen_clock(make_clock, timing):
    """A clock that never moves must not hang the service."""
    clock = make_clock(3, 14, 57, frozen=True)
    led = MockLED(clock=clock)
    bracket = BracketSignaler(Blinker(led, clock, timing))
    led.set_level(ORANGE_A, LEDState.ON)

    with pytest.raises(BarrierTimeoutError):
        bracket.wait_for_second(0)

    assert clock.read_count == timing.barrier_max_polls
    assert led.get_state(ORANGE_A) == LEDState.OFF


@pytest.mark.unit
def test_barrier_times_out_on_dead_clock(make_clock, timing):
    clock = make_clock(3, 14, 57)
    clock.fail_forever = True
    bracket = BracketSignaler(Blinker(MockLED(clock=clock), clock, timing))

    with pytest.raises(BarrierTimeoutError):
        bracket.wait_for_second(0)


@pytest.mark.unit
def test_barrier_tolerates_some_failed_reads(make_clock, timing):
    clock = make_clock(3, 14, 59.5)
    clock.fail_next_reads(4)
    bracket = BracketSignaler(Blinker(MockLED(clock=clock), clock, timing))

    bracket.wait_for_second(0)

    assert clock.now().second_of_minute == 0


@pytest.mark.unit
def test_post_signal(blinker, mock_led):
    BracketSignaler(blinker).post_signal()

    assert mock_led.pulses(ORANGE_A) == [pytest.approx((blinker.clock.time() - 1.0, 1.0))]
    assert mock_led.get_state(ORANGE_B) == LEDState.OFF


@pytest.mark.unit
def test_barrier_returns_on_stop_request(make_clock, timing):
    clock = make_clock(3, 14, 58)
    led = MockLED(clock=clock)
    stop_event = threading.Event()
    stop_event.set()
    bracket = BracketSignaler(Blinker(led, clock, timing), stop_event=stop_event)
    led.set_level(ORANGE_A, LEDState.ON)

    assert bracket.wait_for_second(0) is None

    assert clock.read_count == 0
    assert clock.sleep_history == []
    assert led.get_state(ORANGE_A) == LEDState.OFF
