"""
Test Configuration and Fixtures

Shared pytest fixtures for the LED clock tests.

Every test runs on virtual time: MockClock only advances when the code
under test sleeps, so a full one-minute cycle finishes instantly and
deterministically.

To run:
    pip install -e .[test]
    pytest
"""

import calendar

import pytest

from core.blinker import Blinker
from core.timing import TimingConfig
from hardware.implementations.mock_clock import MockClock
from hardware.implementations.mock_led import MockLED


def epoch_at(hour: int, minute: int, second: float) -> float:
    """Epoch seconds for 2024-01-01 hour:minute:second UTC (24-hour hour)"""
    return calendar.timegm((2024, 1, 1, hour, minute, 0, 0, 0, 0)) + second


# =============================================================================
# TIMING FIXTURES
# =============================================================================


@pytest.fixture
def timing():
    """
    Timing with the documented default values.

    Spelled out so environment overrides can't change test expectations.
    """
    return TimingConfig(
        very_fast_pulse=0.1,
        fast_pulse=0.2,
        pulse_gap=0.3,
        pair_gap=0.2,
        long_pulse=1.2,
        pause_before_minutes=0.5,
        tens_ones_pause=0.8,
        bracket_hold=1.0,
        barrier_poll=0.05,
        wait_poll=0.2,
        barrier_timeout=10.0,
    )


# =============================================================================
# HARDWARE FIXTURES
# =============================================================================


@pytest.fixture
def make_clock():
    """
    Factory for MockClock instances at a given wall-clock time.

    Usage:
        def test_something(make_clock):
            clock = make_clock(3, 14, 35)  # 03:14:35 UTC
    """

    def _make(hour: int = 3, minute: int = 14, second: float = 0, frozen: bool = False):
        return MockClock(start_epoch=epoch_at(hour, minute, second), frozen=frozen)

    return _make


@pytest.fixture
def clock(make_clock):
    """MockClock at 03:14:00 UTC"""
    return make_clock(3, 14, 0)


@pytest.fixture
def mock_led(clock):
    """
    MockLED stamping writes with the mock clock's virtual time.

    Usage:
        def test_led(mock_led):
            mock_led.set_level(LEDChannel.GREEN_HOUR, LEDState.ON)
    """
    led = MockLED(clock=clock)
    yield led
    led.cleanup()


@pytest.fixture
def blinker(mock_led, clock, timing):
    """Blinker wired to the mock LED and mock clock"""
    return Blinker(mock_led, clock, timing)


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """
    Configure pytest with custom markers.

    Markers let you categorize and selectively run tests:
        pytest -m unit          # Only unit tests
        pytest -m integration   # Only integration tests
    """
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (full cycles)")
