"""
LED Clock Service

Main entry point: shows the current time on LEDs twice a minute.

Every :00 and :30 the service
- Pair-blinks the green LEDs at T-25s, T-20s, T-15s, T-10s (5, 4, 3, 2 pulses)
- Flashes orange twice to announce the reading window
- Blinks the hour (1..12) on the hour LED
- Blinks the minute as tens, pause, ones on the minute LED
  (a zero digit is one long blink; minute 00 is a single long blink)
- Flashes orange once more to close the window

Architecture:
- Single thread, everything blocking
- Hardware chosen by HardwareFactory (sysfs, GPIO or mock)
- SIGTERM / SIGINT request a cooperative stop; LEDs are turned off on exit

Usage:
    python ledclock_service.py              # Run forever
    python ledclock_service.py --debug      # Trace every phase
    python ledclock_service.py --self-test  # Blink each LED once and exit
"""

import argparse
import logging
import logging.handlers
import signal
import sys
import threading
from pathlib import Path
from typing import Optional

from config.settings import (
    LED_HARDWARE_MODE,
    LEDCLOCK_DEBUG,
    LOG_DIR,
    LOG_SERVICE_FILE,
)
from core import CycleController, TimingConfig
from core.self_test import run_self_test
from hardware.factory import HardwareFactory, HardwareMode
from hardware.interfaces.clock_interface import ClockInterface
from hardware.interfaces.led_interface import LEDInterface
from hardware.utils import check_led_available, safe_led_cleanup


class LEDClockService:
    """
    Wires hardware and the cycle controller together.

    Usage:
        service = LEDClockService()
        service.run()  # Blocks until shutdown
    """

    def __init__(
        self,
        hardware_mode: HardwareMode = "auto",
        led: Optional[LEDInterface] = None,
        clock: Optional[ClockInterface] = None,
        timing: Optional[TimingConfig] = None,
    ):
        """
        Initialize hardware and controller.

        Args:
            hardware_mode: LED backend when `led` is not given
            led: LED sink to use (tests pass a MockLED)
            clock: Clock to use (tests pass a MockClock)
            timing: Timing overrides (default from settings)
        """
        self.logger = logging.getLogger(__name__)
        self.logger.info("Initializing LED Clock Service...")

        self.stop_event = threading.Event()

        self.led = led or HardwareFactory.create_led_sink(mode=hardware_mode)
        self.clock = clock or HardwareFactory.create_clock(stop_event=self.stop_event)
        check_led_available(self.led, self.logger)

        for channel in self.led.channels():
            self.logger.info(f"  {channel.value}: {self.led.describe(channel)}")

        self.controller = CycleController(
            self.led,
            self.clock,
            timing=timing,
            stop_event=self.stop_event,
        )

        self.logger.info("LED Clock Service initialized successfully")

    def install_signal_handlers(self) -> None:
        """Register signal handlers for graceful shutdown"""
        signal.signal(signal.SIGTERM, self._signal_handler)
        signal.signal(signal.SIGINT, self._signal_handler)

    def run(self, max_cycles: Optional[int] = None) -> None:
        """
        Main service loop.

        Runs until shutdown signal received (or max_cycles reached).
        """
        try:
            self.controller.run(max_cycles=max_cycles)
        except KeyboardInterrupt:
            self.logger.info("Keyboard interrupt received")
        finally:
            self.shutdown()

    def self_test(self) -> dict[str, str]:
        """Blink each channel once, then turn everything off"""
        try:
            return run_self_test(self.controller.blinker)
        finally:
            self.shutdown()

    def stop(self) -> None:
        self.controller.stop()

    def shutdown(self) -> None:
        """Leave every LED off"""
        self.logger.info("Shutting down LED Clock Service...")
        safe_led_cleanup(self.led, self.logger)
        self.logger.info("LED Clock Service shutdown complete")

    def _signal_handler(self, signum, _frame):
        """
        Handle shutdown signals.

        Args:
            signum: Signal number
            _frame: Current stack frame (unused, required by signal API)
        """
        signal_name = signal.Signals(signum).name
        self.logger.info(f"Received signal {signal_name}, shutting down...")
        self.stop()


def setup_logging(debug: bool = False) -> None:
    """
    Setup logging with rotation.

    Logs to both console and file with rotation:
    - Daily rotation
    - Keep 7 days of logs

    Args:
        debug: Trace every phase transition and computed value
    """
    level = logging.DEBUG if debug else logging.INFO

    logger = logging.getLogger()
    logger.setLevel(level)

    # Console handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s | %(name)s"))
    logger.addHandler(console_handler)

    file_format = logging.Formatter(
        "%(asctime)s %(levelname)s %(message)s | %(name)s",
    )

    log_file = Path(LOG_DIR) / LOG_SERVICE_FILE
    try:
        file_handler = logging.handlers.TimedRotatingFileHandler(
            str(log_file),
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8",
        )
    except (PermissionError, FileNotFoundError):
        # Fallback to local logs directory if LOG_DIR not writable
        logs_dir = Path("logs")
        logs_dir.mkdir(exist_ok=True)

        fallback_log = logs_dir / "ledclock-service.log"
        logger.warning(
            f"Cannot write to {log_file}, using fallback: {fallback_log}",
        )
        file_handler = logging.handlers.TimedRotatingFileHandler(
            str(fallback_log),
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8",
        )

    file_handler.setLevel(level)
    file_handler.setFormatter(file_format)
    logger.addHandler(file_handler)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Show the time on LEDs twice a minute",
        epilog="""
Examples:
  %(prog)s                     # Run forever with auto-detected LEDs
  %(prog)s --debug             # Trace every phase and computed value
  %(prog)s --hardware mock     # Simulate LEDs (no hardware needed)
  %(prog)s --self-test         # Blink each LED once and exit
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--debug",
        action=argparse.BooleanOptionalAction,
        default=LEDCLOCK_DEBUG,
        help="Enable debug trace output (default from LEDCLOCK_DEBUG)",
    )
    parser.add_argument(
        "--hardware",
        choices=["auto", "sysfs", "gpio", "mock"],
        default=LED_HARDWARE_MODE,
        help="LED backend (default: %(default)s)",
    )
    parser.add_argument(
        "--cycles",
        type=int,
        default=None,
        help="Stop after this many cycles (default: run forever)",
    )
    parser.add_argument(
        "--self-test",
        action="store_true",
        help="Blink each configured LED once and exit",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the service.

    Sets up logging and runs the service.
    """
    args = parse_args(argv)
    setup_logging(debug=args.debug)

    logger = logging.getLogger(__name__)
    logger.info("=" * 60)
    logger.info("LED Clock Service Starting")
    logger.info("=" * 60)

    try:
        service = LEDClockService(hardware_mode=args.hardware)
        if args.self_test:
            service.self_test()
            return 0
        service.install_signal_handlers()
        service.run(max_cycles=args.cycles)
    except Exception as e:
        logger.critical(f"Fatal error in main: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
