#!/usr/bin/env python3
"""
Entry point for the Calculator application.

    python main.py [--mode basic|scientific] [--log-level DEBUG]
"""
import argparse
import logging

from calccore.config import Mode, Settings


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Keypad calculator")
    parser.add_argument(
        "--mode",
        type=str,
        choices=[m.value for m in Mode],
        default=Mode.BASIC.value,
        help="Keypad shown at start-up (default: basic)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (default: INFO)"
    )
    return parser.parse_args(argv)


def main(argv=None):
    settings = Settings.from_args(parse_args(argv))
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Tk is only needed for the window itself
    from calcgui.gui import main as run_gui
    run_gui(settings)


if __name__ == "__main__":
    main()
