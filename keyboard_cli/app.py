"""Application entry point and setup for the keyboard visualiser."""

from __future__ import annotations

import argparse
import curses
import logging
import sys
from pathlib import Path
from typing import List, Optional

from keyboard_cli.core.controller import InteractionController, Mode
from keyboard_cli.core.texts import ChallengeSelector, Difficulty, TextCorpus
from keyboard_cli.ui.screen import run_screen

logger = logging.getLogger(__name__)

BANNER = """\
Starting Keyboard CLI...
Features:
- F1: Switch to Visual Mode (keyboard visualization only)
- F2: Switch to Practice Mode (typing challenge)
- F3: Get a new typing challenge text
- ESC/Ctrl+C: Exit
"""


def configure_logging(log_file: Optional[Path] = None) -> None:
    """Configure application-wide logging with a standard format.

    curses owns the terminal while the app runs, so detailed records only go
    to ``log_file``; without one, warnings and errors go to stderr.
    """
    fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    if log_file is not None:
        logging.basicConfig(level=logging.DEBUG, format=fmt, filename=str(log_file), encoding="utf-8")
    else:
        logging.basicConfig(level=logging.WARNING, format=fmt)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keyboard-cli",
        description="Show a QWERTY keyboard that lights up as you type, with a typing practice mode.",
    )
    parser.add_argument(
        "--visual",
        action="store_true",
        help="keyboard visualization only, without practice mode",
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=Difficulty.MEDIUM.value,
        help="difficulty of practice texts (default: %(default)s)",
    )
    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="start the full-screen view immediately",
    )
    parser.add_argument("--log-file", type=Path, help="write a debug log to this file")
    return parser


def show_banner() -> None:
    print(BANNER)
    print("Press Enter to continue...")
    try:
        input()
    except EOFError:
        pass


def build_controller(args: argparse.Namespace) -> InteractionController:
    if args.visual:
        return InteractionController(mode=Mode.VISUAL)
    selector = ChallengeSelector(TextCorpus.load())
    return InteractionController(selector, difficulty=Difficulty.parse(args.difficulty))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file)

    try:
        controller = build_controller(args)
    except (OSError, ValueError) as e:
        logger.error("Could not load practice texts: %s", e)
        print(f"Error: {e}")
        return 1

    try:
        if not args.no_banner:
            show_banner()
        curses.wrapper(run_screen, controller)
    except KeyboardInterrupt:
        logger.debug("Interrupted")
        return 0
    except curses.error as e:
        logger.error("Terminal session failed: %s", e)
        print(f"Error: {e}")
        return 1
    return 0


def run() -> None:
    """Parse arguments, run the full-screen loop and exit with its status."""
    sys.exit(main())
