"""
Entrypoint: the interactive loop.

One key is read, fully processed and the board redrawn before the next key is read.
"""

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence

from src.core.config import load_settings
from src.core.exceptions import GameError
from src.core.log_setup import setup_logger
from src.core.shared_types import GlyphStyle
from src.services.sandbox_service import SandboxSession
from src.terminal.console import CLEAR_SCREEN, read_char, terminal_session
from src.terminal.keys import ReadChar, read_action
from src.terminal.rendering import BG_BLACK

logger = logging.getLogger(__name__)

Write = Callable[[str], None]


def draw(session: SandboxSession, write: Write) -> None:
    """Clear the screen (dark background) and print the full frame"""
    write(BG_BLACK + CLEAR_SCREEN + session.render())


def run(session: SandboxSession, read: ReadChar, write: Write) -> None:
    """User interaction loop. Returns when the user quits."""
    draw(session, write)
    while True:
        action = read_action(read)
        if not session.handle(action):
            logger.info("Quit requested")
            return
        draw(session, write)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chess-sandbox",
        description="Move chess pieces around a board in your terminal. No turns, no check: just the moves.",
    )
    parser.add_argument(
        "--glyphs",
        dest="glyph_style",
        choices=[style.value for style in GlyphStyle],
        default=None,
        help="draw pieces as unicode chess symbols or ascii letters (default: unicode)",
    )
    parser.add_argument(
        "--layout",
        dest="starting_layout",
        default=None,
        help="start from this piece placement instead of the standard setup, ex. '4k3/8/8/8/8/8/8/R3K2R'",
    )
    parser.add_argument(
        "--log-file", default=None, help="write log records to this file"
    )
    parser.add_argument("--log-level", default=None, help="ex. DEBUG, INFO")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(vars(args))
        session = SandboxSession.from_settings(settings)
    except GameError as e:
        parser.error(str(e))

    setup_logger(settings)
    logger.info("Starting sandbox with %s", settings)

    def write(text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    with terminal_session():
        run(session, read_char, write)

    print("Exiting...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
