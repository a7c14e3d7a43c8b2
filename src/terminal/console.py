"""
Acquiring (and always giving back) the terminal.

While the sandbox runs, stdin is in raw mode (no line buffering, no echo), the alternate screen buffer is in use
and the cursor is hidden. All of that is restored on the way out, also when the loop blows up.
"""

import logging
import sys
import termios
import tty
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

logger = logging.getLogger(__name__)

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
ALTERNATE_SCREEN = "\033[?1049h"
MAIN_SCREEN = "\033[?1049l"
CLEAR_SCREEN = "\033[2J\033[H"


@contextmanager
def raw_mode(stream: TextIO) -> Iterator[None]:
    """Switch the stream's terminal into raw mode. Does nothing if the stream is not a terminal (ex. piped input)."""
    if not stream.isatty():
        yield
        return

    fd = stream.fileno()
    saved_attributes = termios.tcgetattr(fd)
    tty.setraw(fd)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved_attributes)
        logger.debug("Terminal attributes restored")


@contextmanager
def terminal_session(
    stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
) -> Iterator[None]:
    """Raw input + alternate screen + hidden cursor, for the duration of the block."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    stdout.write(HIDE_CURSOR + ALTERNATE_SCREEN)
    stdout.flush()
    try:
        with raw_mode(stdin):
            yield
    finally:
        stdout.write(SHOW_CURSOR + MAIN_SCREEN)
        stdout.flush()


def read_char(stream: Optional[TextIO] = None) -> str:
    """Blocking read of a single character"""
    return (stream or sys.stdin).read(1)
