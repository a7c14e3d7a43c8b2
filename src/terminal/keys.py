"""
Decoding raw keystrokes into actions.

Arrow keys arrive as the escape sequence ESC '[' {A|B|C|D}, everything else is a single character.
"""

from typing import Callable

from src.core.shared_types import Action

ESCAPE = "\x1b"
CTRL_C = "\x03"  # ETX

ARROW_KEYS: dict[str, Action] = {
    "A": Action.UP,
    "B": Action.DOWN,
    "C": Action.RIGHT,
    "D": Action.LEFT,
}

SINGLE_KEYS: dict[str, Action] = {
    " ": Action.SELECT,
    "\r": Action.SELECT,
    "\n": Action.SELECT,
    "q": Action.QUIT,
    CTRL_C: Action.QUIT,
}

ReadChar = Callable[[], str]


def read_action(read_char: ReadChar) -> Action:
    """Read one key (one or three characters) and translate it. An empty read means the input was closed."""
    char = read_char()
    if char == "":
        return Action.QUIT

    if char != ESCAPE:
        return SINGLE_KEYS.get(char, Action.NONE)

    # control character: capture the two that follow it
    first = read_char()
    second = read_char()
    if first != "[":
        return Action.NONE
    return ARROW_KEYS.get(second, Action.NONE)
