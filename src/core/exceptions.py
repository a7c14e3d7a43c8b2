"""
Custom exceptions.

Everything raised on purpose by the sandbox derives from GameError, so the entrypoint can tell
"our" errors apart from bugs in the standard library / terminal handling.
"""


class GameError(Exception):
    """Base class for all errors raised by the sandbox."""


class IllegalMoveError(GameError):
    """The target square is not one of the piece's candidate moves. The only expected (recoverable) error."""


class OffBoardError(GameError):
    """A position outside of the board was used to look up / place a piece. Programming error, should fail fast."""


class PieceNotOnBoardError(GameError):
    """A piece reference was used that does not live on the board (anymore)."""


class InvalidLayoutError(GameError):
    """The piece placement notation could not be parsed."""


class InvalidSettingsError(GameError):
    """Configuration did not pass validation."""
