"""Error reporting for the game: fixed messages and exit codes."""

from __future__ import annotations

import os
import sys

from .printf import format_string

USAGE = "Usage: ./so_long <filename>.ber\n"
INVALID_MAP = "Map isn't valid.❌\nRTFM or call the dev/tech person!📑\n"
USAGE_CODES = frozenset({22, 53})
INVALID_MAP_CODE = 59


class GameError(SystemExit):
    """A fatal error; its ``code`` is the exit status of the program."""

    def __init__(self, message: str, code: int, location: str = "") -> None:
        super().__init__(code)
        self.message = message
        self.location = location

    def __str__(self) -> str:
        return self.message


def error_message(location: str, code: int, bonus: bool = False) -> str:
    """The text reported for error ``code`` raised at ``location``."""
    reason = os.strerror(code)
    if code in USAGE_CODES:
        return format_string("%s: %s\n", location, reason) + USAGE
    if code == INVALID_MAP_CODE:
        if bonus:
            return format_string("Error\n %s: %s\n", location, reason) + INVALID_MAP
        return "Error\n" + INVALID_MAP
    return format_string("%s: %s\n", location, reason)


def fail(location: str, code: int, bonus: bool = False) -> None:
    """Print the message for ``code`` to standard output and raise :class:`GameError`."""
    message = error_message(location, code, bonus)
    sys.stdout.write(message)
    sys.stdout.flush()
    raise GameError(message, code, location)