"""Exception types and the shell's error channel."""

from __future__ import annotations

import os

ERROR_MESSAGE = "An error has occurred\n"
STDERR_FILENO = 2


class WishError(Exception):
    """Base exception for wish."""


class RedirectionError(WishError):
    """Raised when a command carries a malformed ``>`` redirection.

    Aborts the whole input line.
    """


class CommandError(WishError):
    """Raised for unknown commands and misused built-ins.

    Only the offending command is affected.
    """


class SpawnError(WishError):
    """Raised when a child process cannot be created."""


class StartupError(WishError):
    """Raised for bad invocation arguments or an unreadable batch file."""


def report_error() -> None:
    """Write the generic error message to whatever descriptor 2 currently is."""
    os.write(STDERR_FILENO, ERROR_MESSAGE.encode())
