"""Built-in commands run inside the shell process."""

from __future__ import annotations

import os
from enum import Enum

from loguru import logger

from .errors import CommandError
from .paths import SearchPath


class Builtin(str, Enum):
    """Closed set of built-in commands."""

    EXIT = "exit"
    CD = "cd"
    PATH = "path"


def resolve_builtin(name: str) -> Builtin | None:
    """Return the built-in called exactly ``name``, if any."""
    for builtin in Builtin:
        if builtin.value == name:
            return builtin
    return None


def run_builtin(builtin: Builtin, argv: list[str], search_path: SearchPath) -> None:
    """Run a built-in synchronously.

    Raises:
        CommandError: wrong arity or a failed directory change.
        SystemExit: ``exit`` without arguments.
    """
    args = argv[1:]
    if builtin is Builtin.EXIT:
        _exit(args)
    elif builtin is Builtin.CD:
        _change_directory(args)
    elif builtin is Builtin.PATH:
        search_path.replace(args)


def _exit(args: list[str]) -> None:
    if args:
        raise CommandError(f"exit takes no arguments, got {len(args)}")
    logger.debug("wish.exit")
    raise SystemExit(0)


def _change_directory(args: list[str]) -> None:
    if len(args) != 1:
        raise CommandError(f"cd takes exactly one argument, got {len(args)}")
    try:
        os.chdir(args[0])
    except (OSError, ValueError) as exc:
        raise CommandError(f"cd {args[0]!r}: {exc}") from exc
    logger.debug("wish.cd cwd={}", args[0])
