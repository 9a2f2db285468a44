"""Runtime logging helpers."""

from __future__ import annotations

import os
from logging import Handler
from typing import IO, Literal

from loguru import logger
from rich.console import Console
from rich.logging import RichHandler

LogProfile = Literal["default", "interactive"]

_DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED_PROFILE: LogProfile | None = None
_SINK_STREAM: IO[str] | None = None


def _original_stderr() -> IO[str]:
    # Commands redirect descriptor 2, so logs go to a private copy of it.
    global _SINK_STREAM
    if _SINK_STREAM is None:
        _SINK_STREAM = os.fdopen(os.dup(2), "w", buffering=1)
    return _SINK_STREAM


def _build_interactive_handler(stream: IO[str]) -> Handler:
    return RichHandler(
        console=Console(file=stream),
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )


def configure_logging(*, level: str = "WARNING", profile: LogProfile = "default") -> None:
    """Configure process-level logging once."""
    global _CONFIGURED_PROFILE
    if profile == _CONFIGURED_PROFILE:
        return

    stream = _original_stderr()
    logger.remove()
    if profile == "interactive":
        logger.add(
            _build_interactive_handler(stream),
            level=level,
            format="{message}",
            backtrace=False,
            diagnose=False,
        )
    else:
        logger.add(
            stream,
            level=level,
            format=_DEFAULT_FORMAT,
            backtrace=False,
            diagnose=False,
        )
    _CONFIGURED_PROFILE = profile
