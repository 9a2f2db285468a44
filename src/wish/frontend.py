"""Line sources: terminal prompt, piped stdin and batch files."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import IO, Protocol

from loguru import logger
from prompt_toolkit import PromptSession

from .errors import StartupError


class LineSource(Protocol):
    """Supplies raw lines; ``None`` signals end of input."""

    def read_line(self) -> str | None: ...

    def close(self) -> None: ...


class PromptSource:
    """Interactive terminal input with a prompt."""

    def __init__(self, prompt: str) -> None:
        self._prompt = prompt
        self._session: PromptSession[str] = PromptSession()

    def read_line(self) -> str | None:
        try:
            return self._session.prompt(self._prompt)
        except EOFError:
            return None
        except KeyboardInterrupt:
            return ""

    def close(self) -> None:
        return None


class StreamSource:
    """Lines from a text stream, without a prompt."""

    def __init__(self, stream: IO[str], *, owned: bool = False) -> None:
        self._stream = stream
        self._owned = owned

    def read_line(self) -> str | None:
        line = self._stream.readline()
        if not line:
            return None
        return line

    def close(self) -> None:
        if self._owned:
            self._stream.close()


def open_source(args: list[str], prompt: str) -> LineSource:
    """Pick the line source for the given command-line arguments.

    Raises:
        StartupError: more than one argument, or the batch file cannot be read.
    """
    if len(args) > 1:
        raise StartupError(f"expected at most one batch file, got {len(args)} arguments")

    if args:
        path = Path(args[0])
        try:
            stream = path.open(encoding="utf-8", errors="surrogateescape")
        except OSError as exc:
            raise StartupError(f"cannot open batch file {path}: {exc.strerror}") from exc
        logger.debug("wish.batch file={}", path)
        return StreamSource(stream, owned=True)

    if sys.stdin.isatty():
        return PromptSource(prompt)
    return StreamSource(sys.stdin)
