"""Command line parsing: operator padding, parallel splitting, redirection."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .errors import RedirectionError

REDIRECT_OPERATOR = ">"
PARALLEL_SEPARATOR = "&"
_WHITESPACE_RE = re.compile(r"[ \t\r\n\v\f]+")


@dataclass(frozen=True)
class ParsedCommand:
    """One parallel command ready for dispatch."""

    argv: list[str] = field(default_factory=list)
    redirect_to: str | None = None

    @property
    def name(self) -> str:
        return self.argv[0]

    @property
    def redirected(self) -> bool:
        return self.redirect_to is not None


def pad_operator(line: str) -> str:
    """Surround every redirection operator with single spaces."""
    return line.replace(REDIRECT_OPERATOR, f" {REDIRECT_OPERATOR} ")


def split_parallel(line: str) -> list[str]:
    """Split a line into parallel segments, keeping empty ones."""
    return line.split(PARALLEL_SEPARATOR)


def tokenize(segment: str) -> list[str]:
    """Split a segment on runs of whitespace."""
    return [token for token in _WHITESPACE_RE.split(segment) if token]


def parse_redirection(tokens: list[str]) -> ParsedCommand:
    """Build a command from tokens, extracting a trailing ``> file``.

    Raises:
        RedirectionError: the operator is not followed by exactly one filename,
            or there is no command before it.
    """
    if REDIRECT_OPERATOR not in tokens:
        return ParsedCommand(argv=list(tokens))

    index = tokens.index(REDIRECT_OPERATOR)
    trailing = len(tokens) - index - 1
    if index < 1 or trailing != 1 or len(tokens) < 3:
        raise RedirectionError(f"malformed redirection: {' '.join(tokens)}")
    return ParsedCommand(argv=tokens[:index], redirect_to=tokens[index + 1])


def parse_line(line: str) -> list[ParsedCommand]:
    """Turn one raw line into its valid parallel commands, in order.

    Whitespace-only segments are dropped. A malformed redirection in any
    segment raises and invalidates the whole line.
    """
    commands: list[ParsedCommand] = []
    for segment in split_parallel(pad_operator(line)):
        tokens = tokenize(segment)
        if not tokens:
            continue
        commands.append(parse_redirection(tokens))
    return commands
