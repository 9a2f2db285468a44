"""Execution engine: dispatch parallel commands and wait for them."""

from __future__ import annotations

import os
import sys
from contextlib import suppress
from dataclasses import dataclass, field
from types import TracebackType

from loguru import logger

from .builtin import resolve_builtin, run_builtin
from .config import WaitMode
from .errors import CommandError, RedirectionError, SpawnError, report_error
from .parser import ParsedCommand, parse_line
from .paths import SearchPath

STDOUT_FILENO = 1
STDERR_FILENO = 2
REDIRECT_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
REDIRECT_MODE = 0o644


@dataclass
class LineReport:
    """What happened to one input line."""

    commands: list[ParsedCommand] = field(default_factory=list)
    pids: list[int] = field(default_factory=list)
    exit_codes: dict[int, int] = field(default_factory=dict)
    aborted: bool = False


def _flush_std_streams() -> None:
    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            stream.flush()


class StandardStreams:
    """Snapshot of descriptors 1 and 2, restorable around each command."""

    def __init__(self) -> None:
        self._saved_out: int | None = None
        self._saved_err: int | None = None

    def __enter__(self) -> StandardStreams:
        _flush_std_streams()
        self._saved_out = os.dup(STDOUT_FILENO)
        self._saved_err = os.dup(STDERR_FILENO)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.restore()
        for fd in (self._saved_out, self._saved_err):
            if fd is not None:
                os.close(fd)
        self._saved_out = self._saved_err = None

    def restore(self) -> None:
        """Point descriptors 1 and 2 back at the snapshot."""
        if self._saved_out is None or self._saved_err is None:
            raise RuntimeError("StandardStreams used outside its context")
        _flush_std_streams()
        os.dup2(self._saved_out, STDOUT_FILENO)
        os.dup2(self._saved_err, STDERR_FILENO)

    def redirect(self, filename: str) -> None:
        """Send descriptors 1 and 2 to ``filename``, created or truncated.

        Raises:
            CommandError: the file cannot be opened for writing.
        """
        _flush_std_streams()
        try:
            fd = os.open(filename, REDIRECT_FLAGS, REDIRECT_MODE)
        except (OSError, ValueError) as exc:
            raise CommandError(f"cannot open {filename!r}: {exc}") from exc
        try:
            os.dup2(fd, STDOUT_FILENO)
            os.dup2(fd, STDERR_FILENO)
        finally:
            os.close(fd)


class Executor:
    """Runs input lines against a search path.

    Commands on a line are dispatched in order: external programs are forked
    without waiting, built-ins run in place, then the shell waits for the line
    to finish before returning.
    """

    def __init__(self, search_path: SearchPath | None = None, *, wait_mode: WaitMode = "spawned") -> None:
        self.search_path = search_path if search_path is not None else SearchPath()
        self.wait_mode = wait_mode

    def run_line(self, line: str) -> LineReport:
        """Parse and execute one line.

        Raises:
            SpawnError: a child process could not be created.
            SystemExit: the ``exit`` built-in ran.
        """
        try:
            commands = parse_line(line)
        except RedirectionError as exc:
            logger.debug("wish.line.aborted reason={}", exc)
            report_error()
            return LineReport(aborted=True)

        report = LineReport(commands=commands)
        if not commands:
            return report

        with StandardStreams() as streams:
            for command in commands:
                streams.restore()
                try:
                    pid = self._dispatch(command, streams)
                except CommandError as exc:
                    logger.debug("wish.command.error argv={} reason={}", command.argv, exc)
                    report_error()
                    continue
                if pid is not None:
                    report.pids.append(pid)
            self._wait(report, streams)
        return report

    def _dispatch(self, command: ParsedCommand, streams: StandardStreams) -> int | None:
        if command.redirect_to is not None:
            streams.redirect(command.redirect_to)

        executable = self.search_path.resolve(command.name)
        if executable is not None:
            return self._spawn(executable, command.argv)

        builtin = resolve_builtin(command.name)
        if builtin is None:
            raise CommandError(f"{command.name}: command not found")
        logger.debug("wish.builtin name={} argv={}", builtin.value, command.argv)
        run_builtin(builtin, command.argv, self.search_path)
        return None

    def _spawn(self, executable: str, argv: list[str]) -> int:
        _flush_std_streams()
        try:
            pid = os.fork()
        except OSError as exc:
            raise SpawnError(f"fork failed: {exc.strerror}") from exc

        if pid == 0:
            try:
                os.execv(executable, argv)
            except (OSError, ValueError):
                report_error()
            finally:
                os._exit(1)

        logger.debug("wish.spawn pid={} executable={} argv={}", pid, executable, argv)
        return pid

    def _wait(self, report: LineReport, streams: StandardStreams) -> None:
        if self.wait_mode == "per-command":
            for _ in report.commands:
                # No child left to reap: return at once like a bare wait(2).
                with suppress(ChildProcessError):
                    pid, status = os.wait()
                    report.exit_codes[pid] = os.waitstatus_to_exitcode(status)
                streams.restore()
            return

        for pid in report.pids:
            _, status = os.waitpid(pid, 0)
            report.exit_codes[pid] = os.waitstatus_to_exitcode(status)
            logger.debug("wish.wait pid={} exit_code={}", pid, report.exit_codes[pid])
            streams.restore()
