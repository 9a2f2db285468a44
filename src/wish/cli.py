"""wish command-line entry point."""

from __future__ import annotations

import sys
from contextlib import closing

import typer
from loguru import logger

from .config import get_settings
from .errors import SpawnError, StartupError, report_error
from .executor import Executor
from .frontend import LineSource, open_source
from .paths import SearchPath

app = typer.Typer(
    name="wish",
    help="A small shell that runs '&'-separated commands in parallel.",
    add_completion=False,
)


def run_lines(source: LineSource, executor: Executor) -> None:
    """Feed every line of ``source`` through ``executor`` until end of input."""
    while (line := source.read_line()) is not None:
        executor.run_line(line)


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    batch: list[str] | None = typer.Argument(None, help="Batch file to read commands from", show_default=False),
) -> None:
    """Read commands from a batch file, or from standard input."""
    args = list(batch or [])
    interactive = not args and sys.stdin.isatty()
    settings = get_settings(profile="interactive" if interactive else "default")

    try:
        source = open_source(args, settings.prompt)
    except StartupError as exc:
        logger.debug("wish.startup.error reason={}", exc)
        report_error()
        raise typer.Exit(1) from exc

    executor = Executor(SearchPath(settings.search_path), wait_mode=settings.wait_mode)
    with closing(source):
        try:
            run_lines(source, executor)
        except SpawnError as exc:
            logger.error("wish.spawn.error reason={}", exc)
            report_error()
            raise typer.Exit(1) from exc


if __name__ == "__main__":
    app()
