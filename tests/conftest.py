from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _isolate_shell_state(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    for name in ("WISH_PROMPT", "WISH_SEARCH_PATH", "WISH_WAIT_MODE", "WISH_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    logger.disable("wish")
    yield
    logger.enable("wish")


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def make_program(bin_dir: Path) -> Callable[..., Path]:
    """Write an executable /bin/sh script into ``bin_dir``."""

    def _make(name: str, body: str, *, directory: Path | None = None, executable: bool = True) -> Path:
        target = (directory or bin_dir) / name
        target.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
        os.chmod(target, 0o755 if executable else 0o644)
        return target

    return _make
