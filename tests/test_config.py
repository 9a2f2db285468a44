import json

import pytest

from wish.config import Settings


def test_defaults() -> None:
    settings = Settings()
    assert settings.prompt == "wish> "
    assert settings.search_path == ["/bin", "/usr/bin"]
    assert settings.wait_mode == "spawned"
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WISH_PROMPT", "$ ")
    monkeypatch.setenv("WISH_SEARCH_PATH", json.dumps(["/opt/bin"]))
    monkeypatch.setenv("WISH_WAIT_MODE", "per-command")
    monkeypatch.setenv("WISH_LOG_LEVEL", "debug")

    settings = Settings()
    assert settings.prompt == "$ "
    assert settings.search_path == ["/opt/bin"]
    assert settings.wait_mode == "per-command"
    assert settings.log_level == "DEBUG"


def test_unknown_wait_mode_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WISH_WAIT_MODE", "never")
    with pytest.raises(ValueError):
        Settings()
