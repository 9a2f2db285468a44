from pathlib import Path

import pytest

from wish.builtin import Builtin, resolve_builtin, run_builtin
from wish.errors import CommandError
from wish.paths import SearchPath


def test_resolve_builtin_matches_exact_names() -> None:
    assert resolve_builtin("exit") is Builtin.EXIT
    assert resolve_builtin("cd") is Builtin.CD
    assert resolve_builtin("path") is Builtin.PATH
    assert resolve_builtin("EXIT") is None
    assert resolve_builtin("ls") is None


@pytest.mark.parametrize("argv", [["cd"], ["cd", "a", "b"]])
def test_cd_with_wrong_arity_fails_and_keeps_cwd(tmp_path: Path, argv: list[str]) -> None:
    (tmp_path / "a").mkdir()
    with pytest.raises(CommandError):
        run_builtin(Builtin.CD, argv, SearchPath())
    assert Path.cwd() == tmp_path.resolve()


def test_cd_to_missing_directory_fails(tmp_path: Path) -> None:
    with pytest.raises(CommandError):
        run_builtin(Builtin.CD, ["cd", "missing"], SearchPath())
    assert Path.cwd() == tmp_path.resolve()


def test_cd_changes_working_directory(tmp_path: Path) -> None:
    target = tmp_path / "sub"
    target.mkdir()
    run_builtin(Builtin.CD, ["cd", "sub"], SearchPath())
    assert Path.cwd() == target.resolve()


def test_exit_with_arguments_is_an_error() -> None:
    with pytest.raises(CommandError):
        run_builtin(Builtin.EXIT, ["exit", "now"], SearchPath())


def test_exit_alone_terminates_with_zero() -> None:
    with pytest.raises(SystemExit) as excinfo:
        run_builtin(Builtin.EXIT, ["exit"], SearchPath())
    assert excinfo.value.code == 0


def test_path_replaces_registry_in_order() -> None:
    search_path = SearchPath()
    run_builtin(Builtin.PATH, ["path", "/opt/b", "/opt/a"], search_path)
    assert search_path.directories == ["/opt/b", "/opt/a"]

    run_builtin(Builtin.PATH, ["path"], search_path)
    assert search_path.directories == []


def test_cd_to_name_with_nul_byte_fails(tmp_path: Path) -> None:
    with pytest.raises(CommandError):
        run_builtin(Builtin.CD, ["cd", "a\x00b"], SearchPath())
    assert Path.cwd() == tmp_path.resolve()
