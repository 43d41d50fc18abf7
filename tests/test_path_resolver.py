"""Tests for boilerplates path resolution (infra/path_resolver.py).

Every test passes ``environ``, ``cwd`` and ``home`` explicitly — no
dependency on the real process environment.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from boil.infra.path_resolver import (
    LocationTier,
    locate_boilerplates,
    resolve_boilerplates_path,
)


@pytest.fixture()
def dirs(tmp_path: Path) -> tuple[Path, Path]:
    cwd = tmp_path / "project"
    home = tmp_path / "user"
    cwd.mkdir()
    home.mkdir()
    return cwd, home


class TestPrecedence:
    def test_override_wins_over_project_hidden(self, dirs: tuple[Path, Path]) -> None:
        cwd, home = dirs
        (cwd / ".boilerplates").mkdir()
        path = resolve_boilerplates_path(
            environ={"BOILERPLATES_PATH": "/tmp/A"}, cwd=cwd, home=home,
        )
        assert path == Path("/tmp/A")

    def test_override_not_checked_for_existence(self, dirs: tuple[Path, Path]) -> None:
        cwd, home = dirs
        location = locate_boilerplates(
            environ={"BOILERPLATES_PATH": "/does/not/exist"}, cwd=cwd, home=home,
        )
        assert location is not None
        assert location.tier is LocationTier.ENV_OVERRIDE

    def test_empty_override_ignored(self, dirs: tuple[Path, Path]) -> None:
        cwd, home = dirs
        (cwd / "boilerplates").mkdir()
        path = resolve_boilerplates_path(
            environ={"BOILERPLATES_PATH": ""}, cwd=cwd, home=home,
        )
        assert path == cwd / "boilerplates"

    def test_project_plain_when_hidden_missing(self, dirs: tuple[Path, Path]) -> None:
        cwd, home = dirs
        (cwd / "boilerplates").mkdir()
        (home / ".boilerplates").mkdir()
        path = resolve_boilerplates_path(environ={}, cwd=cwd, home=home)
        assert path == cwd / "boilerplates"

    def test_project_hidden_beats_project_plain(self, dirs: tuple[Path, Path]) -> None:
        cwd, home = dirs
        (cwd / ".boilerplates").mkdir()
        (cwd / "boilerplates").mkdir()
        location = locate_boilerplates(environ={}, cwd=cwd, home=home)
        assert location is not None
        assert location.tier is LocationTier.PROJECT_HIDDEN

    def test_home_hidden_beats_home_plain(self, dirs: tuple[Path, Path]) -> None:
        cwd, home = dirs
        (home / ".boilerplates").mkdir()
        (home / "boilerplates").mkdir()
        path = resolve_boilerplates_path(environ={}, cwd=cwd, home=home)
        assert path == home / ".boilerplates"

    def test_home_plain_last(self, dirs: tuple[Path, Path]) -> None:
        cwd, home = dirs
        (home / "boilerplates").mkdir()
        location = locate_boilerplates(environ={}, cwd=cwd, home=home)
        assert location is not None
        assert location.path == home / "boilerplates"
        assert location.tier is LocationTier.HOME

    def test_file_is_not_a_candidate(self, dirs: tuple[Path, Path]) -> None:
        cwd, home = dirs
        (cwd / ".boilerplates").write_text("not a directory")
        (home / "boilerplates").mkdir()
        path = resolve_boilerplates_path(environ={}, cwd=cwd, home=home)
        assert path == home / "boilerplates"


class TestNoMatch:
    def test_returns_none(self, dirs: tuple[Path, Path]) -> None:
        cwd, home = dirs
        assert resolve_boilerplates_path(environ={}, cwd=cwd, home=home) is None
        assert locate_boilerplates(environ={}, cwd=cwd, home=home) is None


class TestDefaults:
    def test_reads_process_state(
        self,
        monkeypatch: pytest.MonkeyPatch,
        tmp_path: Path,
    ) -> None:
        (tmp_path / ".boilerplates").mkdir()
        monkeypatch.chdir(tmp_path)
        assert resolve_boilerplates_path() == tmp_path / ".boilerplates"

    def test_reads_environment_variable(
        self,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("BOILERPLATES_PATH", "/srv/templates")
        assert resolve_boilerplates_path() == Path("/srv/templates")
