"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from boil import __version__
from boil.cli import exit_codes
from boil.cli.app import main
from boil.exceptions import (
    BoilError,
    BoilerplateNotFoundError,
    CopyFailedError,
    DelegatedCommandError,
    EditorLaunchError,
    ListingFailedError,
    MissingArgumentError,
    MissingDependencyError,
    OverwriteDeclinedError,
    PreviewFailedError,
    UnrecognizedOptionError,
    UsageError,
    not_found_hint,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            UsageError,
            BoilerplateNotFoundError,
            DelegatedCommandError,
            MissingDependencyError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[BoilError]
    ) -> None:
        assert issubclass(exc_class, BoilError)

    @pytest.mark.parametrize(
        "exc_class",
        [ListingFailedError, CopyFailedError, PreviewFailedError, EditorLaunchError],
    )
    def test_delegated_failures(self, exc_class: type[BoilError]) -> None:
        assert issubclass(exc_class, DelegatedCommandError)

    def test_declined_overwrite_is_copy_failure(self) -> None:
        assert issubclass(OverwriteDeclinedError, CopyFailedError)

    def test_usage_errors(self) -> None:
        assert issubclass(UnrecognizedOptionError, UsageError)
        assert issubclass(MissingArgumentError, UsageError)

    def test_hint_is_stored(self) -> None:
        err = BoilError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = BoilError("boom")
        assert err.hint is None

    def test_missing_argument_names_option(self) -> None:
        err = MissingArgumentError("g|generate")
        assert "g|generate" in str(err)
        assert err.option == "g|generate"

    def test_unrecognized_option_names_token(self) -> None:
        err = UnrecognizedOptionError("--bogus")
        assert "'--bogus'" in str(err)

    def test_not_found_hint_lists_every_tier(self) -> None:
        hint = not_found_hint()
        for fragment in (
            "$BOILERPLATES_PATH",
            "./.boilerplates/",
            "./boilerplates/",
            "~/.boilerplates/",
            "~/boilerplates/",
        ):
            assert fragment in hint


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_help_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["--help"])
        assert code == exit_codes.SUCCESS
        assert "Usage:" in capsys.readouterr().out

    def test_version_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["--version"])
        assert code == exit_codes.SUCCESS
        assert __version__ in capsys.readouterr().out

    def test_doctor_routes(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            "boil.cli.doctor.run_doctor", lambda: exit_codes.SUCCESS,
        )
        assert main(["doctor"]) == exit_codes.SUCCESS
