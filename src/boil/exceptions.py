"""Custom exception hierarchy for boil.

All exceptions that cross layer boundaries must inherit from
:class:`BoilError`.  Raw ``OSError`` and ``subprocess`` failures must
NEVER propagate beyond the infrastructure layer — they are caught there
and re-raised as a typed subclass defined here.

Hierarchy
---------
BoilError
├── UsageError
│   ├── UnrecognizedOptionError
│   └── MissingArgumentError
├── BoilerplateNotFoundError
├── DelegatedCommandError
│   ├── ListingFailedError
│   ├── CopyFailedError
│   │   └── OverwriteDeclinedError
│   ├── PreviewFailedError
│   └── EditorLaunchError
└── MissingDependencyError
"""

from __future__ import annotations


class BoilError(Exception):
    """Base exception for all boil errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class UsageError(BoilError):
    """Raised when the command line cannot be interpreted."""


class UnrecognizedOptionError(UsageError):
    """Raised for a dash-prefixed token that is not a known option."""

    def __init__(self, option: str) -> None:
        super().__init__(
            f"unrecognized option '{option}'",
            hint="Run with --help to see the available options.",
        )
        self.option: str = option


class MissingArgumentError(UsageError):
    """Raised when an option or command is missing its required argument."""

    def __init__(self, option: str) -> None:
        super().__init__(
            f"option '{option}' requires an argument",
            hint="Run with --help to see the expected usage.",
        )
        self.option: str = option


# --- Lookup ----------------------------------------------------------------

class BoilerplateNotFoundError(BoilError):
    """Raised when the boilerplates directory or a boilerplate is missing."""


# --- Delegated operations --------------------------------------------------

class DelegatedCommandError(BoilError):
    """Raised when listing, copying, previewing or editing fails."""


class ListingFailedError(DelegatedCommandError):
    """Raised when a directory tree cannot be read."""


class CopyFailedError(DelegatedCommandError):
    """Raised when copying a boilerplate to its destination fails."""


class OverwriteDeclinedError(CopyFailedError):
    """Raised after a copy in which one or more overwrites were declined."""


class PreviewFailedError(DelegatedCommandError):
    """Raised when a boilerplate cannot be streamed to standard output."""


class EditorLaunchError(DelegatedCommandError):
    """Raised when the external editor cannot be started or exits non-zero."""


# --- Environment / tooling -------------------------------------------------

class MissingDependencyError(BoilError):
    """Raised when an optional runtime dependency is not available."""


def not_found_hint() -> str:
    """Return the standard guidance listing the boilerplates search order."""
    return "\n".join(
        (
            "boil looks for boilerplates in, in order:",
            "    $BOILERPLATES_PATH",
            "    ./.boilerplates/",
            "    ./boilerplates/",
            "    ~/.boilerplates/",
            "    ~/boilerplates/",
        )
    )
