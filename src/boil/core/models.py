"""Domain models for boil.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and small derived counts.  They carry zero
I/O and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


# ---------------------------------------------------------------------------
# Normalized token stream
# ---------------------------------------------------------------------------

class EndOfOptions(Enum):
    """Marker type emitted by the normalizer in place of a literal ``--``."""

    MARKER = "--"


END_OF_OPTIONS = EndOfOptions.MARKER
"""The single end-of-options marker instance."""

Token = str | EndOfOptions
"""One element of a normalized argument sequence."""


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ListCommand:
    """Render the boilerplates tree, optionally below *subdirectory*."""

    subdirectory: str | None = None


@dataclass(frozen=True, slots=True)
class GenerateCommand:
    """Copy boilerplate *source* to *destination* (``.`` when omitted)."""

    source: str
    destination: str | None = None


@dataclass(frozen=True, slots=True)
class PreviewCommand:
    """Stream the raw contents of boilerplate *source*."""

    source: str


@dataclass(frozen=True, slots=True)
class EditCommand:
    """Open boilerplate *source* in the user's editor."""

    source: str


@dataclass(frozen=True, slots=True)
class DoctorCommand:
    """Print environment diagnostics."""


Command = ListCommand | GenerateCommand | PreviewCommand | EditCommand | DoctorCommand
"""Tagged union of every command the dispatcher can select."""

COMMAND_PRECEDENCE: tuple[type, ...] = (
    ListCommand,
    GenerateCommand,
    EditCommand,
    PreviewCommand,
    DoctorCommand,
)
"""Winner order when several commands appear on one command line."""


# ---------------------------------------------------------------------------
# Parsed command line
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedOptions:
    """Result of a single dispatcher pass over the normalized tokens."""

    help: bool = False
    version: bool = False
    debug: bool = False

    max_depth: int | None = None
    """Maximum listing depth, or ``None`` for unbounded."""

    command: Command | None = None
    """Selected command, or ``None`` for the implicit default listing."""


# ---------------------------------------------------------------------------
# Listing tree
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TreeEntry:
    """One node of a rendered boilerplates listing."""

    name: str
    is_dir: bool
    children: tuple[TreeEntry, ...] = ()

    def count(self) -> tuple[int, int]:
        """Return ``(directories, files)`` below this node, excluding itself."""
        dirs = 0
        files = 0
        for child in self.children:
            if child.is_dir:
                dirs += 1
                sub_dirs, sub_files = child.count()
                dirs += sub_dirs
                files += sub_files
            else:
                files += 1
        return dirs, files


# ---------------------------------------------------------------------------
# Copy outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CopyReport:
    """Destination files written and skipped by a generate run."""

    copied: tuple[Path, ...]
    skipped: tuple[Path, ...]
