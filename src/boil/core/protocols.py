"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so tests can substitute fakes for the filesystem,
the overwrite prompt and the editor.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import BinaryIO, Protocol

from boil.core.models import CopyReport, TreeEntry


class BoilerplatesLocator(Protocol):
    """Contract for finding the boilerplates root directory."""

    def __call__(self) -> Path | None:
        """Return the boilerplates directory, or ``None`` when none exists.

        Implementations never raise.
        """
        ...  # pragma: no cover


class DirectoryLister(Protocol):
    """Contract for reading a directory tree for display."""

    def list_tree(self, root: Path, *, max_depth: int | None = None) -> TreeEntry:
        """Return the tree rooted at *root*, at most *max_depth* levels deep.

        Raises
        ------
        BoilerplateNotFoundError
            When *root* does not exist.
        ListingFailedError
            When *root* cannot be read.
        """
        ...  # pragma: no cover


class FileCopier(Protocol):
    """Contract for recursive, overwrite-confirming copies."""

    def copy(
        self,
        source: Path,
        destination: Path,
        *,
        confirm_overwrite: Callable[[Path], bool],
    ) -> CopyReport:
        """Copy *source* (file or directory) to *destination*.

        *confirm_overwrite* is called with each destination file that
        already exists; a ``False`` answer leaves that file untouched.

        Raises
        ------
        BoilerplateNotFoundError
            When *source* does not exist.
        CopyFailedError
            When the copy cannot be performed.
        """
        ...  # pragma: no cover


class ContentReader(Protocol):
    """Contract for streaming a boilerplate's raw bytes."""

    def stream(self, source: Path, sink: BinaryIO) -> None:
        """Write the bytes of *source* to *sink*.

        Raises
        ------
        BoilerplateNotFoundError
            When *source* does not exist.
        PreviewFailedError
            When *source* is a directory or cannot be read.
        """
        ...  # pragma: no cover


class EditorLauncher(Protocol):
    """Contract for handing a path to the user's editor."""

    def launch(self, path: Path) -> None:
        """Open *path* in the editor and block until it exits.

        Raises
        ------
        EditorLaunchError
            When no editor is configured, it cannot start, or it fails.
        """
        ...  # pragma: no cover
