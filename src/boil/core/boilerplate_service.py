"""Core boilerplate service — runs one action against the resolved root.

This service delegates all filesystem and process work to capabilities
injected at construction time.  It is responsible for:

* Resolving the boilerplates root once per action.
* Building source paths beneath that root.
* Ensuring only :class:`~boil.exceptions.BoilError` subclasses escape.

Guarantees
----------
* Pure orchestration — no direct filesystem access, no ``print()``.
* A missing root is reported as not-found; it never falls back to the
  current directory.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import BinaryIO, TypeVar

from boil.core.models import CopyReport, TreeEntry
from boil.core.protocols import (
    BoilerplatesLocator,
    ContentReader,
    DirectoryLister,
    EditorLauncher,
    FileCopier,
)
from boil.exceptions import (
    BoilError,
    BoilerplateNotFoundError,
    CopyFailedError,
    DelegatedCommandError,
    EditorLaunchError,
    ListingFailedError,
    OverwriteDeclinedError,
    PreviewFailedError,
    not_found_hint,
)

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


def _delegate(
    error_type: type[DelegatedCommandError],
    action: str,
    call: Callable[[], _T],
) -> _T:
    """Run *call*, mapping foreign exceptions to *error_type*."""
    try:
        return call()
    except BoilError:
        # Already one of ours — propagate unchanged.
        raise
    except Exception as exc:
        raise error_type(f"Unexpected {action} error: {exc}") from exc


class BoilerplateService:
    """Stateless service that executes list, generate, preview and edit.

    Parameters
    ----------
    locator:
        Callable returning the boilerplates root or ``None``.
    lister, copier, reader, editor:
        Capabilities satisfying the protocols in
        :mod:`boil.core.protocols`.
    """

    def __init__(
        self,
        locator: BoilerplatesLocator,
        *,
        lister: DirectoryLister,
        copier: FileCopier,
        reader: ContentReader,
        editor: EditorLauncher,
    ) -> None:
        self._locator: BoilerplatesLocator = locator
        self._lister: DirectoryLister = lister
        self._copier: FileCopier = copier
        self._reader: ContentReader = reader
        self._editor: EditorLauncher = editor

    # ------------------------------------------------------------------
    # Path construction
    # ------------------------------------------------------------------

    def root(self) -> Path:
        """Return the boilerplates root or raise if none was found."""
        root = self._locator()
        if root is None:
            raise BoilerplateNotFoundError(
                "No boilerplates directory found.",
                hint=not_found_hint(),
            )
        return root

    def source_path(self, name: str | None = None) -> Path:
        """Return ``root / name`` (or the root itself when *name* is empty)."""
        root = self.root()
        return root / name if name else root

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def list_boilerplates(
        self,
        subdirectory: str | None = None,
        *,
        max_depth: int | None = None,
    ) -> TreeEntry:
        """Return the listing tree under the root or *subdirectory*."""
        target = self.source_path(subdirectory)
        logger.debug("Listing %s (max depth %s)", target, max_depth)
        return _delegate(
            ListingFailedError,
            "listing",
            lambda: self._lister.list_tree(target, max_depth=max_depth),
        )

    def generate(
        self,
        source: str,
        destination: str | None = None,
        *,
        confirm_overwrite: Callable[[Path], bool],
    ) -> CopyReport:
        """Copy boilerplate *source* to *destination* (default ``.``).

        Raises
        ------
        OverwriteDeclinedError
            When at least one existing file was kept because the user
            declined to overwrite it.  Every other file is still copied.
        """
        source_path = self.source_path(source)
        destination_path = Path(destination) if destination else Path(".")
        logger.debug("Generating %s -> %s", source_path, destination_path)
        report = _delegate(
            CopyFailedError,
            "copy",
            lambda: self._copier.copy(
                source_path,
                destination_path,
                confirm_overwrite=confirm_overwrite,
            ),
        )
        if report.skipped:
            skipped = ", ".join(str(path) for path in report.skipped)
            raise OverwriteDeclinedError(
                f"Not overwritten: {skipped}",
                hint="Re-run and confirm the overwrite, or choose another destination.",
            )
        return report

    def preview(self, source: str, sink: BinaryIO) -> None:
        """Stream boilerplate *source* to *sink*."""
        source_path = self.source_path(source)
        logger.debug("Previewing %s", source_path)
        _delegate(
            PreviewFailedError,
            "preview",
            lambda: self._reader.stream(source_path, sink),
        )

    def edit(self, source: str) -> None:
        """Open boilerplate *source* in the configured editor."""
        source_path = self.source_path(source)
        logger.debug("Editing %s", source_path)
        _delegate(
            EditorLaunchError,
            "editor",
            lambda: self._editor.launch(source_path),
        )
