"""Infrastructure: recursive boilerplate copy with overwrite confirmation.

Destination rules mirror an interactive recursive ``cp``:

* If *destination* is an existing directory, the source is copied to
  ``destination / source.name``.
* Otherwise the source is copied to *destination* itself.
* Every existing destination file is offered to ``confirm_overwrite``;
  declined files are left untouched and reported as skipped.

All ``OSError`` instances are re-raised as
:class:`~boil.exceptions.CopyFailedError`.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from pathlib import Path

from boil.core.models import CopyReport
from boil.exceptions import BoilerplateNotFoundError, CopyFailedError, not_found_hint

logger = logging.getLogger(__name__)


class ShutilFileCopier:
    """Concrete :class:`~boil.core.protocols.FileCopier` backed by :mod:`shutil`."""

    def copy(
        self,
        source: Path,
        destination: Path,
        *,
        confirm_overwrite: Callable[[Path], bool],
    ) -> CopyReport:
        """Copy *source* to *destination*, asking before each overwrite.

        Raises
        ------
        BoilerplateNotFoundError
            When *source* does not exist.
        CopyFailedError
            When a directory would replace a file or be copied into
            itself, or when any I/O fails.
        """
        if not source.exists():
            raise BoilerplateNotFoundError(
                f"{source}: No such file or directory",
                hint=not_found_hint(),
            )

        target = destination / source.name if destination.is_dir() else destination
        self._check_not_into_itself(source, target)
        copied: list[Path] = []
        skipped: list[Path] = []

        try:
            if source.is_dir():
                self._copy_tree(source, target, confirm_overwrite, copied, skipped)
            else:
                self._copy_file(source, target, confirm_overwrite, copied, skipped)
        except OSError as exc:
            raise CopyFailedError(
                f"cannot copy '{source}' to '{target}': {exc.strerror or exc}",
            ) from exc

        return CopyReport(copied=tuple(copied), skipped=tuple(skipped))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _check_not_into_itself(source: Path, target: Path) -> None:
        """Refuse copies whose target is the source or lies inside it."""
        resolved_source = source.resolve()
        resolved_target = target.resolve()
        if resolved_target == resolved_source:
            raise CopyFailedError(f"'{source}' and '{target}' are the same file")
        if source.is_dir() and resolved_target.is_relative_to(resolved_source):
            raise CopyFailedError(
                f"cannot copy a directory, '{source}', into itself, '{target}'",
            )

    def _copy_tree(
        self,
        source: Path,
        target: Path,
        confirm_overwrite: Callable[[Path], bool],
        copied: list[Path],
        skipped: list[Path],
    ) -> None:
        if target.exists() and not target.is_dir():
            raise CopyFailedError(
                f"cannot overwrite non-directory '{target}' with directory '{source}'",
            )
        children = sorted(source.iterdir())
        target.mkdir(exist_ok=True)
        for child in children:
            child_target = target / child.name
            if child.is_dir() and not child.is_symlink():
                self._copy_tree(child, child_target, confirm_overwrite, copied, skipped)
            else:
                self._copy_file(child, child_target, confirm_overwrite, copied, skipped)

    def _copy_file(
        self,
        source: Path,
        target: Path,
        confirm_overwrite: Callable[[Path], bool],
        copied: list[Path],
        skipped: list[Path],
    ) -> None:
        if target.is_dir():
            raise CopyFailedError(
                f"cannot overwrite directory '{target}' with non-directory '{source}'",
            )
        if target.exists() and not confirm_overwrite(target):
            logger.debug("Skipped %s", target)
            skipped.append(target)
            return
        shutil.copy2(source, target, follow_symlinks=False)
        logger.debug("Copied %s -> %s", source, target)
        copied.append(target)
