"""Infrastructure: read a boilerplates directory into a :class:`TreeEntry`.

Rules
-----
* Hidden entries are included.
* Names matching ``*.git*`` are excluded from listings (only).
* Entries are sorted by name, directories and files interleaved.
* Symlinked directories are shown but not descended into.
"""

from __future__ import annotations

import fnmatch
import os
from pathlib import Path

from boil.core.models import TreeEntry
from boil.exceptions import BoilerplateNotFoundError, ListingFailedError, not_found_hint

EXCLUDE_PATTERN: str = "*.git*"


def is_excluded(name: str) -> bool:
    """Return True for version-control metadata names."""
    return fnmatch.fnmatchcase(name, EXCLUDE_PATTERN)


class FilesystemTreeLister:
    """Concrete :class:`~boil.core.protocols.DirectoryLister` using ``os.scandir``."""

    def list_tree(self, root: Path, *, max_depth: int | None = None) -> TreeEntry:
        """Return the tree rooted at *root* limited to *max_depth* levels.

        Raises
        ------
        BoilerplateNotFoundError
            When *root* does not exist.
        ListingFailedError
            When *root* is not a directory or cannot be read.
        """
        if not root.exists():
            raise BoilerplateNotFoundError(
                f"{root}: No such file or directory",
                hint=not_found_hint(),
            )
        if not root.is_dir():
            raise ListingFailedError(f"{root}: Not a directory")
        try:
            children = self._read(root, depth=1, max_depth=max_depth)
        except OSError as exc:
            raise ListingFailedError(f"{root}: {exc.strerror or exc}") from exc
        return TreeEntry(name=str(root), is_dir=True, children=children)

    def _read(
        self,
        directory: Path,
        *,
        depth: int,
        max_depth: int | None,
    ) -> tuple[TreeEntry, ...]:
        with os.scandir(directory) as it:
            entries = sorted(
                (entry for entry in it if not is_excluded(entry.name)),
                key=lambda entry: entry.name,
            )

        nodes: list[TreeEntry] = []
        for entry in entries:
            is_dir = entry.is_dir()
            children: tuple[TreeEntry, ...] = ()
            descend = max_depth is None or depth < max_depth
            if is_dir and descend and not entry.is_symlink():
                children = self._read(Path(entry.path), depth=depth + 1, max_depth=max_depth)
            nodes.append(TreeEntry(name=entry.name, is_dir=is_dir, children=children))
        return tuple(nodes)
