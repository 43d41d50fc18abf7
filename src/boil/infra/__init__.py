"""Infrastructure layer — filesystem and process integration.

This layer wraps all interaction with the filesystem, the environment
and the external editor.  Every raw ``OSError`` must be caught here and
re-raised as a :class:`~boil.exceptions.BoilError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from boil.infra.content_reader import FileContentReader
from boil.infra.editor_launcher import SubprocessEditorLauncher
from boil.infra.file_copier import ShutilFileCopier
from boil.infra.path_resolver import (
    LocationTier,
    ResolvedLocation,
    locate_boilerplates,
    resolve_boilerplates_path,
)
from boil.infra.tree_lister import FilesystemTreeLister

__all__: list[str] = [
    "FileContentReader",
    "FilesystemTreeLister",
    "LocationTier",
    "ResolvedLocation",
    "ShutilFileCopier",
    "SubprocessEditorLauncher",
    "locate_boilerplates",
    "resolve_boilerplates_path",
]
