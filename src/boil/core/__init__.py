"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or process I/O; that is delegated through protocols.
* No imports from ``cli`` or ``infra``.
"""

from boil.core.boilerplate_service import BoilerplateService
from boil.core.dispatcher import parse_options
from boil.core.models import (
    END_OF_OPTIONS,
    Command,
    CopyReport,
    DoctorCommand,
    EditCommand,
    GenerateCommand,
    ListCommand,
    ParsedOptions,
    PreviewCommand,
    TreeEntry,
)
from boil.core.normalizer import normalize
from boil.core.protocols import (
    BoilerplatesLocator,
    ContentReader,
    DirectoryLister,
    EditorLauncher,
    FileCopier,
)

__all__: list[str] = [
    "END_OF_OPTIONS",
    "BoilerplateService",
    "BoilerplatesLocator",
    "Command",
    "ContentReader",
    "CopyReport",
    "DirectoryLister",
    "DoctorCommand",
    "EditCommand",
    "EditorLauncher",
    "FileCopier",
    "GenerateCommand",
    "ListCommand",
    "ParsedOptions",
    "PreviewCommand",
    "TreeEntry",
    "normalize",
    "parse_options",
]
