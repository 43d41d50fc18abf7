"""Infrastructure: stream a boilerplate's raw bytes for preview."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import BinaryIO

from boil.exceptions import BoilerplateNotFoundError, PreviewFailedError, not_found_hint


class FileContentReader:
    """Concrete :class:`~boil.core.protocols.ContentReader`.

    Bytes are copied unchanged, so binary boilerplates and files with any
    encoding preview exactly as stored.
    """

    def stream(self, source: Path, sink: BinaryIO) -> None:
        if not source.exists():
            raise BoilerplateNotFoundError(
                f"{source}: No such file or directory",
                hint=not_found_hint(),
            )
        if source.is_dir():
            raise PreviewFailedError(
                f"{source}: Is a directory",
                hint="Use the list command to see a directory's contents.",
            )
        try:
            with source.open("rb") as handle:
                shutil.copyfileobj(handle, sink)
        except OSError as exc:
            raise PreviewFailedError(f"{source}: {exc.strerror or exc}") from exc
        sink.flush()
