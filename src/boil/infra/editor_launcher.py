"""Infrastructure: open a boilerplate in the user's ``$EDITOR``.

This module is the **only** place in the codebase that starts a
subprocess.  Every failure is re-raised as
:class:`~boil.exceptions.EditorLaunchError`.
"""

from __future__ import annotations

import os
import shlex
import subprocess
from collections.abc import Mapping
from pathlib import Path

from boil.exceptions import EditorLaunchError

EDITOR_ENV_VAR: str = "EDITOR"


class SubprocessEditorLauncher:
    """Concrete :class:`~boil.core.protocols.EditorLauncher`.

    ``$EDITOR`` may carry arguments (``"code --wait"``); it is split with
    :func:`shlex.split` and the path is appended.

    Parameters
    ----------
    environ:
        Environment mapping; defaults to ``os.environ`` at launch time.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ: Mapping[str, str] | None = environ

    def editor_command(self) -> list[str]:
        """Return the configured editor command, split into arguments."""
        env = os.environ if self._environ is None else self._environ
        editor = env.get(EDITOR_ENV_VAR, "").strip()
        if not editor:
            raise EditorLaunchError(
                "EDITOR is not set.",
                hint="Export an editor first, e.g. export EDITOR=vim",
            )
        return shlex.split(editor)

    def launch(self, path: Path) -> None:
        """Run the editor on *path* and wait for it to exit."""
        command = [*self.editor_command(), str(path)]
        try:
            result = subprocess.run(command, check=False)
        except OSError as exc:
            raise EditorLaunchError(
                f"cannot start editor '{command[0]}': {exc.strerror or exc}",
                hint="Check that $EDITOR names an installed program.",
            ) from exc
        if result.returncode != 0:
            raise EditorLaunchError(
                f"editor '{command[0]}' exited with status {result.returncode}",
            )
