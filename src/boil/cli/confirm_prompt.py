"""Interactive overwrite confirmation for ``generate``.

Uses questionary's yes/no prompt, defaulting to *no* so that pressing
Enter never destroys an existing file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from boil.exceptions import CopyFailedError, MissingDependencyError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive confirmation."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def confirm_overwrite(path: Path) -> bool:
    """Ask whether *path* may be overwritten.

    Returns
    -------
    bool
        ``True`` to overwrite, ``False`` to keep the existing file.

    Raises
    ------
    CopyFailedError
        If the user cancels the prompt (Ctrl+C / Esc returns ``None``).
    """
    questionary = _import_questionary()

    answer: bool | None = questionary.confirm(
        f"overwrite '{path}'?",
        default=False,
    ).ask()  # Returns None on Ctrl+C / Esc

    if answer is None:
        raise CopyFailedError(
            f"Copy interrupted at '{path}'.",
            hint="Files copied before the interruption were left in place.",
        )
    return answer
