"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.

Two proxies are exported: :data:`console` writes diagnostics and errors
to stderr, :data:`stdout_console` writes command output to stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from boil.exceptions import MissingDependencyError

ERROR_GLYPH: str = "✖"
"""Prefix of every failure message written to stderr."""


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console instance targeting stderr (or stdout)."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool = True) -> None:
        self._stderr: bool = stderr

    def _stream(self) -> Any:
        return sys.stderr if self._stderr else sys.stdout

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain print."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except MissingDependencyError:
            print(*objects, file=self._stream())
            return
        rich_console.print(*objects)

    def error(self, message: str, hint: str | None = None) -> None:
        """Render a failure message and optional hint.

        *message* and *hint* are printed literally; they are never
        interpreted as Rich markup.
        """
        try:
            rich_console = get_rich_console(stderr=self._stderr)
            from rich.text import Text
        except (MissingDependencyError, ModuleNotFoundError):
            print(f"{ERROR_GLYPH} {message}", file=self._stream())
            if hint:
                print(f"Hint: {hint}", file=self._stream())
            return
        rich_console.print(Text.assemble((f"{ERROR_GLYPH} ", "bold red"), message))
        if hint:
            rich_console.print(Text.assemble(("Hint: ", "yellow"), hint))


console = _ConsoleProxy()
stdout_console = _ConsoleProxy(stderr=False)


def configure_logging(debug: bool) -> None:
    """Route ``boil`` log records to stderr.

    ``--debug`` lowers the level to DEBUG; otherwise only warnings and
    above are shown.  Rich's handler is used when it is importable.
    """
    handler: logging.Handler
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    else:
        handler = RichHandler(console=get_rich_console(), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger("boil")
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if debug else logging.WARNING)
