"""``boil doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising where
boilerplates will be read from and whether editing can work.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.  No business logic resides
here; it purely collects and displays diagnostic data.
"""

from __future__ import annotations

import os
import platform
import sys

from boil.cli import exit_codes
from boil.cli.console import console
from boil.infra.editor_launcher import EDITOR_ENV_VAR
from boil.infra.path_resolver import locate_boilerplates
from boil.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    major, minor = sys.version_info[:2]
    ok = (major, minor) >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _boilerplates_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the resolved boilerplates row."""
    location = locate_boilerplates()
    if location is None:
        return "Boilerplates", "not found", "[yellow]WARN[/yellow]"
    value = f"{location.path} ({location.tier.value})"
    if not location.path.is_dir():
        return "Boilerplates", value, "[yellow]WARN (missing)[/yellow]"
    return "Boilerplates", value, "[green]OK[/green]"


def _editor_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the ``$EDITOR`` row."""
    editor = os.environ.get(EDITOR_ENV_VAR, "").strip()
    if not editor:
        return "EDITOR", "not set", "[yellow]WARN[/yellow]"
    return "EDITOR", editor, "[green]OK[/green]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _boil_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the boil version row."""
    return "boil", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nboil doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<14} {'Value':<40} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<14} {value:<40} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.  WARN rows do not
        fail the command.
    """
    checks = [
        _boil_version_check(),
        _python_version_check(),
        _boilerplates_check(),
        _editor_check(),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.markup import escape
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
        print(
            "Some checks failed." if has_failure else "All checks passed.",
            file=sys.stderr,
        )
    else:
        table = Table(
            title="boil doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, escape(value), status)

        console.print()
        console.print(table)
        console.print()
        if has_failure:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            console.print("[bold green]All checks passed.[/bold green]")

    return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS
