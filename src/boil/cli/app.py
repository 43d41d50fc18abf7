"""CLI application entry point and command routing for boil.

This module is the **sole error boundary** for the entire application.
It catches :class:`~boil.exceptions.BoilError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages on
stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — parsing is done by
  :mod:`boil.core.normalizer` and :mod:`boil.core.dispatcher`, and all
  filesystem work by the service and infrastructure layers.
* Exactly one action runs per invocation: help, then version, then the
  selected command, then the default listing.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import logging
import sys

from boil.cli import confirm_prompt, exit_codes
from boil.cli.console import configure_logging, console
from boil.cli.help_text import program_name, usage, version_line
from boil.cli.tree_view import render_tree
from boil.core.boilerplate_service import BoilerplateService
from boil.core.dispatcher import parse_options
from boil.core.models import (
    Command,
    DoctorCommand,
    EditCommand,
    GenerateCommand,
    ListCommand,
    ParsedOptions,
    PreviewCommand,
)
from boil.core.normalizer import normalize
from boil.exceptions import BoilError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

def build_service() -> BoilerplateService:
    """Instantiate the service with the real infrastructure adapters."""
    from boil.infra.content_reader import FileContentReader
    from boil.infra.editor_launcher import SubprocessEditorLauncher
    from boil.infra.file_copier import ShutilFileCopier
    from boil.infra.path_resolver import resolve_boilerplates_path
    from boil.infra.tree_lister import FilesystemTreeLister

    return BoilerplateService(
        resolve_boilerplates_path,
        lister=FilesystemTreeLister(),
        copier=ShutilFileCopier(),
        reader=FileContentReader(),
        editor=SubprocessEditorLauncher(),
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _run_command(
    command: Command,
    options: ParsedOptions,
    service: BoilerplateService,
) -> int:
    """Run the single selected *command*."""
    match command:
        case ListCommand(subdirectory=subdirectory):
            tree = service.list_boilerplates(subdirectory, max_depth=options.max_depth)
            render_tree(tree)
        case GenerateCommand(source=source, destination=destination):
            report = service.generate(
                source,
                destination,
                confirm_overwrite=confirm_prompt.confirm_overwrite,
            )
            logger.debug("Generated %d file(s)", len(report.copied))
        case PreviewCommand(source=source):
            sys.stdout.flush()
            service.preview(source, sys.stdout.buffer)
        case EditCommand(source=source):
            service.edit(source)
        case DoctorCommand():
            from boil.cli.doctor import run_doctor

            return run_doctor()
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    service: BoilerplateService | None = None,
) -> int:
    """Run the boil CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    service:
        Pre-built service, for tests that inject fake capabilities.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    BoilError
        Any usage, lookup or delegated failure; :func:`cli` renders it.
    """
    tokens = normalize(sys.argv[1:] if argv is None else argv)
    options = parse_options(tokens)

    configure_logging(options.debug)
    logger.debug("Normalized tokens: %s", tokens)
    logger.debug("Parsed options: %s", options)

    prog = program_name()
    if options.help:
        print(usage(prog))
        return exit_codes.SUCCESS
    if options.version:
        print(version_line(prog))
        return exit_codes.SUCCESS

    command = options.command if options.command is not None else ListCommand()
    return _run_command(command, options, service or build_service())


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except BoilError as exc:
        console.error(str(exc), exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.error("Aborted by user.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.error(
            f"Unexpected error. Please report this issue.\n  {type(exc).__name__}: {exc}",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
