"""Command dispatcher — turns normalized tokens into :class:`ParsedOptions`.

The scan is a single left-to-right pass.  Commands and value-taking
options peek at the following token(s) and consume them only when they
look like arguments (non-empty, not starting with ``-``).  The first
problem raises a :class:`~boil.exceptions.UsageError` subclass; nothing
after it is examined.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from boil.core.models import (
    COMMAND_PRECEDENCE,
    Command,
    DoctorCommand,
    EditCommand,
    EndOfOptions,
    GenerateCommand,
    ListCommand,
    ParsedOptions,
    PreviewCommand,
    Token,
)
from boil.exceptions import MissingArgumentError, UnrecognizedOptionError, UsageError

logger = logging.getLogger(__name__)

LIST_WORDS: frozenset[str] = frozenset({"l", "ls", "list"})
GENERATE_WORDS: frozenset[str] = frozenset({"g", "generate"})
PREVIEW_WORDS: frozenset[str] = frozenset({"p", "preview"})
EDIT_WORDS: frozenset[str] = frozenset({"e", "edit"})
DOCTOR_WORDS: frozenset[str] = frozenset({"doctor"})


def _is_argument(token: Token | None) -> bool:
    """Return True when *token* can serve as an option argument."""
    return isinstance(token, str) and token != "" and not token.startswith("-")


def _peek(tokens: Sequence[Token], index: int) -> Token | None:
    return tokens[index] if index < len(tokens) else None


def _require(tokens: Sequence[Token], index: int, option: str) -> str:
    """Return the argument at *index* or raise :class:`MissingArgumentError`."""
    candidate = _peek(tokens, index)
    if not _is_argument(candidate):
        raise MissingArgumentError(option)
    return str(candidate)


def _parse_level(value: str) -> int:
    try:
        level = int(value)
    except ValueError:
        level = 0
    if level < 1:
        raise UsageError(
            f"invalid level '{value}', must be a positive integer",
            hint="Example: -L 2",
        )
    return level


def select_command(commands: Sequence[Command]) -> Command | None:
    """Pick the winning command by fixed precedence, not by token order."""
    for kind in COMMAND_PRECEDENCE:
        for command in commands:
            if isinstance(command, kind):
                return command
    return None


def parse_options(tokens: Sequence[Token]) -> ParsedOptions:
    """Scan *tokens* once and return the resulting :class:`ParsedOptions`.

    Raises
    ------
    UnrecognizedOptionError
        For any unknown token starting with ``-``.
    MissingArgumentError
        When a command or option lacks its required argument.
    UsageError
        When ``-L`` is given a value that is not a positive integer.
    """
    show_help = False
    show_version = False
    debug = False
    max_depth: int | None = None
    commands: list[Command] = []

    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1

        if isinstance(token, EndOfOptions):
            break

        if token in ("-h", "--help"):
            show_help = True
        elif token in ("-v", "--version"):
            show_version = True
        elif token == "--debug":
            debug = True
        elif token in ("-L", "--level"):
            max_depth = _parse_level(_require(tokens, index, "L|level"))
            index += 1
        elif token in LIST_WORDS:
            subdirectory: str | None = None
            if _is_argument(_peek(tokens, index)):
                subdirectory = str(tokens[index])
                index += 1
            commands.append(ListCommand(subdirectory=subdirectory))
        elif token in GENERATE_WORDS:
            source = _require(tokens, index, "g|generate")
            index += 1
            destination: str | None = None
            if _is_argument(_peek(tokens, index)):
                destination = str(tokens[index])
                index += 1
            commands.append(GenerateCommand(source=source, destination=destination))
        elif token in PREVIEW_WORDS:
            commands.append(PreviewCommand(source=_require(tokens, index, "p|preview")))
            index += 1
        elif token in EDIT_WORDS:
            commands.append(EditCommand(source=_require(tokens, index, "e|edit")))
            index += 1
        elif token in DOCTOR_WORDS:
            commands.append(DoctorCommand())
        elif token.startswith("-"):
            raise UnrecognizedOptionError(token)
        else:
            logger.debug("Ignoring stray argument %r", token)

    return ParsedOptions(
        help=show_help,
        version=show_version,
        debug=debug,
        max_depth=max_depth,
        command=select_command(commands),
    )
