"""Static usage and version text.

Plain strings only, so ``--help`` and ``--version`` work without any
optional UI dependency.
"""

from __future__ import annotations

import sys
from pathlib import Path

from boil.version import __version__


def program_name(argv0: str | None = None) -> str:
    """Return the base name of the invoking executable."""
    raw = sys.argv[0] if argv0 is None else argv0
    name = Path(raw).name
    if not name or name == "__main__.py":
        return "boil"
    return name


def usage(prog: str) -> str:
    """Return the full help text for *prog*."""
    return f"""\
Usage: {prog} [OPTIONS] [COMMAND] [ARGS]

Manage a directory of reusable file and directory boilerplates.

Options:
  -h, --help          Show this help and exit
  -v, --version       Show the version and exit
  -L, --level N       Descend at most N levels when listing
      --debug         Print debug tracing to stderr

Commands:
  l, ls, list [DIR]          List boilerplates (the default command)
  g, generate SRC [DEST]     Copy boilerplate SRC to DEST (default: .)
  p, preview SRC             Print the contents of boilerplate SRC
  e, edit SRC                Open boilerplate SRC in $EDITOR
  doctor                     Show environment diagnostics

Examples:
  {prog}
  {prog} -L 2 ls
  {prog} ls python
  {prog} generate python/setup.cfg
  {prog} g docker/Dockerfile app/Dockerfile
  {prog} preview files/file.txt

Boilerplates path (first match wins):
  1. $BOILERPLATES_PATH
  2. ./.boilerplates/
  3. ./boilerplates/
  4. ~/.boilerplates/
  5. ~/boilerplates/

When several commands are given, the first of help, version, list,
generate, edit, preview, doctor is run.
"""


def version_line(prog: str) -> str:
    """Return ``"<prog> <version>"``."""
    return f"{prog} {__version__}"
