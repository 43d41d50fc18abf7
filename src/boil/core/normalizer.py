"""Argument normalizer — one flag per token.

Rewrites the raw argument vector before the dispatcher sees it:

* ``-Lv``         → ``-L``, ``v``   (``-L`` takes a value)
* ``-hv``         → ``-h``, ``-v``
* ``--level=2``   → ``--level``, ``2``
* ``--``          → :data:`~boil.core.models.END_OF_OPTIONS`, rest verbatim

Pure transformation — no I/O.
"""

from __future__ import annotations

from collections.abc import Iterable

from boil.core.models import END_OF_OPTIONS, Token

VALUE_SHORT_FLAGS: frozenset[str] = frozenset({"L"})
"""Short flags whose value may be glued to them inside a cluster."""


def _expand_cluster(token: str) -> list[str]:
    """Split ``-abc`` into ``-a``, ``-b``, ``-c``.

    When a value-taking flag appears with characters after it, those
    characters become its value and splitting stops.
    """
    expanded: list[str] = []
    body = token[1:]
    for index, char in enumerate(body):
        expanded.append(f"-{char}")
        rest = body[index + 1:]
        if char in VALUE_SHORT_FLAGS and rest:
            expanded.append(rest)
            break
    return expanded


def normalize(argv: Iterable[str]) -> list[Token]:
    """Return the normalized token sequence for *argv*.

    Parameters
    ----------
    argv:
        Raw command-line arguments, without the program name.

    Returns
    -------
    list[Token]
        Flat sequence of strings, possibly containing one
        :data:`~boil.core.models.END_OF_OPTIONS` marker.
    """
    tokens: list[Token] = []
    remaining = iter(argv)
    for arg in remaining:
        if arg == "--":
            tokens.append(END_OF_OPTIONS)
            tokens.extend(remaining)
            break
        if arg.startswith("--") and "=" in arg:
            name, value = arg.split("=", 1)
            tokens.extend((name, value))
        elif len(arg) > 2 and arg.startswith("-") and not arg.startswith("--"):
            tokens.extend(_expand_cluster(arg))
        else:
            tokens.append(arg)
    return tokens
