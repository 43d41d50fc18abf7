"""Directory listing renderer for the CLI layer.

Draws a :class:`~boil.core.models.TreeEntry` as a Rich
:class:`~rich.tree.Tree` on stdout, followed by a ``tree``-style
summary line.  When stdout is not a terminal, or Rich is missing, the
plain box-drawing rendering is printed instead.
"""

from __future__ import annotations

import sys
from typing import Any

from boil.cli.console import stdout_console
from boil.core.models import TreeEntry


def summary_line(root: TreeEntry) -> str:
    """Return ``"N directories, M files"`` for *root*."""
    dirs, files = root.count()
    dir_word = "directory" if dirs == 1 else "directories"
    file_word = "file" if files == 1 else "files"
    return f"{dirs} {dir_word}, {files} {file_word}"


def plain_lines(root: TreeEntry) -> list[str]:
    """Render *root* as ``tree``-style text lines."""
    lines = [root.name]

    def walk(entry: TreeEntry, prefix: str) -> None:
        last_index = len(entry.children) - 1
        for index, child in enumerate(entry.children):
            last = index == last_index
            lines.append(f"{prefix}{'└── ' if last else '├── '}{child.name}")
            if child.children:
                walk(child, prefix + ("    " if last else "│   "))

    walk(root, "")
    return lines


def _build_rich_tree(root: TreeEntry) -> Any:
    from rich.text import Text
    from rich.tree import Tree

    def label(entry: TreeEntry) -> Any:
        return Text(entry.name, style="bold blue" if entry.is_dir else "")

    tree = Tree(label(root), guide_style="dim")

    def walk(entry: TreeEntry, branch: Any) -> None:
        for child in entry.children:
            node = branch.add(label(child))
            if child.children:
                walk(child, node)

    walk(root, tree)
    return tree


def render_tree(root: TreeEntry) -> None:
    """Print *root* and its summary to stdout."""
    tree: Any = None
    if sys.stdout.isatty():
        try:
            tree = _build_rich_tree(root)
        except ModuleNotFoundError:
            tree = None

    if tree is None:
        for line in plain_lines(root):
            print(line, file=sys.stdout)
        print(file=sys.stdout)
        print(summary_line(root), file=sys.stdout)
        return

    stdout_console.print(tree)
    stdout_console.print()
    stdout_console.print(summary_line(root))
