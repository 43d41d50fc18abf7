"""Shared pytest fixtures and configuration for the boil test suite.

Guidelines
----------
* No test reads the real home directory or ``$BOILERPLATES_PATH``.
* No test launches a real editor or interactive prompt.
* Filesystem work happens under ``tmp_path`` only.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_environment(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    """Point HOME at an empty directory and clear boil's variables."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("BOILERPLATES_PATH", raising=False)
    monkeypatch.delenv("EDITOR", raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers installed by ``configure_logging`` between tests."""
    yield
    package_logger = logging.getLogger("boil")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture()
def boilerplates(tmp_path: Path) -> Path:
    """Create a small boilerplates tree and return its root.

    Layout::

        boilerplates/
        ├── .editorconfig
        ├── .gitignore
        ├── files/
        │   ├── file.txt
        │   └── nested/
        │       └── deep/
        │           └── leaf.txt
        └── python/
            └── setup.cfg
    """
    root = tmp_path / "boilerplates"
    (root / "files" / "nested" / "deep").mkdir(parents=True)
    (root / "python").mkdir()
    (root / ".git").mkdir()
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    (root / ".gitignore").write_text("*.pyc\n")
    (root / ".editorconfig").write_text("root = true\n")
    (root / "files" / "file.txt").write_bytes(b"hello boilerplate\n\x00\xff")
    (root / "files" / "nested" / "deep" / "leaf.txt").write_text("leaf\n")
    (root / "python" / "setup.cfg").write_text("[metadata]\nname = demo\n")
    return root
